import pytest

from crawltools.crawlerrors import (
    SchedulerError,
    gen_error,
    gen_error_by_error,
    gen_parameter_error,
)


def test_gen_error():
    err = gen_error("testing error")
    assert isinstance(err, SchedulerError)
    assert err.error_type == "scheduler error"
    assert str(err) == "crawler error: scheduler error: testing error"
    assert err.message == "testing error"


def test_gen_error_by_error():
    err = gen_error_by_error(ValueError("testing error"))
    assert err.error_type == "scheduler error"
    assert str(err) == "crawler error: scheduler error: testing error"


def test_gen_parameter_error():
    err = gen_parameter_error("testing error")
    assert err.error_type == "scheduler error"
    assert str(err) == (
        "crawler error: scheduler error: illegal parameter: testing error"
    )


@pytest.mark.parametrize(
    "factory, argument, expected",
    [
        (gen_error, "boom", "crawler error: scheduler error: boom"),
        (
            gen_error_by_error,
            RuntimeError("boom"),
            "crawler error: scheduler error: boom",
        ),
        (
            gen_parameter_error,
            "boom",
            "crawler error: scheduler error: illegal parameter: boom",
        ),
    ],
)
def test_generated_errors_are_exceptions(factory, argument, expected):
    err = factory(argument)
    assert isinstance(err, Exception)
    assert isinstance(err, SchedulerError)
    assert str(err) == expected
    assert err.error_type == "scheduler error"