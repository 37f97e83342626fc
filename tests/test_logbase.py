import inspect

from crawltools.logbase import (
    LogFormat,
    LoggerType,
    OptWithLocation,
    get_invoker_location,
)


def test_format_and_type_values():
    assert LogFormat("json") is LogFormat.JSON
    assert LogFormat("text") is LogFormat.TEXT
    assert LoggerType("logrus") is LoggerType.LOGRUS


def test_opt_with_location():
    assert OptWithLocation().name() == "with location"
    assert OptWithLocation().value is False
    assert OptWithLocation(True).value is True
    assert OptWithLocation(True) == OptWithLocation(value=True)


def test_invoker_location_of_caller():
    result, line = get_invoker_location(1), inspect.currentframe().f_lineno
    func_path, file_name, lineno = result
    assert func_path.endswith("test_invoker_location_of_caller")
    assert file_name == "test_logbase.py"
    assert lineno == line


def test_invoker_location_of_itself():
    func_path, file_name, _ = get_invoker_location(0)
    assert func_path.endswith("get_invoker_location")
    assert file_name == "logbase.py"


def test_invoker_location_too_deep():
    assert get_invoker_location(100000) == ("", "", -1)