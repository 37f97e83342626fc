import pytest

from crawltools.crawlerrors import SchedulerError
from crawltools.domain import get_primary_domain


def test_ip_host_is_returned_unchanged():
    assert get_primary_domain("127.0.0.1") == "127.0.0.1"


@pytest.mark.parametrize(
    "host, expected",
    [
        ("cn.bing.com", "bing.com"),
        ("bing.com", "bing.com"),
        ("  bing.com  ", "bing.com"),
        ("www.beijing.gov.cn", "beijing.gov.cn"),
        ("a.b.example.com.cn", "example.com.cn"),
        ("www.example.io", "example.io"),
        ("news.example.info", "example.info"),
    ],
)
def test_primary_domain(host, expected):
    assert get_primary_domain(host) == expected


def test_empty_host():
    with pytest.raises(SchedulerError, match="empty host"):
        get_primary_domain("")


def test_blank_host():
    with pytest.raises(SchedulerError, match="empty host"):
        get_primary_domain("   ")


def test_unrecognized_host():
    with pytest.raises(SchedulerError, match="unrecognized host"):
        get_primary_domain("123.abc")


def test_bare_suffix_is_unrecognized():
    with pytest.raises(SchedulerError, match="unrecognized host"):
        get_primary_domain(".com")