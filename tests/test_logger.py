import io
import sys

import pytest

from crawltools.logbase import LogFormat, LoggerType, LogLevel, OptWithLocation
from crawltools.logger import create_logger, default_logger, register_logger


def test_default_logger():
    logger = default_logger()
    assert logger.name == "logrus"
    assert logger.level is LogLevel.INFO
    assert logger.format == LogFormat.TEXT


def test_logrus_logger():
    logger = create_logger(LoggerType.LOGRUS, LogLevel.DEBUG, LogFormat.JSON,
                           sys.stderr, [OptWithLocation(value=True)])
    assert logger.name == "logrus"
    assert logger.level == LogLevel.DEBUG
    assert logger.format == LogFormat.JSON


def test_unknown_type_falls_back_to_builtin():
    out = io.StringIO()
    logger = create_logger("no-such-type", LogLevel.INFO, LogFormat.TEXT, out, None)
    logger.info("hello")
    assert logger.name == "logrus"
    assert "msg=hello" in out.getvalue()


def test_register_rejects_empty_type():
    with pytest.raises(ValueError, match="invalid logger type"):
        register_logger("", lambda *a: None, True)


def test_register_rejects_missing_creator():
    with pytest.raises(ValueError, match="invalid logger creator"):
        register_logger("custom-missing", None, True)


def test_register_without_cover_is_refused():
    with pytest.raises(ValueError, match="already existing"):
        register_logger("custom-nocover", lambda *a: None, False)
    out = io.StringIO()
    logger = create_logger("custom-nocover", LogLevel.INFO, LogFormat.TEXT, out, None)
    assert logger.name == "logrus"


def test_registered_creator_is_used_and_not_replaced():
    calls = []

    def creator(level, format, writer, options):
        calls.append((level, format, writer, options))
        return "custom logger"

    register_logger("custom-used", creator, True)
    out = io.StringIO()
    result = create_logger("custom-used", LogLevel.WARN, LogFormat.JSON, out, None)
    assert result == "custom logger"
    assert calls == [(LogLevel.WARN, LogFormat.JSON, out, None)]
    with pytest.raises(ValueError, match="already existing"):
        register_logger("custom-used", creator, True)


def test_builtin_type_cannot_be_overridden():
    with pytest.raises(ValueError):
        register_logger(LoggerType.LOGRUS, lambda *a: None, False)
    assert default_logger().name == "logrus"