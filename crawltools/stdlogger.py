"""A structured logger writing text or JSON lines to any writable stream."""

from __future__ import annotations

import json
import string
import sys
import threading
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, TextIO

from .fields import Field
from .logbase import LogFormat, LogLevel, OptWithLocation, get_invoker_location

_LEVEL_NAMES = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
    LogLevel.PANIC: "panic",
}

_PLAIN_CHARS = frozenset(string.ascii_letters + string.digits + "-._/@^+")
_RESERVED_KEYS = ("time", "msg", "level")


class LoggerPanic(Exception):
    """Raised after a record is written at panic level."""


def _format_timestamp(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    millis = f"{moment.microsecond // 1000:03d}".rstrip("0")
    return f"{text}.{millis}" if millis else text


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, sort_keys=True, default=str, ensure_ascii=False)
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _quote_if_needed(text: str) -> str:
    if text and all(ch in _PLAIN_CHARS for ch in text):
        return text
    return json.dumps(text, ensure_ascii=False)


class StdLogger:
    """Logger with level filtering, extra fields and an optional caller location."""

    def __init__(
        self,
        level: LogLevel,
        format: Any,
        writer: TextIO,
        opt_with_location: OptWithLocation = OptWithLocation(),
        fields: Optional[Dict[str, Any]] = None,
        lock: Optional[threading.Lock] = None,
    ) -> None:
        self._level = level
        self._format = format
        self._writer = writer
        self._opt_with_location = opt_with_location
        self._fields: Dict[str, Any] = dict(fields or {})
        self._lock = lock if lock is not None else threading.Lock()

    @property
    def name(self) -> str:
        return "logrus"

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def format(self) -> Any:
        return self._format

    @property
    def options(self) -> list:
        return [self._opt_with_location]

    def debug(self, msg: Any, *args: Any) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def info(self, msg: Any, *args: Any) -> None:
        self._log(LogLevel.INFO, msg, args)

    def warn(self, msg: Any, *args: Any) -> None:
        self._log(LogLevel.WARN, msg, args)

    def error(self, msg: Any, *args: Any) -> None:
        self._log(LogLevel.ERROR, msg, args)

    def fatal(self, msg: Any, *args: Any) -> None:
        """Log at fatal level, then exit the process with status 1."""
        self._log(LogLevel.FATAL, msg, args)
        raise SystemExit(1)

    def panic(self, msg: Any, *args: Any) -> None:
        """Log at panic level, then raise LoggerPanic."""
        message = self._log(LogLevel.PANIC, msg, args)
        raise LoggerPanic(message)

    def with_fields(self, *args: Field) -> "StdLogger":
        """Return a logger that also records the given fields."""
        if not args:
            return self
        merged = dict(self._fields)
        merged.update((field.name, field.value) for field in args)
        return StdLogger(
            self._level,
            self._format,
            self._writer,
            self._opt_with_location,
            merged,
            self._lock,
        )

    def _location_data(self) -> Dict[str, Any]:
        # Frames: 0 locator, 1 this method, 2 _log, 3 public method, 4 caller.
        func_path, file_name, line = get_invoker_location(4)
        return {"func_path": func_path, "file_name": file_name, "line": line}

    def _log(self, level: LogLevel, msg: Any, args: tuple) -> str:
        message = str(msg) % args if args else str(msg)
        if level < self._level:
            return message
        data = dict(self._fields)
        if self._opt_with_location.value:
            data["location"] = self._location_data()
        for key in _RESERVED_KEYS:
            if key in data:
                data["fields." + key] = data.pop(key)
        timestamp = _format_timestamp(datetime.now())
        if self._format == LogFormat.JSON:
            line = self._json_line(level, message, timestamp, data)
        else:
            line = self._text_line(level, message, timestamp, data)
        with self._lock:
            self._writer.write(line + "\n")
        return message

    @staticmethod
    def _json_line(level: LogLevel, message: str, timestamp: str,
                   data: Dict[str, Any]) -> str:
        record = dict(data)
        record.update(level=_LEVEL_NAMES[level], msg=message, time=timestamp)
        return json.dumps(record, sort_keys=True, default=str,
                          separators=(",", ":"), ensure_ascii=False)

    @staticmethod
    def _text_line(level: LogLevel, message: str, timestamp: str,
                   data: Dict[str, Any]) -> str:
        parts = [
            f"time={_quote_if_needed(timestamp)}",
            f"level={_LEVEL_NAMES[level]}",
        ]
        if message:
            parts.append(f"msg={_quote_if_needed(message)}")
        parts.extend(
            f"{key}={_quote_if_needed(_stringify(data[key]))}" for key in sorted(data)
        )
        return " ".join(parts)


def new_logger() -> StdLogger:
    """Create an info-level text logger writing to standard output."""
    return new_logger_by(LogLevel.INFO, LogFormat.TEXT, sys.stdout, None)


def new_logger_by(
    level: Any,
    format: Any,
    writer: TextIO,
    options: Optional[Iterable[Any]],
) -> StdLogger:
    """Create a logger from a level, a format, a writer and options.

    An unknown level falls back to info; a format other than JSON writes text.
    """
    try:
        log_level = LogLevel(level)
    except ValueError:
        log_level = LogLevel.INFO
    opt_with_location = OptWithLocation()
    for opt in options or ():
        if opt.name() == "with location":
            opt_with_location = (
                opt if isinstance(opt, OptWithLocation) else OptWithLocation()
            )
    return StdLogger(log_level, format, writer, opt_with_location)