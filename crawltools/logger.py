"""Registry of logger creators and logger factory functions."""

from __future__ import annotations

import sys
import threading
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, TextIO

from .logbase import LogFormat, LoggerType, LogLevel
from .stdlogger import new_logger_by

LoggerCreator = Callable[[Any, Any, TextIO, Optional[Iterable[Any]]], Any]

_creators: Dict[str, LoggerCreator] = {}
_lock = threading.RLock()


def _key(logger_type: Any) -> str:
    if isinstance(logger_type, Enum):
        return str(logger_type.value)
    return str(logger_type)


def register_logger(logger_type: Any, creator: Optional[LoggerCreator],
                    cover: bool) -> None:
    """Register a creator for a logger type.

    Raises ValueError for an empty type, a missing creator, or when the
    registration would not be accepted.
    """
    key = _key(logger_type) if logger_type is not None else ""
    if not key:
        raise ValueError("logger register error: invalid logger type")
    if creator is None:
        raise ValueError(
            f"logger register error: invalid logger creator (logger type: {key})"
        )
    with _lock:
        if key in _creators or not cover:
            raise ValueError(
                f'logger register error: already existing logger for type "{key}"'
            )
        _creators[key] = creator


def default_logger():
    """Return a new info-level text logger writing to standard output."""
    return create_logger(LoggerType.LOGRUS, LogLevel.INFO, LogFormat.TEXT,
                         sys.stdout, None)


def create_logger(logger_type: Any, level: Any, format: Any, writer: TextIO,
                  options: Optional[Iterable[Any]]):
    """Create a logger with the registered creator, or the built-in one."""
    with _lock:
        creator = _creators.get(_key(logger_type))
    if creator is not None:
        return creator(level, format, writer, options)
    return new_logger_by(level, format, writer, options)