"""Basic logging vocabulary: levels, formats, logger types and options."""

from __future__ import annotations

import inspect
import os
import sys
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Protocol, Tuple


class LogLevel(IntEnum):
    """Severity of a log record; a larger value is more severe."""

    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    PANIC = 6


class LogFormat(str, Enum):
    """Output format of a logger."""

    TEXT = "text"
    JSON = "json"


class LoggerType(str, Enum):
    """Known logger implementations."""

    LOGRUS = "logrus"


class Option(Protocol):
    """A logger option, identified by its name."""

    def name(self) -> str: ...


@dataclass(frozen=True)
class OptWithLocation:
    """Option telling a logger to record the caller's code location."""

    value: bool = False

    def name(self) -> str:
        return "with location"


def get_invoker_location(skip_number: int) -> Tuple[str, str, int]:
    """Return (function path, file name, line) of the frame ``skip_number`` levels up.

    A ``skip_number`` of 0 describes this function itself. When the stack is
    not that deep, ``("", "", -1)`` is returned.
    """
    try:
        frame = sys._getframe(skip_number)
    except ValueError:
        return "", "", -1
    code = frame.f_code
    module = inspect.getmodulename(code.co_filename) or ""
    func_path = f"{module}.{code.co_name}" if module else code.co_name
    file_name = os.path.basename(code.co_filename)
    return func_path, file_name, frame.f_lineno