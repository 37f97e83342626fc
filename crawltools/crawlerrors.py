"""Errors raised by the crawler scheduler."""

from __future__ import annotations


class SchedulerError(Exception):
    """An error reported by the crawler scheduler."""

    error_type = "scheduler error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"crawler error: {self.error_type}: {message}")


def gen_error(err_msg: str) -> SchedulerError:
    """Build a scheduler error from a message."""
    return SchedulerError(err_msg)


def gen_error_by_error(err: BaseException) -> SchedulerError:
    """Build a scheduler error from another exception's message."""
    return SchedulerError(str(err))


def gen_parameter_error(err_msg: str) -> SchedulerError:
    """Build a scheduler error reporting an illegal parameter."""
    return SchedulerError(f"illegal parameter: {err_msg}")