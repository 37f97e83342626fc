"""Scheduler status values and the rules for changing between them."""

from __future__ import annotations

import contextlib
from enum import IntEnum
from typing import Any, ContextManager, Optional

from .crawlerrors import gen_error


class Status(IntEnum):
    """Lifecycle state of a scheduler."""

    UNINITIALIZED = 0
    INITIALIZING = 1
    INITIALIZED = 2
    STARTING = 3
    STARTED = 4
    STOPPING = 5
    STOPPED = 6


_DESCRIPTIONS = {
    Status.UNINITIALIZED: "uninitialized",
    Status.INITIALIZING: "initializing",
    Status.INITIALIZED: "initialized",
    Status.STARTING: "starting",
    Status.STARTED: "started",
    Status.STOPPING: "stopping",
    Status.STOPPED: "stopped",
}

_BUSY_MESSAGES = {
    Status.INITIALIZING: "the scheduler is being initialized!",
    Status.STARTING: "the scheduler is being started!",
    Status.STOPPING: "the scheduler is being stopped!",
}


def check_status(current_status: Any, wanted_status: Any,
                 lock: Optional[ContextManager] = None) -> Any:
    """Check that the scheduler may move from one status to another.

    Rules: no change while initializing, starting or stopping; the wanted
    status must be initializing, starting or stopping; an uninitialized
    scheduler can be neither started nor stopped; a started one can be
    neither initialized nor started; only a started one can be stopped.
    Returns the wanted status, or raises SchedulerError.
    """
    with lock if lock is not None else contextlib.nullcontext():
        busy = _BUSY_MESSAGES.get(current_status)
        if busy is not None:
            raise gen_error(busy)
        if current_status == Status.UNINITIALIZED and wanted_status in (
            Status.STARTING,
            Status.STOPPING,
        ):
            raise gen_error("the scheduler has not yet been initialized!")
        if wanted_status == Status.INITIALIZING:
            if current_status == Status.STARTED:
                raise gen_error("the scheduler has been started!")
        elif wanted_status == Status.STARTING:
            if current_status == Status.UNINITIALIZED:
                raise gen_error("the scheduler has not been initialized!")
            if current_status == Status.STARTED:
                raise gen_error("the scheduler has been started!")
        elif wanted_status == Status.STOPPING:
            if current_status != Status.STARTED:
                raise gen_error("the scheduler has not been started!")
        else:
            raise gen_error(
                "unsupported wanted status for check! "
                f"(wantedStatus: {int(wanted_status)})"
            )
        return wanted_status


def get_status_description(status: Any) -> str:
    """Return the text description of a status, or "unknown"."""
    return _DESCRIPTIONS.get(status, "unknown")