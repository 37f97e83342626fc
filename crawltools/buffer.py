"""A non-blocking, bounded FIFO buffer."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque


class ClosedBufferError(RuntimeError):
    """Raised when a closed buffer is used."""

    def __init__(self, message: str = "closed buffer") -> None:
        super().__init__(message)


class ClosedBufferPoolError(RuntimeError):
    """Raised when a closed buffer pool is used."""

    def __init__(self, message: str = "closed buffer pool") -> None:
        super().__init__(message)


class Buffer:
    """Thread-safe FIFO buffer of fixed capacity whose operations never block."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"illegal size for buffer: {size}")
        self._cap = size
        self._items: Deque[Any] = deque()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def cap(self) -> int:
        """Capacity of the buffer."""
        return self._cap

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    @property
    def closed(self) -> bool:
        """Whether the buffer has been closed."""
        with self._lock:
            return self._closed

    def put(self, datum: Any) -> bool:
        """Append a datum; return False if the buffer is full.

        Raises ClosedBufferError if the buffer is closed.
        """
        with self._lock:
            if self._closed:
                raise ClosedBufferError()
            if len(self._items) >= self._cap:
                return False
            self._items.append(datum)
            return True

    def get(self) -> Any:
        """Remove and return the oldest datum, or None if the buffer is empty.

        Data left in a closed buffer can still be taken; once it is drained,
        ClosedBufferError is raised.
        """
        with self._lock:
            if self._items:
                return self._items.popleft()
            if self._closed:
                raise ClosedBufferError()
            return None

    def close(self) -> bool:
        """Close the buffer; return False if it was already closed."""
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            return True