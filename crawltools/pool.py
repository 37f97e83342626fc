"""A blocking pool of buffers that grows and shrinks with demand."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque

from .buffer import Buffer, ClosedBufferPoolError


class Pool:
    """Blocking data pool made of equally sized buffers.

    ``put`` blocks while every buffer is full and no more may be added;
    ``get`` blocks while the pool is empty. Both raise ClosedBufferPoolError
    once the pool is closed.
    """

    def __init__(self, buffer_cap: int, max_buffer_number: int) -> None:
        if buffer_cap <= 0:
            raise ValueError(f"illegal buffer cap for buffer pool: {buffer_cap}")
        if max_buffer_number <= 0:
            raise ValueError(
                f"illegal max buffer number for buffer pool: {max_buffer_number}"
            )
        self._buffer_cap = buffer_cap
        self._max_buffer_number = max_buffer_number
        self._buffers: Deque[Buffer] = deque([Buffer(buffer_cap)])
        self._total = 0
        self._closed = False
        self._cond = threading.Condition()

    @property
    def buffer_cap(self) -> int:
        """Capacity shared by every buffer in the pool."""
        return self._buffer_cap

    @property
    def max_buffer_number(self) -> int:
        """Largest number of buffers the pool may hold."""
        return self._max_buffer_number

    @property
    def buffer_number(self) -> int:
        """Current number of buffers."""
        with self._cond:
            return len(self._buffers)

    @property
    def total(self) -> int:
        """Number of data held by the pool."""
        with self._cond:
            return self._total

    @property
    def closed(self) -> bool:
        """Whether the pool has been closed."""
        with self._cond:
            return self._closed

    def _use(self, buf: Buffer) -> None:
        self._buffers.remove(buf)
        self._buffers.append(buf)

    def put(self, datum: Any) -> None:
        """Store a datum, blocking until there is room."""
        with self._cond:
            while True:
                if self._closed:
                    raise ClosedBufferPoolError()
                for buf in list(self._buffers):
                    if buf.put(datum):
                        self._use(buf)
                        self._total += 1
                        self._cond.notify_all()
                        return
                if len(self._buffers) < self._max_buffer_number:
                    new_buf = Buffer(self._buffer_cap)
                    new_buf.put(datum)
                    self._buffers.append(new_buf)
                    self._total += 1
                    self._cond.notify_all()
                    return
                self._cond.wait()

    def get(self) -> Any:
        """Remove and return a datum, blocking until one is available."""
        with self._cond:
            while True:
                if self._closed:
                    raise ClosedBufferPoolError()
                for buf in list(self._buffers):
                    if len(buf) > 0:
                        datum = buf.get()
                        self._use(buf)
                        self._total -= 1
                        self._cond.notify_all()
                        return datum
                # Every buffer is empty: keep only one while waiting.
                while len(self._buffers) > 1:
                    self._buffers.popleft().close()
                self._cond.wait()

    def close(self) -> bool:
        """Close the pool and its buffers; return False if already closed."""
        with self._cond:
            if self._closed:
                return False
            self._closed = True
            for buf in self._buffers:
                buf.close()
            self._cond.notify_all()
            return True