"""A reader whose content can be read any number of times."""

from __future__ import annotations

import io
from typing import Any, Optional


class MultipleReader:
    """Holds all data of a source stream and hands out fresh readers over it."""

    def __init__(self, reader: Optional[Any] = None) -> None:
        if reader is None:
            data = b""
        else:
            try:
                content = reader.read()
            except OSError as exc:
                raise OSError(
                    f"multiple reader: couldn't create a new one: {exc}"
                ) from exc
            data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        self._data = data

    @property
    def data(self) -> bytes:
        """The held bytes."""
        return self._data

    def reader(self) -> io.BytesIO:
        """Return a new binary stream over the held data."""
        return io.BytesIO(self._data)