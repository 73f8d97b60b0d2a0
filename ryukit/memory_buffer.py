"""A FIFO byte buffer that hands out fixed-size reads."""

from __future__ import annotations


class MemoryBuffer:
    """Accumulates written bytes and returns them in chunks of a requested size.

    A read succeeds only when at least ``size`` bytes are buffered; otherwise
    it returns ``None`` and leaves the buffer untouched.
    """

    def __init__(self) -> None:
        self._data = bytearray()

    def clear(self) -> None:
        """Discard everything that is buffered."""
        self._data.clear()

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data`` to the end of the buffer."""
        self._data += data

    def read(self, size: int) -> bytes | None:
        """Remove and return the first ``size`` bytes, or ``None`` if too few are buffered."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > len(self._data):
            return None
        chunk = bytes(self._data[:size])
        del self._data[:size]
        return chunk

    def __len__(self) -> int:
        return len(self._data)