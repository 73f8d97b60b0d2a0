"""A bounded byte accumulator for reassembling packets from a stream."""

from __future__ import annotations


class PacketReader:
    """Collects incoming bytes and releases them once enough have arrived."""

    CAPACITY = 1024 * 1024

    def __init__(self) -> None:
        self._buffer = bytearray()

    def clear(self) -> None:
        """Drop all buffered bytes."""
        self._buffer.clear()

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data``; raises ``BufferError`` if the capacity would be exceeded."""
        if len(self._buffer) + len(data) > self.CAPACITY:
            raise BufferError("packet reader capacity exceeded")
        self._buffer += data

    def read(self, size: int) -> bytes | None:
        """Remove and return ``size`` bytes, or ``None`` if not enough are buffered."""
        if not self.can_read(size):
            return None
        chunk = bytes(self._buffer[:size])
        del self._buffer[:size]
        return chunk

    def can_read(self, size: int) -> bool:
        """Whether at least ``size`` bytes are buffered."""
        return len(self._buffer) >= size

    def __len__(self) -> int:
        return len(self._buffer)