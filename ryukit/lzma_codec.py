"""Whole-buffer LZMA compression in the .xz container."""

from __future__ import annotations

import lzma


def encode(data: bytes) -> bytes:
    """Compress ``data`` into one .xz stream with the default preset and a CRC64 check."""
    return lzma.compress(
        bytes(data),
        format=lzma.FORMAT_XZ,
        check=lzma.CHECK_CRC64,
        preset=lzma.PRESET_DEFAULT,
    )


def decode(data: bytes) -> bytes:
    """Decompress an .xz stream; raises ``lzma.LZMAError`` for corrupt input."""
    return lzma.decompress(bytes(data), format=lzma.FORMAT_XZ)