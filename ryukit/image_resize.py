"""Bilinear resizing of 32-bit bitmaps."""

from __future__ import annotations

from typing import Optional

import numpy as np


def _axis(dst: int, src: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    scale = src / dst
    pos = (np.arange(dst, dtype=np.float64) + 0.5) * scale - 0.5
    pos = np.clip(pos, 0.0, src - 1)
    low = np.floor(pos).astype(np.intp)
    high = np.minimum(low + 1, src - 1)
    return low, high, pos - low


class ImageResize:
    """Holds a 4-byte-per-pixel bitmap and produces resized copies of it."""

    def __init__(self) -> None:
        self._source: Optional[np.ndarray] = None

    def read_bitmap32(self, bitmap: bytes, width: int, height: int) -> None:
        """Take ``width`` x ``height`` pixels of 4 bytes each from ``bitmap``."""
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        expected = width * height * 4
        if len(bitmap) < expected:
            raise ValueError(f"need {expected} bytes of bitmap data, got {len(bitmap)}")
        self._source = np.frombuffer(bytes(bitmap[:expected]), dtype=np.uint8).reshape(height, width, 4)

    def resize_bitmap32(self, width: int, height: int) -> bytes:
        """The stored bitmap resized to ``width`` x ``height`` with bilinear interpolation."""
        if self._source is None:
            raise RuntimeError("no bitmap has been read")
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        src_height, src_width = self._source.shape[:2]
        y0, y1, fy = _axis(height, src_height)
        x0, x1, fx = _axis(width, src_width)
        source = self._source.astype(np.float64)
        rows = source[y0] * (1 - fy)[:, None, None] + source[y1] * fy[:, None, None]
        out = rows[:, x0] * (1 - fx)[None, :, None] + rows[:, x1] * fx[None, :, None]
        return np.clip(np.rint(out), 0, 255).astype(np.uint8).tobytes()