"""JPEG compression of RGBA pixel buffers."""

from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

QUALITY = 80


def _check_size(width: int, height: int) -> int:
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    return width * height * 4


def encode(pixels: bytes, width: int, height: int) -> bytes:
    """Compress ``width`` x ``height`` RGBA pixels to JPEG (quality 80, 4:4:4)."""
    expected = _check_size(width, height)
    if len(pixels) < expected:
        raise ValueError(f"need {expected} bytes of RGBA pixels, got {len(pixels)}")
    image = Image.frombytes("RGBA", (width, height), bytes(pixels[:expected])).convert("RGB")
    output = io.BytesIO()
    image.save(output, format="JPEG", quality=QUALITY, subsampling=0)
    return output.getvalue()


def decode(data: bytes, width: int, height: int) -> bytes:
    """Decompress JPEG ``data`` of the given size into RGBA pixels with opaque alpha."""
    _check_size(width, height)
    try:
        with Image.open(io.BytesIO(bytes(data))) as image:
            image.load()
            if image.format != "JPEG":
                raise ValueError("data is not a JPEG image")
            if image.size != (width, height):
                raise ValueError(f"image is {image.size[0]}x{image.size[1]}, expected {width}x{height}")
            return image.convert("RGBA").tobytes()
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError("invalid JPEG data") from exc