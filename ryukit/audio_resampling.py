"""Sample-rate, channel and sample-format conversion of interleaved PCM blocks."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ryukit.memory_buffer import MemoryBuffer

DataCallback = Callable[[bytes], None]

_FORMATS = {2: "<i2", 4: "<f4"}
_INT16_SCALE = 32768.0


def _decode(data: bytes, sample_size: int) -> np.ndarray:
    samples = np.frombuffer(data, dtype=_FORMATS[sample_size]).astype(np.float64)
    if sample_size == 2:
        samples /= _INT16_SCALE
    return samples


def _encode(samples: np.ndarray, sample_size: int) -> bytes:
    if sample_size == 2:
        scaled = np.clip(np.rint(samples * _INT16_SCALE), -32768, 32767)
        return scaled.astype("<i2").tobytes()
    return samples.astype("<f4").tobytes()


def _remix(frames: np.ndarray, channels: int) -> np.ndarray:
    if frames.shape[1] == channels:
        return frames
    if channels == 1:
        return frames.mean(axis=1, keepdims=True)
    return np.repeat(frames, channels, axis=1)


class AudioResampling:
    """Converts fixed-size blocks of interleaved PCM to another layout and rate.

    Each :meth:`execute` consumes :meth:`src_buffer_size` bytes (1024 frames),
    buffers the converted audio and releases at most one output chunk of
    ``frames`` frames, which is passed to ``on_data`` and returned.
    Channels may be 1 or 2; sample sizes 2 (16-bit integer) or 4 (32-bit float).
    """

    SRC_FRAMES = 1024

    def __init__(self, on_data: Optional[DataCallback] = None) -> None:
        self.on_data = on_data
        self._buffer = MemoryBuffer()
        self._opened = False
        self._src_channels = 0
        self._src_rate = 0
        self._src_sample_size = 0
        self._dst_channels = 0
        self._dst_rate = 0
        self._dst_sample_size = 0
        self._dst_data_size = 0
        self._prev = np.zeros(1)
        self._pos = 1.0

    def open(
        self,
        in_channels: int,
        in_samples: int,
        in_sample_size: int,
        out_channels: int,
        out_samples: int,
        out_sample_size: int,
        frames: int,
    ) -> None:
        """Configure the conversion; raises ``ValueError`` for unsupported settings."""
        self.close()
        if in_channels not in (1, 2):
            raise ValueError(f"unsupported input channel count: {in_channels}")
        if out_channels not in (1, 2):
            raise ValueError(f"unsupported output channel count: {out_channels}")
        if in_sample_size not in _FORMATS:
            raise ValueError(f"unsupported input sample size: {in_sample_size}")
        if out_sample_size not in _FORMATS:
            raise ValueError(f"unsupported output sample size: {out_sample_size}")
        if in_samples <= 0 or out_samples <= 0:
            raise ValueError("sample rates must be positive")
        if frames <= 0:
            raise ValueError("frames must be positive")

        self._src_channels = in_channels
        self._src_rate = in_samples
        self._src_sample_size = in_sample_size
        self._dst_channels = out_channels
        self._dst_rate = out_samples
        self._dst_sample_size = out_sample_size
        self._dst_data_size = frames * out_channels * out_sample_size
        self._prev = np.zeros(out_channels)
        self._pos = 1.0
        self._opened = True

    def close(self) -> None:
        """Drop the configuration and any buffered output."""
        self._opened = False
        self._buffer.clear()
        self._pos = 1.0

    def _resample(self, block: np.ndarray) -> np.ndarray:
        if self._src_rate == self._dst_rate and self._pos == 1.0:
            self._prev = block[-1]
            return block
        n = len(block)
        padded = np.vstack([self._prev[None, :], block])
        step = self._src_rate / self._dst_rate
        count = int(np.floor((n - self._pos) / step)) + 1 if self._pos <= n else 0
        times = self._pos + np.arange(count) * step
        low = np.floor(times).astype(np.intp)
        high = np.minimum(low + 1, n)
        frac = (times - low)[:, None]
        out = padded[low] * (1 - frac) + padded[high] * frac
        self._pos = self._pos + count * step - n
        self._prev = block[-1]
        return out

    def execute(self, data: bytes) -> Optional[bytes]:
        """Convert one input block; returns the next output chunk if one is complete.

        Does nothing and returns ``None`` when the converter is not open.
        """
        if not self._opened:
            return None
        need = self.src_buffer_size()
        if len(data) < need:
            raise ValueError(f"need {need} bytes of input, got {len(data)}")
        samples = _decode(bytes(data[:need]), self._src_sample_size)
        frames = _remix(samples.reshape(-1, self._src_channels), self._dst_channels)
        converted = self._resample(frames)
        self._buffer.write(_encode(converted.reshape(-1), self._dst_sample_size))
        chunk = self._buffer.read(self._dst_data_size)
        if chunk is not None and self.on_data is not None:
            self.on_data(chunk)
        return chunk

    def src_buffer_size(self) -> int:
        """Bytes consumed by each :meth:`execute`."""
        return self.SRC_FRAMES * self._src_channels * self._src_sample_size