"""Audio error codes, codec settings, volume scaling and a playback block queue."""

from __future__ import annotations

import threading
from collections import deque
from enum import IntEnum

import numpy as np

CHANNEL = 1
SAMPLE_RATE = 48000
SAMPLE_SIZE = 4
FRAMES_PER_BUFFER = 5760
BITRATE = 64000
AUDIO_DATA_SIZE = CHANNEL * FRAMES_PER_BUFFER * SAMPLE_SIZE

# Maximum tolerated delay, in packets of 120 ms.
MAX_DELAY_LIMIT_COUNT = 4

_VOLUME_EPSILON = 0.0001


class AudioErrorCode(IntEnum):
    """Error codes reported by the audio devices and codecs."""

    NO_DEFAULT_INPUT_DEVICE = -1
    OPEN_INPUT_DEVICE = -2
    START_INPUT_DEVICE = -3
    NO_DEFAULT_OUTPUT_DEVICE = -4
    OPEN_OUTPUT_DEVICE = -5
    START_OUTPUT_DEVICE = -6
    OPEN_ENCODER = -7
    OPEN_DECODE = -8


def _check_sample_size(sample_size: int) -> None:
    if sample_size not in (2, 4):
        raise ValueError("sample size must be 2 (16-bit) or 4 (32-bit)")


def apply_volume(data: bytes, volume: float, sample_size: int = 4) -> bytes:
    """Scale PCM samples by ``volume``; a volume of 1.0 returns the data unchanged."""
    _check_sample_size(sample_size)
    data = bytes(data)
    if abs(volume - 1.0) <= _VOLUME_EPSILON:
        return data
    if sample_size == 4:
        samples = np.frombuffer(data, dtype="<f4")
        return (samples * np.float32(volume)).astype("<f4").tobytes()
    samples = np.frombuffer(data, dtype="<i2").astype(np.float64) * volume
    return np.clip(np.rint(samples), -32768, 32767).astype("<i2").tobytes()


class AudioOutputQueue:
    """Queues audio packets for playback and hands them out in fixed-size blocks.

    When the queue is empty, :meth:`next_block` returns silence.
    """

    def __init__(self, channels: int, sample_rate: int, sample_size: int, frames: int) -> None:
        _check_sample_size(sample_size)
        self.channels = channels
        self.sample_rate = sample_rate
        self.sample_size = sample_size
        self.frames = frames
        self.buffer_size = sample_size * frames * channels
        self.volume = 1.0
        self._queue: deque[bytes] = deque()
        self._lock = threading.Lock()

    def play(self, data: bytes) -> None:
        """Queue a packet for playback."""
        with self._lock:
            self._queue.append(bytes(data))

    def skip(self, count: int = 1) -> int:
        """Drop up to ``count`` packets from the front; returns how many were dropped."""
        dropped = 0
        with self._lock:
            while dropped < count and self._queue:
                self._queue.popleft()
                dropped += 1
        return dropped

    def delay_count(self) -> int:
        """Number of packets not yet played."""
        with self._lock:
            return len(self._queue)

    def next_block(self) -> bytes:
        """The next block of ``buffer_size`` bytes, with volume applied, or silence."""
        with self._lock:
            packet = self._queue.popleft() if self._queue else None
        if packet is None:
            return bytes(self.buffer_size)
        block = packet[: self.buffer_size].ljust(self.buffer_size, b"\x00")
        return apply_volume(block, self.volume, self.sample_size)