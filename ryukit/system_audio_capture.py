"""Buffering and resampling of captured system (loopback) audio."""

from __future__ import annotations

import queue
import threading
from typing import Optional

from ryukit.audio_resampling import AudioResampling
from ryukit.memory_buffer import MemoryBuffer
from ryukit.simple_thread import SimpleThread

MAX_DELAY_COUNT = 2


class SystemAudioCapture:
    """Converts raw system audio packets into fixed-size blocks of the wanted format.

    Packets handed to :meth:`push` are collected on a background thread, cut
    into resampler input blocks and converted; each converted block is queued
    for :meth:`get_audio_data`. While more than ``MAX_DELAY_COUNT`` converted
    blocks are waiting, new packets are dropped so the delay stays bounded.
    """

    def __init__(self) -> None:
        self._queue_in: "queue.SimpleQueue[bytes]" = queue.SimpleQueue()
        self._queue_out: "queue.SimpleQueue[bytes]" = queue.SimpleQueue()
        self._buffer = MemoryBuffer()
        self._lock = threading.Lock()
        self._resampling = AudioResampling(on_data=self._queue_out.put)
        self._thread = SimpleThread(self._execute)

    def _execute(self, thread: SimpleThread) -> None:
        while not thread.is_terminated():
            try:
                data = self._queue_in.get_nowait()
            except queue.Empty:
                thread.sleep(1)
                continue
            with self._lock:
                self._buffer.write(data)
                src = self._buffer.read(self._resampling.src_buffer_size())
                if src:
                    self._resampling.execute(src)

    def _clear(self) -> None:
        self._buffer.clear()
        for pending in (self._queue_in, self._queue_out):
            while True:
                try:
                    pending.get_nowait()
                except queue.Empty:
                    break

    def start(
        self,
        in_channels: int,
        in_sample_rate: int,
        in_bits_per_sample: int,
        channels: int,
        sample_rate: int,
        sample_size: int,
        frames: int,
    ) -> None:
        """Discard pending audio and convert from the given input format from now on.

        Raises ``ValueError`` for formats the resampler does not support.
        """
        with self._lock:
            self._clear()
            self._resampling.open(
                in_channels,
                in_sample_rate,
                in_bits_per_sample // 8,
                channels,
                sample_rate,
                sample_size,
                frames,
            )

    def stop(self) -> None:
        """Stop converting; packets pushed afterwards produce no output."""
        with self._lock:
            self._resampling.close()

    def push(self, data: Optional[bytes]) -> None:
        """Hand over a packet of captured audio; empty packets are ignored."""
        if not data:
            return
        if self._queue_out.qsize() > MAX_DELAY_COUNT:
            return
        self._queue_in.put(bytes(data))

    def get_audio_data(self) -> Optional[bytes]:
        """The oldest converted block, or ``None`` if none is ready."""
        try:
            return self._queue_out.get_nowait()
        except queue.Empty:
            return None

    def close(self) -> None:
        """End the background thread and discard all pending audio."""
        self.stop()
        self._thread.terminate_and_wait()
        with self._lock:
            self._clear()

    def __enter__(self) -> "SystemAudioCapture":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()