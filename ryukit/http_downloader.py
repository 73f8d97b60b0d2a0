"""Streaming HTTP downloads with a data callback and cancellation."""

from __future__ import annotations

import threading
import urllib.error
import urllib.request
from typing import Callable, Optional

DataCallback = Callable[[bytes, int], None]


class HttpDownloader:
    """Downloads a URL chunk by chunk, passing each chunk and the running total to ``on_data``.

    Error responses are still delivered and count as a completed transfer;
    only transport failures and cancellation make :meth:`download` return ``False``.
    """

    CHUNK_SIZE = 16 * 1024
    USER_AGENT = "ryukit-agent/1.0"
    timeout = 30.0

    def __init__(self, on_data: Optional[DataCallback] = None) -> None:
        self.on_data = on_data
        self.total = 0
        self._stop = threading.Event()

    def download(self, url: str) -> bool:
        """Fetch ``url``; returns ``True`` when the transfer completed."""
        self._stop.clear()
        self.total = 0
        request = urllib.request.Request(url, headers={"User-Agent": self.USER_AGENT})
        try:
            try:
                with urllib.request.urlopen(request, timeout=self.timeout) as response:
                    return self._consume(response)
            except urllib.error.HTTPError as error:
                try:
                    return self._consume(error)
                finally:
                    error.close()
        except (urllib.error.URLError, OSError, ValueError):
            return False

    def _consume(self, stream) -> bool:
        while True:
            if self._stop.is_set():
                return False
            chunk = stream.read(self.CHUNK_SIZE)
            if not chunk:
                return True
            self.total += len(chunk)
            if self.on_data is not None:
                self.on_data(chunk, self.total)

    def stop(self) -> None:
        """Abort the current download at the next chunk."""
        self._stop.set()