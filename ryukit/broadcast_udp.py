"""Queued UDP broadcasting of text messages on a background thread."""

from __future__ import annotations

import queue
import socket
import threading
from typing import Optional


class BroadcastUDP:
    """Sends queued text messages as UTF-8 datagrams to ``host`` on a port.

    Messages may be queued at any time; they go out while the sender is open,
    in the order they were queued.
    """

    def __init__(self, host: str = "255.255.255.255") -> None:
        self.host = host
        self._queue: "queue.Queue[Optional[str]]" = queue.Queue()
        self._socket: Optional[socket.socket] = None
        self._worker: Optional[threading.Thread] = None
        self._port = 0

    def open(self, port: int) -> None:
        """Open the socket and start sending to ``port``."""
        self.close()
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        self._socket = sock
        self._port = port
        self._worker = threading.Thread(target=self._run, args=(sock, port), daemon=True)
        self._worker.start()

    def _run(self, sock: socket.socket, port: int) -> None:
        while True:
            text = self._queue.get()
            if text is None:
                return
            try:
                sock.sendto(text.encode("utf-8"), (self.host, port))
            except OSError:
                continue

    def close(self) -> None:
        """Send what is already queued, then stop and close the socket."""
        if self._worker is None:
            return
        self._queue.put(None)
        self._worker.join()
        self._worker = None
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def send(self, text: str) -> None:
        """Queue ``text`` for sending."""
        self._queue.put(text)

    def __enter__(self) -> "BroadcastUDP":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()