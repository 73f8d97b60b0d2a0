"""Fire-and-forget UDP text messages."""

from __future__ import annotations

import socket


def send_to_udp(host: str, port: int, text: str) -> int:
    """Send ``text`` as UTF-8 in one datagram to the IPv4 address ``host``.

    ``host`` must be a dotted IPv4 address; names are not resolved.
    Returns the number of bytes sent.
    """
    try:
        socket.inet_pton(socket.AF_INET, host)
    except (OSError, ValueError) as exc:
        raise ValueError(f"not an IPv4 address: {host!r}") from exc

    payload = text.encode("utf-8")
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP) as sock:
        return sock.sendto(payload, (host, port))