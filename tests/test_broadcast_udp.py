import socket

import pytest

from ryukit.broadcast_udp import BroadcastUDP


@pytest.fixture
def receiver():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2)
    yield sock
    sock.close()


def test_messages_arrive_in_order(receiver):
    port = receiver.getsockname()[1]
    with BroadcastUDP(host="127.0.0.1") as sender:
        assert sender.host == "127.0.0.1"
        sender.open(port)
        sender.send("first")
        sender.send("둘째")
        assert receiver.recvfrom(4096)[0] == b"first"
        assert receiver.recvfrom(4096)[0] == "둘째".encode("utf-8")


def test_messages_queued_before_open_are_sent(receiver):
    port = receiver.getsockname()[1]
    sender = BroadcastUDP(host="127.0.0.1")
    assert sender.host == "127.0.0.1"
    sender.send("early")
    sender.open(port)
    try:
        assert receiver.recvfrom(4096)[0] == b"early"
    finally:
        sender.close()


def test_close_flushes_pending_messages(receiver):
    port = receiver.getsockname()[1]
    sender = BroadcastUDP(host="127.0.0.1")
    assert sender.host == "127.0.0.1"
    sender.open(port)
    messages = [f"m{i}" for i in range(10)]
    for message in messages:
        sender.send(message)
    sender.close()
    got = [receiver.recvfrom(4096)[0].decode("utf-8") for _ in messages]
    assert got == messages


def test_close_without_open_is_harmless_and_reopen_works(receiver):
    port = receiver.getsockname()[1]
    sender = BroadcastUDP(host="127.0.0.1")
    sender.close()
    assert sender.host == "127.0.0.1"
    sender.open(port)
    sender.close()
    sender.open(port)
    sender.send("again")
    sender.close()
    assert receiver.recvfrom(4096)[0] == b"again"


def test_default_host_is_broadcast_address():
    assert BroadcastUDP().host == "255.255.255.255"