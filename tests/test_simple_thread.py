import threading
import time

from ryukit.simple_thread import SimpleThread


def test_loop_runs_until_terminated():
    ticks = []
    finished = threading.Event()

    def body(thread):
        while not thread.is_terminated():
            ticks.append(1)
            thread.sleep(100)

    worker = SimpleThread(body, on_terminated=lambda t: finished.set())
    time.sleep(0.25)
    worker.terminate_and_wait(timeout=2)
    assert finished.is_set()
    assert worker.is_terminated() is True
    count = len(ticks)
    assert count >= 1
    time.sleep(0.15)
    assert len(ticks) == count


def test_on_terminated_receives_thread():
    seen = []
    done = threading.Event()

    def record(thread):
        seen.append(thread)
        done.set()

    worker = SimpleThread(lambda t: None, on_terminated=record)
    assert done.wait(2)
    assert seen == [worker]


def test_terminate_interrupts_long_sleep():
    done = threading.Event()
    worker = SimpleThread(lambda t: t.sleep(60_000), on_terminated=lambda t: done.set())
    start = time.monotonic()
    worker.terminate_and_wait(timeout=5)
    assert done.is_set()
    assert time.monotonic() - start < 5


def test_sleep_tight_ends_on_terminate():
    done = threading.Event()
    worker = SimpleThread(lambda t: t.sleep_tight(), on_terminated=lambda t: done.set())
    time.sleep(0.05)
    worker.terminate_and_wait(timeout=5)
    assert done.is_set()


def test_wake_up_releases_sleep_tight():
    woke = threading.Event()

    def body(thread):
        thread.sleep_tight()
        woke.set()

    worker = SimpleThread(body)
    deadline = time.monotonic() + 5
    while not woke.is_set() and time.monotonic() < deadline:
        worker.wake_up()
        woke.wait(0.02)
    assert woke.is_set()
    assert worker.is_terminated() is False


def test_terminate_now_fires_callback_once():
    calls = []
    release = threading.Event()

    def body(thread):
        release.wait(5)

    worker = SimpleThread(body, on_terminated=calls.append)
    worker.terminate_now()
    assert calls == [worker]
    release.set()
    worker.terminate_and_wait(timeout=5)
    assert calls == [worker]
    assert worker.is_terminated() is True


def test_sleep_after_terminate_returns_immediately():
    worker = SimpleThread(lambda t: None)
    worker.terminate_and_wait(timeout=2)
    assert worker.is_terminated() is True
    start = time.monotonic()
    worker.sleep(10_000)
    assert time.monotonic() - start < 1
    assert worker.is_terminated() is True