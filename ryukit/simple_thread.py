"""A background thread with cooperative termination and interruptible sleep."""

from __future__ import annotations

import threading
from typing import Callable, Optional


class SimpleThread:
    """Runs ``target(self)`` on a daemon thread started at construction.

    The target polls :meth:`is_terminated` and uses :meth:`sleep` or
    :meth:`sleep_tight`; both return early on :meth:`terminate` or
    :meth:`wake_up`. ``on_terminated(self)`` is called once, when the target
    returns or when :meth:`terminate_now` is called.
    """

    def __init__(
        self,
        target: Callable[["SimpleThread"], None],
        on_terminated: Optional[Callable[["SimpleThread"], None]] = None,
    ) -> None:
        self._target = target
        self.on_terminated = on_terminated
        self._cond = threading.Condition()
        self._terminated = False
        self._generation = 0
        self._fired = False
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            self._target(self)
        finally:
            self._fire_terminated()

    def _fire_terminated(self) -> None:
        with self._cond:
            if self._fired:
                return
            self._fired = True
            callback = self.on_terminated
        if callback is not None:
            callback(self)

    def _wait(self, timeout: Optional[float]) -> None:
        with self._cond:
            if self._terminated:
                return
            generation = self._generation
            self._cond.wait_for(
                lambda: self._terminated or self._generation != generation,
                timeout=timeout,
            )

    def sleep(self, millis: int) -> None:
        """Wait up to ``millis`` milliseconds, or until woken or terminated."""
        self._wait(max(millis, 0) / 1000)

    def sleep_tight(self) -> None:
        """Wait until woken or terminated."""
        self._wait(None)

    def wake_up(self) -> None:
        """Release any current sleep."""
        with self._cond:
            self._generation += 1
            self._cond.notify_all()

    def terminate(self) -> None:
        """Ask the thread to stop and wake it."""
        with self._cond:
            self._terminated = True
            self._cond.notify_all()

    def terminate_and_wait(self, timeout: Optional[float] = None) -> None:
        """Ask the thread to stop and wait for it to finish."""
        self.terminate()
        if self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def terminate_now(self) -> None:
        """Mark the thread terminated and fire ``on_terminated`` without waiting."""
        self.terminate()
        self._fire_terminated()

    def is_terminated(self) -> bool:
        with self._cond:
            return self._terminated