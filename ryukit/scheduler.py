"""A worker thread that runs queued tasks and an optional repeating job."""

from __future__ import annotations

import queue
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ryukit.simple_thread import SimpleThread


@dataclass(frozen=True)
class Task:
    """A unit of work queued on a :class:`Scheduler`."""

    task: int
    text: str = ""
    data: Any = None
    size: int = 0
    tag: int = 0


class Scheduler:
    """Runs queued tasks through ``on_task`` on a background thread.

    Between task batches, while started, ``on_repeat`` is called repeatedly;
    when stopped the thread naps briefly and is woken by new tasks.
    """

    def __init__(
        self,
        on_task: Optional[Callable[[Task], None]] = None,
        on_repeat: Optional[Callable[[], None]] = None,
    ) -> None:
        self.on_task = on_task
        self.on_repeat = on_repeat
        self._started = False
        self._queue: "queue.SimpleQueue[Task]" = queue.SimpleQueue()
        self._thread = SimpleThread(self._execute)

    def _execute(self, thread: SimpleThread) -> None:
        while not thread.is_terminated():
            while True:
                try:
                    task = self._queue.get_nowait()
                except queue.Empty:
                    break
                if self.on_task is not None:
                    self.on_task(task)

            repeat = self.on_repeat
            if self._started and repeat is not None:
                repeat()
            else:
                thread.sleep(1)

    def start(self) -> None:
        """Begin calling ``on_repeat``."""
        self._started = True

    def stop(self) -> None:
        """Stop calling ``on_repeat``; queued tasks still run."""
        self._started = False

    def add(self, task: int, text: str = "", data: Any = None, size: int = 0, tag: int = 0) -> None:
        """Queue a task and wake the worker."""
        self._queue.put(Task(task, text, data, size, tag))
        self._thread.wake_up()

    def sleep(self, millis: int) -> None:
        """Sleep on the worker thread, interruptible by new tasks or termination."""
        self._thread.sleep(millis)

    def is_empty(self) -> bool:
        return self._queue.empty()

    def terminate(self) -> None:
        self._thread.terminate()

    def terminate_now(self) -> None:
        self._thread.terminate_now()

    def terminate_and_wait(self, timeout: Optional[float] = None) -> None:
        """Stop repeating, end the worker and wait for it."""
        self.stop()
        self._thread.terminate_and_wait(timeout)