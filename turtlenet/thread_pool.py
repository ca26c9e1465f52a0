"""A fixed set of worker threads that run queued tasks in order."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from types import TracebackType

_log = logging.getLogger(__name__)


class ThreadPool:
    """Run submitted callables on a fixed number of worker threads.

    Shutting down lets the workers finish every task already queued.
    """

    def __init__(self, threads: int = 4) -> None:
        if threads < 1:
            raise ValueError("a thread pool needs at least one thread")
        self._tasks: deque[Callable[[], object]] = deque()
        self._condition = threading.Condition()
        self._stopping = False
        self._workers = [
            threading.Thread(target=self._work, name=f"turtlenet-worker-{n}", daemon=True)
            for n in range(threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stopping or self._tasks)
                if not self._tasks:
                    return
                task = self._tasks.popleft()
            try:
                task()
            except Exception:
                _log.exception("task failed")

    def submit(self, task: Callable[[], object]) -> None:
        """Queue ``task`` to run on a worker thread."""
        with self._condition:
            if self._stopping:
                raise RuntimeError("cannot submit to a thread pool that is shut down")
            self._tasks.append(task)
            self._condition.notify()

    def shutdown(self) -> None:
        """Stop taking tasks, finish the queued ones and join the workers."""
        with self._condition:
            self._stopping = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()