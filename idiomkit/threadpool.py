"""A fixed-size pool of worker threads fed from a shared task queue."""

from __future__ import annotations

import functools
import logging
import sys
import threading
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any

_log = logging.getLogger(__name__)


class ThreadPool:
    """Run queued callables on a fixed number of worker threads.

    Shutting down lets the workers drain every task already queued before
    they exit.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 1:
            raise ValueError("a thread pool needs at least one thread")
        self._tasks: deque[Callable[[], Any]] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._threads = [
            threading.Thread(target=self._worker, name=f"pool-worker-{i}", daemon=True)
            for i in range(num_threads)
        ]
        for thread in self._threads:
            thread.start()

    def _worker(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: bool(self._tasks) or self._stop)
                if self._stop and not self._tasks:
                    return
                task = self._tasks.popleft()
            try:
                task()
            except Exception:
                _log.exception("task raised an exception")

    def enqueue(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Queue ``func(*args, **kwargs)`` to run on a worker thread."""
        task = functools.partial(func, *args, **kwargs)
        with self._condition:
            if self._stop:
                raise RuntimeError("cannot enqueue on a pool that has been shut down")
            self._tasks.append(task)
            self._condition.notify()

    def shutdown(self) -> None:
        """Stop accepting tasks, finish the queued ones and join the workers."""
        with self._condition:
            self._stop = True
            self._condition.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.shutdown()


def _print_number(num: int) -> None:
    sys.stdout.write(f"{num}\n")


def main(argv: Sequence[str] | None = None) -> int:
    with ThreadPool(5) as pool:
        for i in range(10):
            pool.enqueue(_print_number, i)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())