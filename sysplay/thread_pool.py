"""A fixed-size pool of worker threads consuming a task queue."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable


class ThreadPool:
    """Runs submitted callables on a fixed set of worker threads.

    Shutting down stops new submissions, lets the workers finish every task
    already queued and then joins them.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 0:
            raise ValueError("num_threads must not be negative")
        self._tasks: deque[tuple[Future[Any], Callable[..., Any], tuple, dict]] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._threads = [
            threading.Thread(target=self._work, name=f"pool-worker-{index}", daemon=True)
            for index in range(num_threads)
        ]
        for thread in self._threads:
            thread.start()

    @property
    def num_threads(self) -> int:
        """Number of worker threads."""
        return len(self._threads)

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future[Any]:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result.

        Raises RuntimeError once the pool has been shut down.
        """
        future: Future[Any] = Future()
        with self._condition:
            if self._stop:
                raise RuntimeError("Enqueue on stopped ThreadPool")
            self._tasks.append((future, fn, args, kwargs))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, drain the queue and join the workers."""
        with self._condition:
            self._stop = True
            self._condition.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if not self._tasks:
                    return
                future, fn, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:  # noqa: BLE001 - delivered through the future
                future.set_exception(exc)
            else:
                future.set_result(result)