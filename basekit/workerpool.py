"""Pool of worker threads that limits how many tasks run at once.

Submitting never blocks.  A task goes to an idle worker, or to a new worker
while fewer than ``max_workers`` exist; otherwise it waits in a FIFO queue
until a worker becomes free.  When no task has been submitted for a whole
idle period, one idle worker is retired per period, down to zero.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Any, Optional, Protocol

from basekit.deque import Deque

IDLE_TIMEOUT = 2.0

_PAUSE_POLL = 0.01
_STOP = object()
_log = logging.getLogger(__name__)

Task = Callable[[], Any]


class _Release(Protocol):
    def is_set(self) -> bool: ...

    def wait(self, timeout: Optional[float] = None) -> bool: ...


class _Worker:
    __slots__ = ("task",)

    def __init__(self) -> None:
        self.task: Any = None


class WorkerPool:
    """Runs submitted callables on at most ``max_workers`` threads."""

    def __init__(self, max_workers: int, idle_timeout: float = IDLE_TIMEOUT) -> None:
        if idle_timeout <= 0:
            raise ValueError("idle_timeout must be positive")
        self._max_workers = max(1, max_workers)
        self._idle_timeout = idle_timeout
        self._cond = threading.Condition()
        self._queue: Deque[Task] = Deque()
        self._ready: list[_Worker] = []
        self._worker_count = 0
        self._recent = True
        self._closing = False
        self._wait = False
        self._stop_signal = threading.Event()
        self._stop_lock = threading.Lock()
        self._once_lock = threading.Lock()
        self._stop_requested = False
        self._stopped = False
        self._finished = threading.Event()
        threading.Thread(
            target=self._dispatch, name="workerpool-dispatch", daemon=True
        ).start()

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_wait()

    def size(self) -> int:
        """Maximum number of tasks run concurrently."""
        return self._max_workers

    def stop(self) -> None:
        """Stop the pool, waiting only for running tasks; queued tasks are dropped."""
        self._stop(False)

    def stop_wait(self) -> None:
        """Stop the pool after every queued task has run."""
        self._stop(True)

    def stopped(self) -> bool:
        """True once the pool has been stopped."""
        with self._stop_lock:
            return self._stopped

    def submit(self, task: Optional[Task]) -> None:
        """Queue ``task`` for execution without blocking.  ``None`` is ignored."""
        if task is None:
            return
        with self._cond:
            if self._closing:
                raise RuntimeError("submit on a stopped worker pool")
            self._recent = True
            if self._ready:
                worker = self._ready.pop()
                worker.task = task
                self._cond.notify_all()
            elif self._worker_count < self._max_workers:
                self._worker_count += 1
                threading.Thread(
                    target=self._work,
                    args=(_Worker(), task),
                    name="workerpool-worker",
                    daemon=True,
                ).start()
            else:
                self._queue.push_back(task)

    def submit_wait(self, task: Optional[Task]) -> None:
        """Queue ``task`` and block until it has run.  ``None`` is ignored."""
        if task is None:
            return
        done = threading.Event()

        def run() -> None:
            try:
                task()
            finally:
                done.set()

        self.submit(run)
        done.wait()

    def waiting_queue_size(self) -> int:
        """Number of tasks waiting for a free worker."""
        with self._cond:
            return len(self._queue)

    def pause(self, release: _Release) -> None:
        """Occupy every worker until ``release`` is set or the pool stops.

        Returns once all workers are held.  A second pause waits until the
        first has been released.  Does nothing on a stopped pool.
        """
        with self._stop_lock:
            if self._stopped:
                return
            ready = threading.Semaphore(0)

            def hold() -> None:
                ready.release()
                while not (release.is_set() or self._stop_signal.is_set()):
                    release.wait(_PAUSE_POLL)

            for _ in range(self._max_workers):
                self.submit(hold)
            for _ in range(self._max_workers):
                ready.acquire()

    # -- internals ---------------------------------------------------------

    def _stop(self, wait: bool) -> None:
        with self._once_lock:
            first = not self._stop_requested
            self._stop_requested = True
        if first:
            self._stop_signal.set()
            with self._stop_lock:
                self._stopped = True
            with self._cond:
                self._wait = wait
                self._closing = True
                self._cond.notify_all()
        self._finished.wait()

    def _dispatch(self) -> None:
        with self._cond:
            deadline = time.monotonic() + self._idle_timeout
            while not self._closing:
                remaining = deadline - time.monotonic()
                if remaining > 0:
                    self._cond.wait(remaining)
                    continue
                if not self._recent and self._ready:
                    self._retire(self._ready.pop(0))
                self._recent = False
                deadline = time.monotonic() + self._idle_timeout
            for worker in self._ready:
                self._retire(worker)
            self._ready.clear()
            while self._worker_count:
                self._cond.wait()
        self._finished.set()

    def _retire(self, worker: _Worker) -> None:
        worker.task = _STOP
        self._worker_count -= 1
        self._cond.notify_all()

    def _work(self, worker: _Worker, task: Optional[Task]) -> None:
        while task is not None:
            try:
                task()
            except Exception:
                _log.exception("worker pool task raised")
            task = self._next_task(worker)

    def _next_task(self, worker: _Worker) -> Optional[Task]:
        with self._cond:
            if self._queue and (self._wait or not self._closing):
                return self._queue.pop_front()
            if self._closing:
                self._worker_count -= 1
                self._cond.notify_all()
                return None
            self._ready.append(worker)
            while worker.task is None:
                self._cond.wait()
            task, worker.task = worker.task, None
            return None if task is _STOP else task