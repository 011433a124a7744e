"""Rate limiter for the start of concurrently running tasks.

Callers of :meth:`Pacer.next` are let through one at a time, no faster than
one per ``delay`` seconds.  The pacer is independent of the worker pool:
paced tasks can be submitted to a pool or run on plain threads.
"""

from __future__ import annotations

import functools
import threading
import time
from collections.abc import Callable
from typing import Any, TypeVar

R = TypeVar("R")


class Pacer:
    """Lets tasks start no more often than once per ``delay`` seconds."""

    def __init__(self, delay: float) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._delay = delay
        self._cond = threading.Condition()
        self._gate = threading.Lock()
        self._armed = True
        self._next_time = 0.0
        self._paused = False
        self._stopped = False

    def pace(self, task: Callable[..., R]) -> Callable[..., R]:
        """Wrap ``task`` so that each call first waits for its turn."""

        @functools.wraps(task)
        def paced(*args: Any, **kwargs: Any) -> R:
            self.next()
            return task(*args, **kwargs)

        return paced

    def next(self) -> None:
        """Block until it is this caller's turn to run."""
        with self._gate, self._cond:
            while True:
                if self._stopped:
                    raise RuntimeError("pacer is stopped")
                if self._armed:
                    break
                if self._paused:
                    self._cond.wait()
                    continue
                remaining = self._next_time - time.monotonic()
                if remaining <= 0:
                    self._armed = True
                    break
                self._cond.wait(remaining)
            self._armed = False
            self._next_time = time.monotonic() + self._delay

    def stop(self) -> None:
        """Stop the pacer; later and waiting calls to next() raise RuntimeError."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()

    def is_paused(self) -> bool:
        """True while the pacer is paused."""
        return self._paused

    def pause(self) -> None:
        """Hold back further tasks until resume(); blocks while already paused."""
        with self._cond:
            while self._paused:
                self._cond.wait()
            # A turn that was already due when pausing is still granted.
            if not self._armed and time.monotonic() >= self._next_time:
                self._armed = True
            self._paused = True
            self._cond.notify_all()

    def resume(self) -> None:
        """Continue after pause(); blocks until the pacer is paused."""
        with self._cond:
            while not self._paused:
                self._cond.wait()
            self._paused = False
            self._cond.notify_all()