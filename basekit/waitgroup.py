"""Wait group that also bounds how many members may be active at once."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


class BoundedWaitGroup:
    """Counts running operations and caps how many run at the same time.

    With ``size`` greater than zero, at most ``size`` members may be added
    before one of them is done; further additions block.  A ``size`` of zero
    or less removes the cap, so the group behaves like a plain wait group.
    """

    def __init__(self, size: int = -1) -> None:
        self._size = size
        self._cond = threading.Condition()
        self._active = 0
        self._count = 0

    def __enter__(self) -> BoundedWaitGroup:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.wait()

    def add(self, *args: Callable[[], Any]) -> None:
        """Run each callable on its own thread, respecting the size limit."""
        for closure in args:
            self.block_add()
            threading.Thread(target=self._run, args=(closure,), daemon=True).start()

    def _run(self, closure: Callable[[], Any]) -> None:
        try:
            closure()
        finally:
            self.done()

    def block_add(self) -> None:
        """Add one member, blocking while the group is full."""
        with self._cond:
            if self._size > 0:
                while self._active >= self._size:
                    self._cond.wait()
                self._active += 1
            self._count += 1

    def done(self) -> None:
        """Mark one member as finished."""
        with self._cond:
            if self._count <= 0:
                raise ValueError("negative wait group counter")
            if self._size > 0:
                self._active -= 1
            self._count -= 1
            self._cond.notify_all()

    def wait(self) -> None:
        """Block until every added member is done."""
        with self._cond:
            while self._count:
                self._cond.wait()

    def pending_count(self) -> int:
        """Number of slots of the bounded pool currently in use."""
        with self._cond:
            return self._active