"""Double-ended queue backed by a power-of-two ring buffer.

Items are added and removed at either end in O(1).  The buffer grows by
doubling when full and shrinks to half when only a quarter of it is in use,
but never below the configured minimum capacity.  Reading or removing from
an empty deque, or using an index outside ``0 <= i < len(deque)``, raises
``IndexError``.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

MIN_CAPACITY = 16


class Deque(Generic[T]):
    """Ring-buffer deque with FIFO (push_back/pop_front) and LIFO use."""

    __slots__ = ("_buf", "_head", "_tail", "_count", "_min_cap")

    def __init__(self, capacity: int = 0, minimum: int = 0) -> None:
        """Create a deque, optionally pre-sizing it and setting a minimum size.

        Both sizes are rounded up to a power of two no smaller than 16.  With
        ``capacity`` zero no buffer is allocated until the first push.
        """
        min_cap = MIN_CAPACITY
        while min_cap < minimum:
            min_cap <<= 1
        buf: list[Any] = []
        if capacity:
            size = min_cap
            while size < capacity:
                size <<= 1
            buf = [None] * size
        self._buf = buf
        self._head = 0
        self._tail = 0
        self._count = 0
        self._min_cap = min_cap

    # -- sizes -------------------------------------------------------------

    def __len__(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        """Number of slots in the underlying buffer."""
        return len(self._buf)

    def __iter__(self) -> Iterator[T]:
        mask = len(self._buf) - 1
        for offset in range(self._count):
            yield self._buf[(self._head + offset) & mask]

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"

    # -- indexed access ----------------------------------------------------

    def _slot(self, index: int, name: str) -> int:
        index = operator.index(index)
        if index < 0 or index >= self._count:
            raise IndexError(f"deque: {name} index out of range")
        return (self._head + index) & (len(self._buf) - 1)

    def __getitem__(self, index: int) -> T:
        return self._buf[self._slot(index, "get")]

    def __setitem__(self, index: int, item: T) -> None:
        self._buf[self._slot(index, "set")] = item

    # -- ends --------------------------------------------------------------

    def push_back(self, item: T) -> None:
        """Append an item at the back."""
        self._grow_if_full()
        self._buf[self._tail] = item
        self._tail = self._next(self._tail)
        self._count += 1

    def push_front(self, item: T) -> None:
        """Prepend an item at the front."""
        self._grow_if_full()
        self._head = self._prev(self._head)
        self._buf[self._head] = item
        self._count += 1

    def pop_front(self) -> T:
        """Remove and return the front item."""
        if self._count <= 0:
            raise IndexError("deque: pop_front() called on empty queue")
        item = self._buf[self._head]
        self._buf[self._head] = None
        self._head = self._next(self._head)
        self._count -= 1
        self._shrink_if_excess()
        return item

    def pop_back(self) -> T:
        """Remove and return the back item."""
        if self._count <= 0:
            raise IndexError("deque: pop_back() called on empty queue")
        self._tail = self._prev(self._tail)
        item = self._buf[self._tail]
        self._buf[self._tail] = None
        self._count -= 1
        self._shrink_if_excess()
        return item

    def front(self) -> T:
        """Return the front item without removing it."""
        if self._count <= 0:
            raise IndexError("deque: front() called when empty")
        return self._buf[self._head]

    def back(self) -> T:
        """Return the back item without removing it."""
        if self._count <= 0:
            raise IndexError("deque: back() called when empty")
        return self._buf[self._prev(self._tail)]

    # -- whole-deque operations ---------------------------------------------

    def clear(self) -> None:
        """Remove all items, keeping the current capacity."""
        mask = len(self._buf) - 1
        pos = self._head
        for _ in range(self._count):
            self._buf[pos] = None
            pos = (pos + 1) & mask
        self._head = 0
        self._tail = 0
        self._count = 0

    def rotate(self, n: int) -> None:
        """Rotate ``n`` steps front-to-back; negative ``n`` rotates back-to-front."""
        if self._count <= 1:
            return
        # Truncating remainder keeps the direction of the rotation.
        n = n % self._count if n >= 0 else -((-n) % self._count)
        if n == 0:
            return
        mask = len(self._buf) - 1
        buf = self._buf
        if self._head == self._tail:
            self._head = (self._head + n) & mask
            self._tail = self._head
            return
        if n < 0:
            for _ in range(-n):
                self._head = (self._head - 1) & mask
                self._tail = (self._tail - 1) & mask
                buf[self._head] = buf[self._tail]
                buf[self._tail] = None
            return
        for _ in range(n):
            buf[self._tail] = buf[self._head]
            buf[self._head] = None
            self._head = (self._head + 1) & mask
            self._tail = (self._tail + 1) & mask

    def index(self, predicate: Callable[[T], bool]) -> int:
        """Index of the first item satisfying ``predicate``, or -1."""
        for position, item in enumerate(self):
            if predicate(item):
                return position
        return -1

    def rindex(self, predicate: Callable[[T], bool]) -> int:
        """Index (from the front) of the last item satisfying ``predicate``, or -1."""
        if self._count == 0:
            return -1
        mask = len(self._buf) - 1
        for position in reversed(range(self._count)):
            if predicate(self._buf[(self._head + position) & mask]):
                return position
        return -1

    def insert(self, at: int, item: T) -> None:
        """Insert ``item`` before position ``at`` (``0 <= at <= len``)."""
        at = operator.index(at)
        if at < 0 or at > self._count:
            raise IndexError("deque: insert() called with index out of range")
        buf_ref = self
        if at * 2 < self._count:
            self.push_front(item)
            buf = buf_ref._buf
            front = self._head
            for _ in range(at):
                nxt = self._next(front)
                buf[front], buf[nxt] = buf[nxt], buf[front]
                front = nxt
            return
        swaps = self._count - at
        self.push_back(item)
        buf = buf_ref._buf
        back = self._prev(self._tail)
        for _ in range(swaps):
            prev = self._prev(back)
            buf[back], buf[prev] = buf[prev], buf[back]
            back = prev

    def remove(self, at: int) -> T:
        """Remove and return the item at position ``at``."""
        at = operator.index(at)
        if at < 0 or at >= self._count:
            raise IndexError("deque: remove() called with index out of range")
        buf = self._buf
        pos = (self._head + at) & (len(buf) - 1)
        if at * 2 < self._count:
            for _ in range(at):
                prev = self._prev(pos)
                buf[prev], buf[pos] = buf[pos], buf[prev]
                pos = prev
            return self.pop_front()
        for _ in range(self._count - at - 1):
            nxt = self._next(pos)
            buf[pos], buf[nxt] = buf[nxt], buf[pos]
            pos = nxt
        return self.pop_back()

    def set_min_capacity(self, exponent: int) -> None:
        """Set the minimum capacity to ``2 ** exponent`` (never below 16)."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        size = 1 << exponent
        self._min_cap = size if size > MIN_CAPACITY else MIN_CAPACITY

    # -- buffer management -------------------------------------------------

    def _prev(self, i: int) -> int:
        return (i - 1) & (len(self._buf) - 1)

    def _next(self, i: int) -> int:
        return (i + 1) & (len(self._buf) - 1)

    def _grow_if_full(self) -> None:
        if self._count != len(self._buf):
            return
        if not self._buf:
            self._buf = [None] * self._min_cap
            return
        self._resize()

    def _shrink_if_excess(self) -> None:
        if len(self._buf) > self._min_cap and (self._count << 2) == len(self._buf):
            self._resize()

    def _resize(self) -> None:
        items = list(self)
        new_buf: list[Any] = [None] * (self._count << 1)
        new_buf[: len(items)] = items
        self._buf = new_buf
        self._head = 0
        self._tail = self._count