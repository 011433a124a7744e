"""Small helpers for lists of strings and integers.

All helpers return new lists and leave their arguments unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


def in_slice(items: Iterable[T], item: T) -> bool:
    """True if ``item`` is among ``items``."""
    return item in items


def cut(items: Sequence[T], start: int, length: int) -> list[T]:
    """Up to ``length`` items starting at index ``start``."""
    end = min(start + length, len(items))
    if start < 0 or start > end:
        raise IndexError(f"cut [{start}:{end}] out of range for length {len(items)}")
    return list(items[start:end])


def merge(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """The items of ``first`` followed by those of ``second``."""
    return [*first, *second]


def unset(items: Sequence[T], index: int) -> list[T]:
    """A copy of ``items`` without the item at ``index``."""
    if index < 0 or index >= len(items):
        raise IndexError(f"index {index} out of range for length {len(items)}")
    return [*items[:index], *items[index + 1 :]]


def insert(items: Sequence[T], index: int, item: T) -> list[T]:
    """A copy of ``items`` with ``item`` placed at ``index``."""
    if index < 0 or index > len(items):
        raise IndexError(f"index {index} out of range for length {len(items)}")
    return [*items[:index], item, *items[index:]]


def sort_ascending(items: Iterable[str]) -> list[str]:
    """The items in ascending order."""
    return sorted(items)


def sort_descending(items: Iterable[str]) -> list[str]:
    """The items in descending order."""
    return sorted(items, reverse=True)


def intersect(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Items of ``first`` (in order, duplicates kept) that also occur in ``second``."""
    present = set(second)
    return [item for item in first if item in present]


def unique(items: Iterable[T]) -> list[T]:
    """The items with later duplicates dropped, order kept."""
    return list(dict.fromkeys(items))


def strings_to_ints(items: Iterable[str]) -> list[int]:
    """Decimal strings as integers; a string that is not an integer gives 0."""
    result = []
    for text in items:
        try:
            result.append(_atoi(text))
        except ValueError:
            result.append(0)
    return result


def ints_to_strings(items: Iterable[int]) -> list[str]:
    """Integers as decimal strings."""
    return [str(number) for number in items]