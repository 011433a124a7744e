"""Timestamps, date strings and a second-precision JSON/SQL time value.

Date-time strings use the layout ``YYYY-MM-DD HH:MM:SS``.  Parsing such a
string without a zone treats it as UTC.  Formatting a Unix timestamp uses
local time.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

ZERO_TIME = datetime(1, 1, 1)
_ZERO_TEXT = "0001-01-01 00:00:00"
_EPOCH = datetime(1970, 1, 1)
_DATETIME_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})")


def _format_datetime(moment: datetime) -> str:
    # strftime does not zero-pad years below 1000 on every platform.
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def _format_date(moment: datetime) -> str:
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def _parse_datetime(text: str) -> datetime:
    match = _DATETIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as date-time")
    return datetime(*(int(part) for part in match.groups()))


@dataclass(frozen=True)
class LocalTime:
    """A point in time serialised as ``"YYYY-MM-DD HH:MM:SS"``.

    The zero value (year 1) stands for "no time": it maps to SQL NULL.
    """

    moment: datetime = field(default=ZERO_TIME)

    def __str__(self) -> str:
        return _format_datetime(self.moment)

    def is_zero(self) -> bool:
        return str(self) == _ZERO_TEXT

    def to_json(self) -> bytes:
        """The JSON encoding: a quoted date-time string."""
        return f'"{self}"'.encode()

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> LocalTime:
        """Decode a quoted date-time; a two-byte value (``""``) gives the zero time."""
        raw = data.encode() if isinstance(data, str) else bytes(data)
        if len(raw) == 2:
            return cls()
        text = raw.decode("utf-8", errors="strict")
        if len(text) < 2 or not (text.startswith('"') and text.endswith('"')):
            raise ValueError(f"cannot parse {text!r} as quoted date-time")
        return cls(_parse_datetime(text[1:-1]))

    def value(self) -> Optional[bytes]:
        """The value stored in a database column; ``None`` for the zero time."""
        if self.is_zero():
            return None
        return str(self).encode()

    @classmethod
    def scan(cls, value: object) -> LocalTime:
        """Build from a database ``datetime``, keeping its wall clock to the second."""
        if not isinstance(value, datetime):
            raise TypeError(f"cannot scan {type(value).__name__} into LocalTime")
        return cls(value.replace(tzinfo=None, microsecond=0))


def current_timestamp() -> int:
    """Seconds since the Unix epoch."""
    return time.time_ns() // 1_000_000_000


def current_milli_timestamp() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def current_micro_timestamp() -> int:
    """Microseconds since the Unix epoch."""
    return time.time_ns() // 1_000


def current_datetime() -> str:
    """The local date and time as ``YYYY-MM-DD HH:MM:SS``."""
    return _format_datetime(datetime.now())


def current_date() -> str:
    """The local date as ``YYYY-MM-DD``."""
    return _format_date(datetime.now())


def format_time_to_date(timestamp: int) -> str:
    """Format a Unix timestamp in seconds as a local date-time string."""
    return _format_datetime(datetime.fromtimestamp(timestamp))


def parse_date_to_time(text: str) -> int:
    """Unix timestamp of a UTC date-time string, or 0 when it cannot be parsed."""
    try:
        moment = _parse_datetime(text)
    except ValueError:
        return 0
    aware = moment.replace(tzinfo=timezone.utc)
    return int((aware - _EPOCH.replace(tzinfo=timezone.utc)).total_seconds())