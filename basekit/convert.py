"""Conversions between strings, numbers, bytes and JSON objects."""

from __future__ import annotations

import json
import math
import numbers
import re
from decimal import Decimal
from typing import Any

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def string_to_int(text: str) -> int:
    """Parse a decimal integer with an optional sign; raise ValueError otherwise."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


def int_to_string(number: int) -> str:
    """The decimal representation of ``number``."""
    return str(int(number))


def string_to_bytes(text: str) -> bytes:
    """UTF-8 encoding of ``text``."""
    return text.encode("utf-8")


def bytes_to_string(data: bytes) -> str:
    """Decode UTF-8 bytes; invalid sequences become U+FFFD."""
    return bytes(data).decode("utf-8", errors="replace")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" and value == 0 and math.copysign(1, value) > 0 else text


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)


def to_string(value: Any) -> str:
    """Render any value as text.

    ``None`` gives ``""``, numbers their shortest decimal form without an
    exponent, strings themselves, bytes their UTF-8 text, and anything else
    its compact JSON encoding (``""`` if it cannot be encoded).
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return _to_json(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes_to_string(bytes(value))
    try:
        return _to_json(value)
    except (TypeError, ValueError):
        return ""


def _parse_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid number {text!r}")
    return float(text)


def to_int(value: Any) -> int:
    """Convert a number, numeric string or ``None`` to an int, truncating.

    A string that is neither an integer nor a finite float gives 0.  Other
    types raise TypeError.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError("cannot convert bool to int")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return string_to_int(value)
        except ValueError:
            pass
        try:
            number = _parse_float(value)
        except ValueError:
            return 0
        return int(number) if math.isfinite(number) else 0
    if isinstance(value, numbers.Real):
        number = float(value) if isinstance(value, float) else value
        if isinstance(number, float) and not math.isfinite(number):
            raise ValueError(f"cannot convert {number} to int")
        return int(number)
    raise TypeError(f"cannot convert {type(value).__name__} to int")


def map_to_bytes(mapping: dict[str, Any]) -> bytes:
    """Compact JSON encoding of ``mapping`` as UTF-8 bytes."""
    return _to_json(mapping).encode("utf-8")


def bytes_to_map(data: bytes) -> dict[str, Any]:
    """Decode a JSON object; raise ValueError if ``data`` is not one."""
    result = json.loads(bytes(data))
    if not isinstance(result, dict):
        raise ValueError("JSON value is not an object")
    return result