"""Levelled, optionally coloured logger with a placeholder-based line format.

A format is written with placeholders such as ``%{id}``, ``%{time}``,
``%{time:<strftime format>}``, ``%{module}``, ``%{file}`` (or
``%{filename}``), ``%{line}``, ``%{level}``, ``%{lvl}`` (first three
letters of the level) and ``%{message}``.  :func:`parse_format` turns such a
template into a :meth:`str.format` template plus a time format.  Templates
shorter than ten characters select the current defaults; unknown
placeholders produce nothing.
"""

from __future__ import annotations

import inspect
import itertools
import os
import sys
import threading
import traceback
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, TextIO

DEFAULT_FORMAT = "#{id:d} {time} {filename}:{line:d} ▶ {level:.3} {message}"
DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_RESET = "\033[0m"
_TIME_FIELD = "{time}"
_MIN_TEMPLATE_LENGTH = len("%{message}")

_FIELDS = {
    "%{id}": "{id:d}",
    "%{time}": _TIME_FIELD,
    "%{module}": "{module}",
    "%{filename}": "{filename}",
    "%{file}": "{filename}",
    "%{line}": "{line:d}",
    "%{level}": "{level}",
    "%{lvl}": "{level:.3}",
    "%{message}": "{message}",
}


class LogLevel(IntEnum):
    """Severity of a message; lower values are more severe."""

    CRITICAL = 1
    ERROR = 2
    WARNING = 3
    NOTICE = 4
    INFO = 5
    DEBUG = 6


_BLACK, _RED, _GREEN, _YELLOW, _BLUE, _MAGENTA, _CYAN, _WHITE = range(30, 38)

_COLOR_CODES = {
    LogLevel.CRITICAL: f"\033[{_MAGENTA}m",
    LogLevel.ERROR: f"\033[{_RED}m",
    LogLevel.WARNING: f"\033[{_YELLOW}m",
    LogLevel.NOTICE: f"\033[{_GREEN}m",
    LogLevel.DEBUG: f"\033[{_CYAN}m",
    LogLevel.INFO: f"\033[{_WHITE}m",
}


@dataclass
class _Defaults:
    format: str = DEFAULT_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT


_defaults = _Defaults()
_ids = itertools.count(1)
_id_lock = threading.Lock()


def _next_id() -> int:
    with _id_lock:
        return next(_ids)


@dataclass
class Info:
    """Everything that goes into one log line."""

    id: int = 0
    time: str = ""
    module: str = ""
    level: LogLevel = LogLevel.INFO
    line: int = 0
    filename: str = ""
    message: str = ""

    @property
    def level_name(self) -> str:
        return LogLevel(self.level).name

    def output(self, template: str) -> str:
        """Render this record with a template produced by :func:`parse_format`."""
        return template.format(
            id=self.id,
            time=self.time,
            module=self.module,
            filename=self.filename,
            line=self.line,
            level=self.level_name,
            message=self.message,
        )


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


def _placeholder_to_field(placeholder: str) -> tuple[str, str]:
    if len(placeholder) < 4:
        return "", ""
    if not (placeholder.startswith("%{") and placeholder.endswith("}")):
        return "", ""
    colon = placeholder.find(":")
    if colon == -1:
        return _FIELDS.get(placeholder, ""), ""
    return _FIELDS.get(placeholder[:colon] + "}", ""), placeholder[colon + 1 : -1]


def parse_format(template: str) -> tuple[str, str]:
    """Translate a placeholder template into ``(message template, time format)``."""
    if len(template) < _MIN_TEMPLATE_LENGTH:
        return _defaults.format, _defaults.time_format
    time_format = _defaults.time_format
    parts: list[str] = []
    rest = template
    idx = rest.find("%")
    while idx != -1:
        parts.append(_escape(rest[:idx]))
        rest = rest[idx:]
        if len(rest) <= 2:
            break
        if rest[1] != "{":
            parts.append("%")
            rest = rest[1:]
        else:
            end = rest.find("}")
            if end == -1:
                rest = rest[1:]
            else:
                nxt = rest.find("%{", 1)
                if nxt != -1 and nxt <= end:
                    # An unterminated placeholder is followed by another one.
                    parts.append("%")
                    rest = rest[1:]
                    idx = nxt - 1
                    continue
                field, arg = _placeholder_to_field(rest[: end + 1])
                parts.append(field)
                if field == _TIME_FIELD and arg:
                    time_format = arg
                rest = rest[end + 1 :]
        idx = rest.find("%")
    parts.append(_escape(rest))
    return "".join(parts), time_format


def set_default_format(template: str) -> None:
    """Set the format used by workers created from now on."""
    _defaults.format, _defaults.time_format = parse_format(template)


def stack() -> str:
    """The current thread's call stack as text."""
    return "".join(traceback.format_stack())


class Worker:
    """Formats records and writes those at or above its level to ``out``.

    Until a level is set, nothing is written.
    """

    def __init__(self, prefix: str = "", color: int = 1, out: TextIO | None = None) -> None:
        self.prefix = prefix
        self.color = color
        self.out = sys.stderr if out is None else out
        self._format = _defaults.format
        self._time_format = _defaults.time_format
        self._level = 0
        self._lock = threading.Lock()

    @property
    def format(self) -> str:
        return self._format

    @property
    def time_format(self) -> str:
        return self._time_format

    @property
    def level(self) -> int:
        return self._level

    def set_format(self, template: str) -> None:
        self._format, self._time_format = parse_format(template)

    def set_log_level(self, level: LogLevel) -> None:
        self._level = level

    def log(self, level: LogLevel, info: Info) -> None:
        """Write ``info`` if ``level`` is not above this worker's level."""
        if self._level < level:
            return
        text = info.output(self._format)
        if self.color:
            text = _COLOR_CODES[level] + text + _RESET
        text = self.prefix + text
        if not text.endswith("\n"):
            text += "\n"
        with self._lock:
            self.out.write(text)
            flush = getattr(self.out, "flush", None)
            if flush is not None:
                flush()


def _render(message: str, args: tuple[Any, ...]) -> str:
    return message % args if args else message


class Logger:
    """User-facing logger bound to a module name.

    Arguments may be given in any order: a ``str`` sets the module name
    (default ``"DEFAULT"``), a :class:`LogLevel` the level (default INFO), an
    ``int`` whether output is coloured (default 1), and an object with a
    ``write`` method the output stream (default ``sys.stderr``).
    """

    def __init__(self, *args: Any) -> None:
        module = "DEFAULT"
        color = 1
        out: Any = sys.stderr
        level = LogLevel.INFO
        for arg in args:
            if isinstance(arg, str):
                module = arg
            elif isinstance(arg, LogLevel):
                level = arg
            elif isinstance(arg, int) and not isinstance(arg, bool):
                color = arg
            elif callable(getattr(arg, "write", None)):
                out = arg
            else:
                raise TypeError("logger: Unknown argument")
        self.module = module
        self.worker = Worker("", color, out)
        self.worker.set_log_level(level)

    def set_format(self, template: str) -> None:
        self.worker.set_format(template)

    def set_log_level(self, level: LogLevel) -> None:
        self.worker.set_log_level(level)

    def _log(self, level: LogLevel, message: str) -> None:
        frame = inspect.currentframe()
        caller = frame.f_back.f_back if frame and frame.f_back else None
        filename = os.path.basename(caller.f_code.co_filename) if caller else "???"
        line = caller.f_lineno if caller else 0
        del frame, caller
        info = Info(
            id=_next_id(),
            time=datetime.now().strftime(self.worker.time_format),
            module=self.module,
            level=level,
            line=line,
            filename=filename,
            message=message,
        )
        self.worker.log(level, info)

    def log(self, level: LogLevel, message: str) -> None:
        self._log(level, message)

    def critical(self, message: str, *args: Any) -> None:
        self._log(LogLevel.CRITICAL, _render(message, args))

    def error(self, message: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, _render(message, args))

    def warning(self, message: str, *args: Any) -> None:
        self._log(LogLevel.WARNING, _render(message, args))

    def notice(self, message: str, *args: Any) -> None:
        self._log(LogLevel.NOTICE, _render(message, args))

    def info(self, message: str, *args: Any) -> None:
        self._log(LogLevel.INFO, _render(message, args))

    def debug(self, message: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, _render(message, args))

    def fatal(self, message: str, *args: Any) -> None:
        """Log at CRITICAL level, then exit with status 1."""
        self._log(LogLevel.CRITICAL, _render(message, args))
        raise SystemExit(1)

    def panic(self, message: str, *args: Any) -> None:
        """Log at CRITICAL level, then raise RuntimeError with the message."""
        text = _render(message, args)
        self._log(LogLevel.CRITICAL, text)
        raise RuntimeError(text)

    def stack_as_error(self, message: str = "") -> None:
        """Log the current call stack at ERROR level."""
        self._log(LogLevel.ERROR, (message or "Stack info") + "\n" + stack())

    def stack_as_critical(self, message: str = "") -> None:
        """Log the current call stack at CRITICAL level."""
        self._log(LogLevel.CRITICAL, (message or "Stack info") + "\n" + stack())