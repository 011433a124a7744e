"""Building blocks: a ring-buffer deque, a worker pool, a pacer, a levelled logger, and helpers for lists, conversion, time, WSGI responses and files."""

__version__ = "0.1.0"

__all__ = [
    "convert",
    "deque",
    "logfile",
    "logger",
    "pacer",
    "slices",
    "study",
    "timeutil",
    "waitgroup",
    "web",
    "workerpool",
    "writefile",
]