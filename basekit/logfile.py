"""Append time-stamped lines to a daily log file."""

from __future__ import annotations

import os
from typing import Union

from basekit.timeutil import current_date, current_datetime

LOG_DIR = "./logs/"


def write_log(message: str, log_dir: Union[str, "os.PathLike[str]"] = LOG_DIR) -> int:
    """Append ``[date time]message`` to ``app-<date>.log`` in ``log_dir``.

    Returns the number of bytes written.  The directory must exist; an
    ``OSError`` is raised when the file cannot be opened or written.
    """
    path = os.path.join(os.fspath(log_dir), f"app-{current_date()}.log")
    data = f"[{current_datetime()}]{message}\n".encode("utf-8")
    with open(path, "ab") as handle:
        return handle.write(data)