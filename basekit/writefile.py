"""Write text, lines, or concurrently produced random numbers to files."""

from __future__ import annotations

import argparse
import os
import queue
import random
import threading
from collections.abc import Iterable, Sequence
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_LINES = (
    "Welcome to the world of files.",
    "Each line ends with a newline.",
    "Lines are written one after another.",
)

_DONE = object()


def write_text(path: PathLike, text: str) -> int:
    """Create or truncate ``path``, write ``text`` and return the bytes written."""
    data = text.encode("utf-8")
    with open(path, "wb") as handle:
        return handle.write(data)


def write_lines(path: PathLike, lines: Iterable[str]) -> int:
    """Create or truncate ``path`` and write each line followed by a newline."""
    total = 0
    with open(path, "wb") as handle:
        for line in lines:
            total += handle.write(f"{line}\n".encode("utf-8"))
    return total


def write_random_numbers(path: PathLike, count: int = 100) -> list[int]:
    """Let ``count`` producer threads each make a number in 0..998 while one
    writer thread puts them in ``path``, one per line.

    Returns the numbers in the order they were written.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    channel: queue.Queue[object] = queue.Queue()
    written: list[int] = []
    failure: list[BaseException] = []

    def produce() -> None:
        channel.put(random.randrange(999))

    def consume() -> None:
        try:
            with open(path, "w", encoding="utf-8") as handle:
                while (item := channel.get()) is not _DONE:
                    handle.write(f"{item}\n")
                    written.append(item)  # type: ignore[arg-type]
        except OSError as exc:
            failure.append(exc)

    producers = [threading.Thread(target=produce) for _ in range(count)]
    for producer in producers:
        producer.start()
    consumer = threading.Thread(target=consume)
    consumer.start()
    for producer in producers:
        producer.join()
    channel.put(_DONE)
    consumer.join()
    if failure:
        raise failure[0]
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Write sample content to a file.")
    parser.add_argument(
        "mode", nargs="?", default="text", choices=("text", "lines", "random")
    )
    parser.add_argument("-o", "--output", help="file to write")
    parser.add_argument("-n", "--count", type=int, default=100)
    args = parser.parse_args(argv)

    if args.mode == "text":
        try:
            size = write_text(args.output or "test.txt", "Hello World")
        except OSError as exc:
            print(exc)
            return 1
        print(size, "bytes written successfully")
    elif args.mode == "lines":
        try:
            write_lines(args.output or "lines.txt", DEFAULT_LINES)
        except OSError as exc:
            print(exc)
            return 1
        print("file written successfully")
    else:
        try:
            write_random_numbers(args.output or "concurrent", args.count)
        except (OSError, ValueError) as exc:
            print(exc)
            print("File writing failed")
            return 1
        print("File written successfully")
    return 0