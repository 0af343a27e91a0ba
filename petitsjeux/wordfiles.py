"""Word lists whose first line declares their size, and console helpers shared by the games."""

from __future__ import annotations

import os
import random
import re
import sys
from typing import Callable, Optional

Reader = Callable[[], str]
Writer = Callable[[str], None]

ANSI_RED = "\033[31m"
ANSI_GREEN = "\033[32m"
ANSI_RESET = "\033[0m"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_HEADER_WIDTH = 4


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _console(read: Optional[Reader], write: Optional[Writer]) -> tuple[Reader, Writer]:
    """Fill in the terminal for whichever of ``read`` and ``write`` is missing."""
    return (read if read is not None else input, write if write is not None else _stdout)


def _read_letter(read: Reader) -> str:
    """Read lines until one holds a non-blank character and return that character."""
    while True:
        stripped = read().strip()
        if stripped:
            return stripped[0]


def _ask_number(read: Reader, write: Writer, last: int, retry: str) -> int:
    """Read until a line starts with a number from 0 to ``last``; write ``retry`` after each bad line."""
    while True:
        line = read()
        if not line.strip():
            continue
        value = _leading_int(line)
        if value is not None and 0 <= value <= last:
            return value
        write(retry)


def _run_guarded(action: Callable[[], object]) -> int:
    """Run ``action`` and give an exit status; closed or interrupted input gives 1."""
    try:
        action()
    except (EOFError, KeyboardInterrupt):
        _stdout("\n")
        return 1
    return 0


def declared_count(path: str | os.PathLike) -> int:
    """Return the number written at the start of the file's first line.

    Only the first four characters are looked at; text that does not start
    with a number gives 0.
    """
    with open(path, encoding="utf-8") as handle:
        first = handle.readline()
    return _leading_int(first.split("\n", 1)[0][:_HEADER_WIDTH]) or 0


def line_at(path: str | os.PathLike, number: int) -> str:
    """Return line ``number`` (counted from 1) without its line break."""
    if number < 1:
        raise IndexError(f"line numbers start at 1, got {number}")
    with open(path, encoding="utf-8") as handle:
        for index, line in enumerate(handle, start=1):
            if index == number:
                return line.split("\n", 1)[0]
    raise IndexError(f"{path} has fewer than {number} lines")


def _pick_index(path: str | os.PathLike, rng: Optional[random.Random]) -> int:
    """Return a random number from 1 to the count the file declares."""
    rng = rng if rng is not None else random.Random()
    count = declared_count(path)
    if count < 1:
        raise ValueError(f"{path} declares no entries")
    return rng.randrange(count) + 1


def random_entry(path: str | os.PathLike, rng: random.Random | None = None) -> str:
    """Return a line picked at random among lines 1 to the declared count."""
    return line_at(path, _pick_index(path, rng))