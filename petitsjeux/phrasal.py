"""Reading phrasal verb lists.

A list holds a starter verb on a line of its own, followed by lines of the
form ``- Set in: To begin and continue.`` giving its phrasal verbs.
"""

from __future__ import annotations

import os

MAX_ROWS = 10


def is_starter_verb(line: str) -> bool:
    """True when ``line`` starts with a letter."""
    return bool(line) and line[0].lower().isalpha()


def is_phrasal_verb(line: str) -> bool:
    """True when ``line`` starts with a dash."""
    return line.startswith("-")


def phrasal_verb(line: str) -> str:
    """Extract the verb from a line such as ``- Set in: To begin.``."""
    dash = line.find("-")
    colon = line.find(":")
    if dash < 0 or colon < 0 or dash + 1 >= colon:
        raise ValueError(f"not a phrasal verb line: {line!r}")
    return line[dash + 2:colon]


def definition(line: str) -> str:
    """Extract the definition from a line such as ``- Set in: To begin.``."""
    colon = line.find(":")
    dot = line.find(".")
    if colon < 0 or dot < 0 or colon + 1 >= dot:
        raise ValueError(f"no definition in line: {line!r}")
    return line[colon + 2:dot]


def _lines(path: str | os.PathLike):
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\n")


def count_starter_verbs(path: str | os.PathLike) -> int:
    """Count the starter verbs in the file at ``path``."""
    return sum(1 for line in _lines(path) if is_starter_verb(line))


def phrasal_verb_lines(path: str | os.PathLike, index: int) -> list[str]:
    """Return the phrasal verb lines listed under starter verb ``index`` (from 0).

    At most ``MAX_ROWS`` lines are returned.
    """
    remaining = index + 1
    found: list[str] = []
    for line in _lines(path):
        if remaining and is_phrasal_verb(line):
            continue
        if is_starter_verb(line):
            remaining -= 1
        if remaining == 0 and is_phrasal_verb(line) and len(found) < MAX_ROWS:
            found.append(line)
    return found


def line_of_verb(number: int, path: str | os.PathLike) -> int:
    """Return the line (from 1) of starter verb ``number`` (from 1).

    When the file has fewer starter verbs, the number of lines is returned.
    """
    seen = 0
    line_number = 0
    for line in _lines(path):
        if seen == number:
            break
        if is_starter_verb(line):
            seen += 1
        line_number += 1
    return line_number


def verb_table(lines: list[str]) -> list[tuple[str, str]]:
    """Split phrasal verb lines into (verb, definition) pairs."""
    return [(phrasal_verb(line), definition(line)) for line in lines[:MAX_ROWS]]