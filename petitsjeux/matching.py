"""Matching exercise: link each phrasal verb to its definition."""

from __future__ import annotations

import argparse
import os
import random
import re
import sys
from typing import Callable, Optional, Sequence

from .phrasal import count_starter_verbs, phrasal_verb_lines, verb_table

Reader = Callable[[], str]
Writer = Callable[[str], None]
Pair = tuple[str, str]

PLAIN = 0
RED = 1
GREEN = 2

ANSI_RED = "\x1b[31m"
ANSI_GREEN = "\x1b[32m"
ANSI_RESET = "\x1b[0m"
DEFAULT_FILE = "../txt/phrasal_verbs.txt"
_MIDDLE_WIDTH = 21
_MOVE = re.compile(r"\s*(\d+)(.)")


def _stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def letter_index(letter: str) -> int:
    """Map ``a`` to 0, ``b`` to 1 and so on."""
    if len(letter) != 1 or not "a" <= letter <= "z":
        raise ValueError(f"expected a lowercase letter, got {letter!r}")
    return ord(letter) - ord("a")


def shuffle_pairs(pairs: Sequence[Pair], rng: Optional[random.Random] = None) -> list[Pair]:
    """Keep the verbs in place and move the definitions around.

    With two or more pairs, no definition stays next to its own verb.
    """
    rng = rng if rng is not None else random.Random()
    order = list(range(len(pairs)))
    for i in range(len(order) - 1, 0, -1):
        j = rng.randrange(i)
        order[i], order[j] = order[j], order[i]
    return [(verb, pairs[j][1]) for (verb, _), j in zip(pairs, order)]


def _border(left: str, middle: str, right: str, verb_width: int, def_width: int) -> str:
    return (
        left
        + "═" * (verb_width + 2)
        + middle
        + "═" * _MIDDLE_WIDTH
        + middle
        + "═" * (def_width + 2)
        + right
        + "\n"
    )


def _separator(row: int) -> str:
    letter = chr(ord("a") + row)
    if row < 10:
        return f" ║  {row} ✦------------✦ {letter} ║"
    return f" ║ {row} ✦------------✦ {letter} ║"


def _coloured(text: str, color: int) -> str:
    if color == RED:
        return f"{ANSI_RED} {text}{ANSI_RESET}"
    if color == GREEN:
        return f"{ANSI_GREEN} {text}{ANSI_RESET}"
    return f" {text}"


def render_table(pairs: Sequence[Pair], colors: Optional[Sequence[int]] = None) -> str:
    """Draw the verbs, numbered, facing their lettered definitions."""
    colors = colors if colors is not None else [PLAIN] * len(pairs)
    verb_width = max((len(verb) for verb, _ in pairs), default=0)
    def_width = max((len(text) for _, text in pairs), default=0)
    out = [_border("╔", "╦", "╗", verb_width, def_width)]
    for row, ((verb, text), color) in enumerate(zip(pairs, colors)):
        out.append(
            "║"
            + " " * (verb_width - len(verb))
            + f" {verb}"
            + _separator(row)
            + _coloured(text, color)
            + " " * (def_width - len(text))
            + " ║\n"
        )
    out.append(_border("╚", "╩", "╝", verb_width, def_width))
    return "".join(out)


def parse_move(text: str, size: int) -> tuple[int, int]:
    """Parse a move such as ``3b`` into (row, definition row)."""
    match = _MOVE.match(text)
    if not match:
        raise ValueError(f"expected a number followed by a letter, got {text!r}")
    row = int(match.group(1))
    other = letter_index(match.group(2))
    if row >= size or other >= size:
        raise ValueError(f"move {text.strip()!r} is outside the table")
    return row, other


def count_correct(original: Sequence[Pair], response: Sequence[Pair]) -> int:
    """Count the rows whose definition matches the original one."""
    return sum(1 for (_, want), (_, got) in zip(original, response) if want == got)


def final_colors(original: Sequence[Pair], response: Sequence[Pair]) -> list[int]:
    """Green for rows that match the original, red for the others."""
    return [GREEN if want == got else RED for (_, want), (_, got) in zip(original, response)]


def _swap(response: list[Pair], a: int, b: int) -> None:
    (verb_a, def_a), (verb_b, def_b) = response[a], response[b]
    response[a] = (verb_a, def_b)
    response[b] = (verb_b, def_a)


def run_exercise(
    path: str | os.PathLike,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    rng: Optional[random.Random] = None,
) -> tuple[int, int]:
    """Run the exercise on a random verb of ``path``; return (correct, total)."""
    read = read if read is not None else input
    write = write if write is not None else _stdout
    rng = rng if rng is not None else random.Random()

    verbs = count_starter_verbs(path)
    if verbs < 1:
        raise ValueError(f"{path} holds no starter verb")
    original = verb_table(phrasal_verb_lines(path, rng.randrange(verbs)))
    size = len(original)
    if size == 0:
        raise ValueError(f"{path}: the chosen verb has no phrasal verbs")

    write("Exercice : \nLink evry verb to its definition.\n")
    response = shuffle_pairs(original, rng)
    colors = [PLAIN] * size
    write(render_table(response, colors))

    while True:
        write("Write a response as (number)(letter) to switch the lines, type 0a one you've done :")
        while True:
            line = read()
            if not line.strip():
                continue
            try:
                row, other = parse_move(line, size)
                break
            except ValueError:
                write("Unvalid arguments. Write your response as (number)(letter), type 0a one you've done :")
        if (row, other) == (0, 0):
            break
        _swap(response, row, other)
        colors[row] = colors[other] = RED
        write(render_table(response, colors))
        colors[row] = colors[other] = PLAIN

    correct = count_correct(original, response)
    write("\nYour final response :\n")
    write(render_table(response, final_colors(original, response)))
    write("expected response :\n")
    write(render_table(original, [GREEN] * size))
    shade = ANSI_GREEN if correct == size else ANSI_RED
    write(f"\nYour final result :  {shade} {correct} / {size} \n\n")
    return correct, size


def main(argv: Optional[list[str]] = None) -> int:
    """Run the matching exercise from the command line."""
    parser = argparse.ArgumentParser(prog="phrasal-match", description="Link phrasal verbs to their definitions.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="phrasal verb list")
    args = parser.parse_args(argv)
    try:
        run_exercise(args.file)
    except (EOFError, KeyboardInterrupt):
        _stdout("\n")
        return 1
    return 0