"""Guess a country, a city or an animal one letter at a time."""

from __future__ import annotations

import argparse
import os
import random
from enum import IntEnum
from typing import Callable, Optional

from .wordfiles import (
    ANSI_GREEN,
    ANSI_RESET,
    Reader,
    Writer,
    _ask_number,
    _console,
    _read_letter,
    _run_guarded,
    random_entry,
)
from .wordplay import HiddenWord, attempts_for, spaced

_INDENT = "               "


class Category(IntEnum):
    """The kinds of words the game can ask for."""

    COUNTRIES = 0
    CITIES = 1
    ANIMALS = 2

    def label(self) -> str:
        """Singular name used in the game's messages."""
        return _LABELS[self][0]

    def filename(self) -> str:
        """Relative path of the word list for this category."""
        return _LABELS[self][1]


_LABELS = {
    Category.COUNTRIES: ("country", "txt/pays.txt"),
    Category.CITIES: ("city", "txt/city.txt"),
    Category.ANIMALS: ("animal", "txt/animals.txt"),
}


def _letter_round(
    word: str,
    read: Reader,
    write: Writer,
    rng: Optional[random.Random],
    attempts: int,
    prompt: str,
    wrong: str,
    lead: str,
    header: str = "",
    before: Optional[Callable[[int], str]] = None,
) -> bool:
    """Run the guessing loop shared by the letter games; return True when solved.

    ``prompt`` is formatted with the number of attempts left.
    """
    hidden = HiddenWord.random(word, rng)
    write(header + spaced(hidden.shown, "=") + "\n")
    while not hidden.solved() and attempts > 0:
        if before is not None:
            write(before(attempts))
        write(prompt.format(attempts=attempts))
        letter = _read_letter(read)
        found = hidden.guess(letter)
        if not found:
            write(wrong)
            attempts -= 1
        write(lead + spaced(hidden.shown, letter if found else None) + "\n")
    return hidden.solved()


def choose_category(read: Optional[Reader] = None, write: Optional[Writer] = None) -> Category:
    """Show the menu and ask until a valid category number is given."""
    read, write = _console(read, write)
    write("\n                     Guess the word !\n\n")
    write("Select the type you want to guess : \n")
    for category in Category:
        write(f"  {category.label()} : {category.value} \n")
    write("Your choice : ")
    last = len(Category) - 1
    chosen = Category(_ask_number(read, write, last, f"Try a valid choice between 0 and {last} !\nYour choice : "))
    write(f"\nGuess the {chosen.label()} : \n")
    return chosen


def play_round(
    word: str,
    label: str,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    rng: Optional[random.Random] = None,
) -> bool:
    """Play one round on ``word``; return True when the player found it."""
    read, write = _console(read, write)
    won = _letter_round(
        word,
        read,
        write,
        rng,
        attempts_for(word),
        "\n {attempts} remaining tries. Type your letter : ",
        "Wrong letter :( \n",
        _INDENT,
    )
    if won:
        write(f"\n CONGRATS! The {label} was {ANSI_GREEN}{word}{ANSI_RESET} !\n")
    else:
        write(f"\n Game lost, the {label} was : {ANSI_GREEN}{word}{ANSI_RESET} \n\n")
    return won


def main(argv: Optional[list[str]] = None) -> int:
    """Run the word guessing game from the command line."""
    parser = argparse.ArgumentParser(prog="guess-word", description="Guess the word letter by letter.")
    parser.add_argument("--dir", default=".", help="directory holding the txt/ word lists")
    args = parser.parse_args(argv)
    rng = random.Random()

    def game() -> None:
        category = choose_category()
        word = random_entry(os.path.join(args.dir, category.filename()), rng)
        play_round(word, category.label(), rng=rng)

    return _run_guarded(game)