"""Guess a country, with hints about its continent and capital."""

from __future__ import annotations

import argparse
import os
import random
from dataclasses import dataclass
from typing import Optional

from .guess_word import _INDENT, _letter_round
from .wordfiles import (
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    Reader,
    Writer,
    _console,
    _pick_index,
    _run_guarded,
    _stdout,
    line_at,
)
from .wordplay import attempts_for

COUNTRIES_FILE = "txt/countries.txt"
RECORD_LINES = 4


@dataclass(frozen=True)
class Country:
    """A country with its continent and capital."""

    name: str
    continent: str
    capital: str


def random_record_line(path: str | os.PathLike, rng: Optional[random.Random] = None) -> int:
    """Pick the line number of a random record among those the file declares."""
    return RECORD_LINES * _pick_index(path, rng) + 1


def load_country(path: str | os.PathLike, line: int) -> Country:
    """Read the country at ``line``, its continent and its capital on the next lines."""
    return Country(*(line_at(path, line + offset) for offset in range(3)))


def hint(attempts: int, continent: str, capital: str) -> str:
    """Return the hint shown when ``attempts`` tries are left, or an empty string."""
    hints = {
        2: f"Hint 1 :{ANSI_RESET} this country is located in {continent}",
        1: f"Hint 2 :{ANSI_RESET} this country's capital is {capital}",
        0: f"Hint 3 :{ANSI_RESET} {ANSI_RED}YOU DUMB AMERICAN, GO TAKE SOME GEOGRAPHY CLASSES !{ANSI_RESET}",
    }
    return f"\n{ANSI_GREEN}{hints[attempts]}" if attempts in hints else ""


def play_round(
    country: Country,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    rng: Optional[random.Random] = None,
) -> bool:
    """Play one round on ``country``; return True when the player found it."""
    read, write = _console(read, write)
    word = country.name
    won = _letter_round(
        word,
        read,
        write,
        rng,
        attempts_for(word),
        f"\n {ANSI_RED}{{attempts}}{ANSI_RESET} remaining tries. Type your letter : ",
        "Wrong letter :( \n",
        "\n" + _INDENT,
        header="\n Guess the coutry :\n",
        before=lambda left: hint(left, country.continent, country.capital),
    )
    facts = f"{word} is located in {country.continent} and its capital is {country.capital}"
    if won:
        write(f"\n CONGRATS! The country was {ANSI_GREEN}{word}{ANSI_RESET} !\n{facts}.\n\n")
    else:
        write(f"\n Game lost, the country was : {ANSI_GREEN}{word}{ANSI_RESET} \n{facts}\n\n")
    return won


def main(argv: Optional[list[str]] = None) -> int:
    """Run the country guessing game from the command line."""
    parser = argparse.ArgumentParser(prog="guess-country", description="Guess the country letter by letter.")
    parser.add_argument("--dir", default=".", help="directory holding txt/countries.txt")
    args = parser.parse_args(argv)
    rng = random.Random()
    path = os.path.join(args.dir, COUNTRIES_FILE)
    _stdout("Welcome to guess the country !\n")
    _stdout("Are you good enought at geography ? let's see then !\n\n")
    return _run_guarded(lambda: play_round(load_country(path, random_record_line(path, rng)), rng=rng))