"""Guess a verb from its definition, in Portuguese or Spanish."""

from __future__ import annotations

import argparse
import os
import random
import time
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional

from .guess_word import _INDENT, _letter_round
from .wordfiles import (
    ANSI_GREEN,
    ANSI_RESET,
    Reader,
    Writer,
    _ask_number,
    _console,
    _pick_index,
    _read_letter,
    _run_guarded,
    line_at,
)
from .wordplay import HiddenWord, attempts_for, spaced

CLEAR_SCREEN = "\033[2J\033[H"
RECORD_LINES = 3
PAUSE_SECONDS = 2.0


class Level(IntEnum):
    """Difficulty levels, each with its own verb list."""

    A1_VERBS = 0
    A2_VERBS = 1
    B1_VERBS = 2
    B2_VERBS = 3

    def label(self) -> str:
        """Name of the level as shown in the menu."""
        return f"{self.name[:2]}_verbs"

    def filename(self) -> str:
        """Relative path of the verb list for this level."""
        return f"../txt/{self.name[:2].lower()}_verbs.txt"


class Language(Enum):
    """Languages the verb game is available in."""

    PORTUGUESE = "portuguese"
    SPANISH = "spanish"


@dataclass(frozen=True)
class _MenuTexts:
    title: str
    choose: str
    prompt: str
    retry: str
    chosen: str


_MENUS = {
    Language.PORTUGUESE: _MenuTexts(
        title="\n                     Advinhe o verbo !\n\n",
        choose="Escolha o seu nivel : \n",
        prompt="Sua escolha : ",
        retry="Tente uma escolha válida entre 0 e {last} !\nSua escolha : ",
        chosen="\nAdvinhe o verbo {label} : \n",
    ),
    Language.SPANISH: _MenuTexts(
        title="\n                     Advine el verbo !\n\n",
        choose="Elija su nivel : \n",
        prompt="Su eleccion : ",
        retry="Tente un numero válido entre 0 e {last} !\nSu eleccion : ",
        chosen="\nAdvine el verbo {label} : \n",
    ),
}


def choose_level(
    language: Language,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
) -> Level:
    """Show the level menu in ``language`` and ask until a valid number is given."""
    read, write = _console(read, write)
    texts = _MENUS[language]
    write(texts.title + texts.choose)
    for level in Level:
        write(f"  {level.label()} : {level.value} \n")
    write(texts.prompt)
    last = len(Level) - 1
    chosen = Level(_ask_number(read, write, last, texts.retry.format(last=last)))
    write(texts.chosen.format(label=chosen.label()))
    return chosen


def random_entry_line(path: str | os.PathLike, rng: Optional[random.Random] = None) -> int:
    """Pick the line number of a random verb among those the file declares."""
    return RECORD_LINES * _pick_index(path, rng) + 1


def _play_portuguese(word: str, definition: str, read: Reader, write: Writer, rng) -> bool:
    won = _letter_round(
        word,
        read,
        write,
        rng,
        attempts_for(word),
        "\n {attempts} tentativas restantes. Digite sua letra : ",
        " ERROU :( \n",
        _INDENT,
        header=f"\n Adivinhe o verbo !\n\n{definition}\n",
    )
    if won:
        write(f"\n ACERTOU ! O verbo é {ANSI_GREEN}{word}{ANSI_RESET} !\n")
    else:
        write(f"\n Game lost, the word was : {ANSI_GREEN}{word}{ANSI_RESET} \n\n")
    return won


def _play_spanish(
    word: str,
    definition: str,
    read: Reader,
    write: Writer,
    rng,
    pause: Callable[[float], object],
) -> bool:
    hidden = HiddenWord.random(word, rng)
    attempts = 8 if len(word) > 6 else 5

    while not hidden.solved() and attempts > 0:
        write(f"{CLEAR_SCREEN}\n Adivine el verbo !\n\n{definition}\n\n{_INDENT}")
        write(spaced(hidden.shown, "=") + "\n")
        write(f"\n {attempts} tentativas restantes. Escriba su letra : ")
        letter = _read_letter(read)
        if hidden.guess(letter):
            write(f"\n{_INDENT}" + spaced(hidden.shown, letter) + "\n")
        else:
            write("\n SE AQUIVOCO :( \n")
            attempts -= 1
        pause(PAUSE_SECONDS)

    write(CLEAR_SCREEN)
    if hidden.solved():
        write(f"\n GANASTE ! El verbo era {ANSI_GREEN}{word}{ANSI_RESET} !\n")
        return True
    write(f"\n JUEGO PERDIDO, El verbo era : {ANSI_GREEN}{word}{ANSI_RESET} \n\n")
    return False


def play_round(
    language: Language,
    word: str,
    definition: str,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    rng: Optional[random.Random] = None,
    pause: Optional[Callable[[float], object]] = None,
) -> bool:
    """Play one round on ``word``; return True when the player found it."""
    read, write = _console(read, write)
    if language is Language.SPANISH:
        return _play_spanish(word, definition, read, write, rng, pause if pause is not None else time.sleep)
    return _play_portuguese(word, definition, read, write, rng)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the verb guessing game from the command line."""
    parser = argparse.ArgumentParser(prog="guess-verb", description="Guess the verb from its definition.")
    parser.add_argument(
        "language",
        nargs="?",
        default=Language.PORTUGUESE.value,
        choices=[language.value for language in Language],
    )
    parser.add_argument("--dir", default=".", help="directory next to the txt/ verb lists")
    args = parser.parse_args(argv)
    language = Language(args.language)
    rng = random.Random()

    def game() -> None:
        path = os.path.join(args.dir, choose_level(language).filename())
        line = random_entry_line(path, rng)
        play_round(language, line_at(path, line), line_at(path, line + 1), rng=rng)

    return _run_guarded(game)