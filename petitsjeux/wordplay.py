"""Letter guessing helpers shared by the word games."""

from __future__ import annotations

import random
from dataclasses import dataclass

MASK = "_"
ANSI_RED = "\033[31m"
ANSI_RESET = "\033[0m"

SHORT_WORD_ATTEMPTS = 6
LONG_WORD_ATTEMPTS = 10
LONG_WORD_THRESHOLD = 6


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def count_letter(letter: str, word: str) -> int:
    """Count the occurrences of ``letter`` in ``word``, ignoring case."""
    target = letter.lower()
    return sum(1 for ch in word if ch.lower() == target)


def letter_exists(letter: str, word: str) -> bool:
    """Tell whether ``letter`` appears in ``word``, ignoring case."""
    return count_letter(letter, word) != 0


def mask_word(word: str, rng: random.Random | None = None) -> str:
    """Hide every letter of ``word`` except one or two chosen at random.

    Spaces stay visible. Words longer than five characters get two distinct
    revealed positions, shorter ones a single one. The last position is
    never picked.
    """
    if len(word) < 2:
        raise ValueError("a word needs at least two characters to be masked")
    rng = _rng(rng)
    shown = [ch if ch == " " else MASK for ch in word]
    limit = len(word) - 1
    first = rng.randrange(limit)
    shown[first] = word[first]
    if len(word) > 5:
        second = first
        while second == first:
            second = rng.randrange(limit)
        shown[second] = word[second]
    return "".join(shown)


def spaced(text: str, highlight: str | None = None) -> str:
    """Lay out ``text`` with a space after each character.

    Characters equal to ``highlight`` are wrapped in red.
    """
    parts = []
    for ch in text:
        if highlight is not None and ch == highlight:
            parts.append(f"{ANSI_RED}{ch}{ANSI_RESET} ")
        else:
            parts.append(f"{ch} ")
    return "".join(parts)


def attempts_for(word: str) -> int:
    """Number of wrong guesses allowed for ``word``."""
    length = len(word)
    if length > LONG_WORD_THRESHOLD:
        return LONG_WORD_ATTEMPTS
    return SHORT_WORD_ATTEMPTS


@dataclass
class HiddenWord:
    """A word to guess together with the part of it shown so far."""

    original: str
    shown: str

    def __post_init__(self) -> None:
        if len(self.original) != len(self.shown):
            raise ValueError("shown form must be as long as the word")

    @classmethod
    def random(cls, word: str, rng: random.Random | None = None) -> "HiddenWord":
        """Start from ``word`` with one or two random letters revealed."""
        return cls(word, mask_word(word, rng))

    def guess(self, letter: str) -> bool:
        """Reveal every occurrence of ``letter``; return whether it was present."""
        if not letter_exists(letter, self.original):
            return False
        target = letter.lower()
        self.shown = "".join(
            orig if orig.lower() == target else seen
            for orig, seen in zip(self.original, self.shown)
        )
        return True

    def solved(self) -> bool:
        """True once no masked position is left."""
        return MASK not in self.shown

    def __str__(self) -> str:
        return self.shown