"""Tic-tac-toe against the computer."""

from __future__ import annotations

import argparse
import random
import re
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

Reader = Callable[[], str]
Writer = Callable[[str], None]

CENTER = 4
_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class Sign(IntEnum):
    """Content of a tile."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741

    def opposite(self) -> "Sign":
        """X for O, O for X, EMPTY for EMPTY."""
        if self is Sign.X:
            return Sign.O
        if self is Sign.O:
            return Sign.X
        return self


@dataclass
class Board:
    """Nine tiles numbered 0 to 8, row by row."""

    cells: list[Sign] = field(default_factory=lambda: [Sign.EMPTY] * 9)

    def __getitem__(self, position: int) -> Sign:
        return self.cells[position]

    def free_tiles(self) -> int:
        """Number of empty tiles."""
        return self.cells.count(Sign.EMPTY)

    def place(self, position: int, sign: Sign) -> None:
        """Put ``sign`` on an empty tile; raise ValueError if it is taken."""
        if self.cells[position] is not Sign.EMPTY:
            raise ValueError(f"tile {position} is already taken")
        self.cells[position] = sign

    def is_winning_move(self, position: int, sign: Sign) -> bool:
        """True when playing ``sign`` on the empty ``position`` completes a line."""
        if self.cells[position] is not Sign.EMPTY:
            return False
        return any(
            all(self.cells[other] == sign for other in line if other != position)
            for line in _LINES
            if position in line
        )

    def winning_move(self, sign: Sign) -> Optional[int]:
        """First position that wins for ``sign``, or None."""
        return next((pos for pos in range(9) if self.is_winning_move(pos, sign)), None)

    def dangerous_tile(self, sign: Sign) -> Optional[int]:
        """First empty position where the opponent of ``sign`` would win, or None."""
        opponent = sign.opposite()
        return next(
            (
                pos
                for pos in range(9)
                if self.cells[pos] is Sign.EMPTY and self.is_winning_move(pos, opponent)
            ),
            None,
        )

    def random_free(self, rng: Optional[random.Random] = None) -> int:
        """A random empty position."""
        if not self.free_tiles():
            raise ValueError("the board is full")
        rng = rng if rng is not None else random.Random()
        pos = rng.randrange(9)
        while self.cells[pos] is not Sign.EMPTY:
            pos = rng.randrange(9)
        return pos

    def render(self) -> str:
        """Draw the board with free tiles showing their number."""
        out = ["\n"]
        for pos, sign in enumerate(self.cells):
            if sign is Sign.X:
                out.append(" \033[35mX\033[0m ")
            elif sign is Sign.O:
                out.append(" \033[34mO\033[0m ")
            else:
                out.append(f" \033[31m{pos}\033[0m ")
            if pos % 3 != 2:
                out.append("|")
            elif pos != 8:
                out.append("\n---+---+---\n")
        out.append("\n\n")
        return "".join(out)


def computer_choice(
    board: Board, sign: Sign, difficulty: int, rng: Optional[random.Random] = None
) -> int:
    """Pick the computer's tile.

    With probability (difficulty - 1) / difficulty the computer plays smart
    and always aims for the centre; otherwise it picks a random free tile.
    """
    if difficulty < 1:
        raise ValueError("difficulty must be at least 1")
    rng = rng if rng is not None else random.Random()
    if rng.randrange(difficulty) != 0:
        return CENTER
    return board.random_free(rng)


def computer_turn(
    board: Board,
    sign: Sign,
    difficulty: int,
    rng: Optional[random.Random] = None,
    write: Optional[Writer] = None,
) -> bool:
    """Play the computer's move; return False once the game is over.

    When the chosen tile is already taken the computer passes.
    """
    write = write if write is not None else _stdout
    write("Computer's turn : \n\n")
    pos = computer_choice(board, sign, difficulty, rng)
    if board.is_winning_move(pos, sign):
        board.place(pos, sign)
        write("You lost !\n")
        return False
    if board[pos] is Sign.EMPTY:
        board.place(pos, sign)
    if board.free_tiles() == 0:
        write("Game over, no more free tiles available\n")
        return False
    return True


def _ask_position(board: Board, read: Reader, write: Writer) -> int:
    while True:
        line = read()
        if not line.strip():
            continue
        match = _LEADING_INT.match(line)
        if match:
            pos = int(match.group(1))
            if 0 <= pos <= 8 and board[pos] is Sign.EMPTY:
                return pos
        write("\nInvalid position, select another position (0-8): ")


def human_turn(
    board: Board,
    sign: Sign,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
) -> bool:
    """Ask for and play the human's move; return False once the game is over."""
    read = read if read is not None else input
    write = write if write is not None else _stdout
    write("Your turn : \n")
    write("Select a valid position (0-8): ")
    pos = _ask_position(board, read, write)
    if board.is_winning_move(pos, sign):
        board.place(pos, sign)
        write("You won !\n")
        write(board.render())
        return False
    board.place(pos, sign)
    if board.free_tiles() == 0:
        write("Game over, no more free tiles available\n")
        return False
    return True


def play(
    board: Board,
    difficulty: int,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    rng: Optional[random.Random] = None,
) -> Sign:
    """Play a whole game, the human moving first; return the human's sign."""
    read = read if read is not None else input
    write = write if write is not None else _stdout
    rng = rng if rng is not None else random.Random()
    human = Sign(rng.randrange(2) + 1)
    machine = human.opposite()
    write(f"You are {human.name}, computer is {machine.name}\n")
    write(board.render())
    while True:
        if not human_turn(board, human, read, write):
            break
        write(board.render())
        if not computer_turn(board, machine, difficulty, rng, write):
            break
        write(board.render())
    return human


def main(argv: Optional[list[str]] = None) -> int:
    """Play tic-tac-toe against the computer in the terminal."""
    parser = argparse.ArgumentParser(prog="xo", description="Tic-tac-toe against the computer.")
    parser.add_argument("--difficulty", type=int, default=10, help="higher is smarter (default 10)")
    args = parser.parse_args(argv)
    if args.difficulty < 1:
        parser.error("difficulty must be at least 1")
    try:
        play(Board(), args.difficulty)
    except (EOFError, KeyboardInterrupt):
        _stdout("\n")
        return 1
    return 0