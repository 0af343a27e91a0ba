"""Minesweeper on a ten by ten board, played from the terminal."""

from __future__ import annotations

import argparse
import random
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional

Reader = Callable[[], str]
Writer = Callable[[str], None]

ROWS = 10
COLUMNS = 10

RED = "\x1b[31m"
GREEN = "\x1b[32m"
MAGENTA = "\x1b[35m"
RESET = "\x1b[0m"

_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)
_COORDINATES = re.compile(r"[0-9]{2}")


def _stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


@dataclass
class Tile:
    """One square of the board."""

    explosive: bool = False
    hidden: bool = True
    mines_nearby: int = 0
    marked: bool = False


class Outcome(Enum):
    """What a move did to the board."""

    EXPLODED = 0
    REVEALED = 1
    MARKED = 2


def _valid(x: int, y: int) -> bool:
    return 0 <= x < ROWS and 0 <= y < COLUMNS


class Board:
    """The grid of tiles, indexed by (row, column)."""

    def __init__(self, mines: int, revealed: int, rng: Optional[random.Random] = None) -> None:
        if mines < 0 or revealed < 0:
            raise ValueError("mine and reveal counts must not be negative")
        if mines + revealed > ROWS * COLUMNS:
            raise ValueError("more mines and revealed tiles than the board holds")
        rng = rng if rng is not None else random.Random()
        self._grid = [[Tile() for _ in range(COLUMNS)] for _ in range(ROWS)]

        for _ in range(mines):
            tile = self._random_tile(rng)
            while tile.explosive:
                tile = self._random_tile(rng)
            tile.explosive = True

        for (x, y), tile in self:
            tile.mines_nearby = self.explosive_neighbours(x, y)

        for _ in range(revealed):
            tile = self._random_tile(rng)
            while tile.explosive or not tile.hidden:
                tile = self._random_tile(rng)
            tile.hidden = False

    def _random_tile(self, rng: random.Random) -> Tile:
        x = rng.randrange(ROWS)
        y = rng.randrange(COLUMNS)
        return self._grid[x][y]

    def __getitem__(self, position: tuple[int, int]) -> Tile:
        x, y = position
        if not _valid(x, y):
            raise IndexError(f"no tile at {position}")
        return self._grid[x][y]

    def __iter__(self) -> Iterator[tuple[tuple[int, int], Tile]]:
        for x, row in enumerate(self._grid):
            for y, tile in enumerate(row):
                yield (x, y), tile

    def _neighbours(self, x: int, y: int) -> Iterator[Tile]:
        for dx, dy in _OFFSETS:
            if _valid(x + dx, y + dy):
                yield self._grid[x + dx][y + dy]

    def explosive_neighbours(self, x: int, y: int) -> int:
        """Number of mines around the tile at (x, y)."""
        return sum(1 for tile in self._neighbours(x, y) if tile.explosive)

    def hidden_neighbours(self, x: int, y: int) -> int:
        """Number of hidden tiles around the tile at (x, y)."""
        return sum(1 for tile in self._neighbours(x, y) if tile.hidden)

    def play(self, command: tuple[int, int, str]) -> Outcome:
        """Apply ``(x, y, action)``: ``m`` toggles a mark, ``d`` digs.

        A move that cannot be made raises ValueError with the reason.
        """
        x, y, action = command
        if not _valid(x, y):
            raise ValueError(
                f"Position invalide ! Veuillez choisir des coordonnées entre 0 et {ROWS - 1}."
            )
        tile = self._grid[x][y]
        if action == "m":
            if not tile.hidden:
                raise ValueError("Cette case n'est pas cachée, inutile de la marquer ;)")
            tile.marked = not tile.marked
            return Outcome.MARKED
        if action != "d":
            raise ValueError(
                "Veuillez ajouter 'm' ou 'd' après votre position choisie (ex: 42 d)."
            )
        if tile.marked:
            raise ValueError("Position marquée ! Veuillez démarquer avant de déminer.")
        if not tile.hidden:
            raise ValueError("Cette case est déjà révélée !")
        tile.hidden = False
        return Outcome.EXPLODED if tile.explosive else Outcome.REVEALED

    @staticmethod
    def _cell(tile: Tile) -> str:
        if tile.hidden:
            return " 🟥 ║" if tile.marked else " ⬜ ║"
        if tile.explosive:
            return " 💣 ║"
        if tile.mines_nearby:
            return f" {tile.mines_nearby}  ║"
        return "    ║"

    def render(self, mines: int, hidden: int) -> str:
        """Draw the board; non-zero counts are shown beside it."""
        bar = "════"
        out = ["    " + "".join(f" {y:2d}  " for y in range(COLUMNS)) + "\n"]
        out.append("    ╔" + "╦".join([bar] * COLUMNS) + "╗\n")
        for x, row in enumerate(self._grid):
            out.append(f"{x:2d}  ║" + "".join(self._cell(tile) for tile in row) + "\n")
            if x < ROWS - 1:
                out.append("    ╠" + "╬".join([bar] * COLUMNS))
                if x == 1 and mines:
                    out.append(f"╣       nombre de mines : {mines}\n")
                elif x == 2 and hidden:
                    out.append(f"╣       nombre de cases cachées : {hidden}\n")
                else:
                    out.append("╣\n")
        out.append("    ╚" + "╩".join([bar] * COLUMNS) + "╝\n ")
        return "".join(out)

    def reveal_all(self) -> None:
        """Uncover every tile and drop the neighbour counts."""
        for _, tile in self:
            tile.hidden = False
            tile.mines_nearby = 0


def parse_command(text: str) -> tuple[int, int, str]:
    """Parse ``"42 d"`` into (row 2, column 4, action ``d``)."""
    tokens = text.split()
    if not tokens or not _COORDINATES.fullmatch(tokens[0]):
        raise ValueError("Veuillez entrer une coordonnée valide (deux chiffres) !")
    digits = tokens[0]
    action = tokens[1][0] if len(tokens) > 1 else ""
    return int(digits[1]), int(digits[0]), action


def frame(text: str, color: str) -> str:
    """Return ``text`` drawn inside a coloured box."""
    width = len(text.encode("utf-8")) + 2
    return (
        f"{color}                     ╔" + "═" * width + "╗\n"
        f"                     ║       {color}{text}       ║\n"
        f"{color}                     ╚" + "═" * width + f"╝\n{RESET}"
    )


def _game(board: Board, mines: int, hidden: int, read: Reader, write: Writer) -> bool:
    write(board.render(mines, hidden))
    exploded = False
    while True:
        write(
            "Entrez les coordonnées de la case (ex: 42 m pour marquer, 42 d pour déminer): "
        )
        try:
            command = parse_command(read())
            write(f"x : {command[0]}, y : {command[1]}\n")
            outcome = board.play(command)
        except ValueError as error:
            write(f"\n{error}\n\n")
            outcome = None
        if outcome is Outcome.REVEALED:
            hidden -= 1
        write(board.render(mines, hidden))
        if outcome is Outcome.EXPLODED:
            exploded = True
            break
        if hidden == mines:
            break
    board.reveal_all()
    return not exploded


def main(argv: Optional[list[str]] = None) -> int:
    """Play a game of minesweeper in the terminal."""
    parser = argparse.ArgumentParser(prog="mines", description="Minesweeper on a 10x10 board.")
    parser.parse_args(argv)
    mines = ROWS * COLUMNS // 5
    revealed = ROWS * COLUMNS // 3
    _stdout("\n")
    _stdout(frame("💣💣💣  BIENVENU AU JEU DEMINER  💣💣💣", MAGENTA))
    board = Board(mines, revealed)
    try:
        won = _game(board, mines, ROWS * COLUMNS - revealed, input, _stdout)
    except (EOFError, KeyboardInterrupt):
        _stdout("\n")
        return 1
    if won:
        _stdout("\n")
        _stdout(frame("  🏆🏆🏆 VOUS AVEZ GAGNE ! 🏆🏆🏆  ", GREEN))
        _stdout("\n")
    else:
        _stdout("\n")
        _stdout(board.render(mines, 0))
        _stdout("\n")
        _stdout(frame("  💣💣💣 VOUS AVEZ PERDU ! 💣💣💣  ", RED))
        _stdout("\n")
    return 0