"""Small terminal games: word, country and verb guessing, phrasal-verb matching, minesweeper and tic-tac-toe."""

__version__ = "0.1.0"