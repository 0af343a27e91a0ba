[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petitsjeux"
version = "0.1.0"
description = "Small terminal games: word, country and verb guessing, phrasal-verb matching, minesweeper and tic-tac-toe."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "terminal",
    "hangman",
    "minesweeper",
    "tic-tac-toe",
    "vocabulary",
    "language learning",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Natural Language :: French",
    "Natural Language :: Portuguese",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
guess-word = "petitsjeux.guess_word:main"
guess-country = "petitsjeux.guess_country:main"
guess-verb = "petitsjeux.verbs:main"
phrasal-match = "petitsjeux.matching:main"
mines = "petitsjeux.minesweeper:main"
xo = "petitsjeux.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["petitsjeux"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
