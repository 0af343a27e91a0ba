# petitsjeux

A handful of small games that run in the terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The games

| Command         | Game                                                                  |
|-----------------|-----------------------------------------------------------------------|
| `guess-word`    | Pick a category (country, city or animal) and guess the hidden word letter by letter. |
| `guess-country` | Guess a country letter by letter. Hints about the continent and the capital appear when few tries remain. |
| `guess-verb`    | Pick a level (A1 to B2) and guess a Portuguese or Spanish verb from its definition. |
| `phrasal-match` | Match English phrasal verbs to their definitions by swapping rows in a table. |
| `mines`         | Minesweeper on a 10×10 board.                                         |
| `xo`            | Tic-tac-toe against the computer.                                     |

If input ends (Ctrl-D) or is interrupted (Ctrl-C), a command exits with status 1.

### Word-guessing games

`guess-word`, `guess-country` and `guess-verb` share these rules:

- Some letters start out revealed. Words longer than five characters show two
  letters and shorter words show one. Spaces are always shown.
- Each letter you type reveals every place it occurs. Upper and lower case
  count as the same letter.
- A wrong letter costs one try.
- Words longer than six characters allow 10 wrong letters and shorter words
  allow 6. The Spanish verb game allows 8 and 5. It also clears the screen
  before each guess and pauses two seconds after each one.

In `guess-country`, the continent is shown when two tries remain and the
capital when one try remains.

#### Word list files

The first line of each word list starts with a number, N. How the entry is
chosen depends on the game:

- `guess-word` reads `txt/pays.txt`, `txt/city.txt` or `txt/animals.txt` and
  takes one of lines 1 to N. The count includes the first line itself.
- `guess-country` reads `txt/countries.txt`. It picks k at random from 1 to N.
  The country is on line 4k+1, its continent on the next line and its capital
  on the line after that.
- `guess-verb` reads `../txt/a1_verbs.txt` through `../txt/b2_verbs.txt`. It
  picks k at random from 1 to N. The verb is on line 3k+1 and its definition on
  the next line.

Each path is relative to `--dir`, which defaults to the current directory:

```
guess-word --dir path/to/lists
guess-country --dir path/to/lists
guess-verb spanish --dir path/to/lists
```

`guess-verb` takes `portuguese` (the default) or `spanish`.

### Phrasal-verb matching

```
phrasal-match --file path/to/phrasal_verbs.txt
```

The default file is `../txt/phrasal_verbs.txt`. In it, each line that starts
with a letter names a starter verb. Beneath it come that verb's phrasal verbs,
one per line, written like this:

```
- Set in: To begin and continue.
```

The exercise picks one starter verb at random and uses up to ten of its
phrasal verbs. Verbs are numbered on the left. Definitions are lettered on the
right and shuffled so that none starts next to its own verb.

Type a row number and a letter, for example `2c`, to swap those two
definitions. Type `0a` when you are done. Your answer is then scored and shown
next to the expected one.

### Minesweeper

Coordinates are two digits: the column first, then the row. Add `d` to dig a
tile. Add `m` to put a flag on a hidden tile or take it off:

```
42 d
42 m
```

The board starts with 20 mines, and 33 safe tiles are already revealed. You
win once every safe tile is revealed. You lose if you dig a mine. A flagged
tile cannot be dug until its flag is removed. The board does not open empty
areas automatically: each dig reveals a single tile.

### Tic-tac-toe

```
xo --difficulty 10
```

You are given X or O at random, and you move first. Enter a free position
from 0 to 8.

On each turn the computer goes for the centre tile with probability
(difficulty − 1) / difficulty. If the centre is taken, it passes its turn.
Otherwise it plays a random free tile. The difficulty defaults to 10 and must
be at least 1.

## Using the pieces from Python

The game logic can be imported:

- `petitsjeux.wordplay.HiddenWord.random(word, rng)` builds a masked word.
  Its `guess(letter)` method returns whether the letter was present, and
  `solved()` tells whether the word is complete.
- `petitsjeux.minesweeper.Board(mines, revealed, rng)` holds a minefield.
  - `play((x, y, action))` returns an `Outcome`, or raises `ValueError` for a
    move that is not allowed.
  - `render(mines, hidden)` draws the board.
- `petitsjeux.tictactoe.Board` holds the nine tiles. Use `place`,
  `is_winning_move`, `winning_move` and `dangerous_tile` to play and inspect
  it.

The round functions accept `read` and `write` callables in place of the
terminal, and a `random.Random` for repeatable games. These are `play_round`
in `guess_word`, `guess_country` and `verbs`, plus `matching.run_exercise` and
`tictactoe.play`.

Each command's `main` function also accepts an argument list, for example
`petitsjeux.tictactoe.main(["--difficulty", "3"])`.

## What is not included

- No word lists ship with the package. You must supply the files described
  above.
- No scores or game history are saved between runs.