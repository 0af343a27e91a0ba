import random

import pytest

from petitsjeux.matching import (
    GREEN,
    RED,
    count_correct,
    final_colors,
    letter_index,
    parse_move,
    render_table,
    run_exercise,
    shuffle_pairs,
)

PAIRS = [
    ("Get away with", "To avoid punishment"),
    ("Get down", "To feel sad or depressed"),
    ("Get up", "To rise"),
    ("Get over", "To recover"),
]


def test_letter_index():
    assert letter_index("a") == 0
    assert letter_index("c") == 2
    with pytest.raises(ValueError):
        letter_index("A")


@pytest.mark.parametrize("seed", range(10))
def test_shuffle_moves_every_definition(seed):
    shuffled = shuffle_pairs(PAIRS, random.Random(seed))
    assert [verb for verb, _ in shuffled] == [verb for verb, _ in PAIRS]
    assert sorted(d for _, d in shuffled) == sorted(d for _, d in PAIRS)
    assert count_correct(PAIRS, shuffled) == 0


def test_shuffle_single_pair_unchanged():
    assert shuffle_pairs(PAIRS[:1], random.Random(1)) == PAIRS[:1]


def test_render_table_shape():
    table = render_table(PAIRS)
    lines = table.splitlines()
    assert len(lines) == len(PAIRS) + 2
    assert lines[0].startswith("╔") and lines[0].endswith("╗")
    assert lines[-1].startswith("╚") and lines[-1].endswith("╝")
    assert " ║  0 ✦------------✦ a ║" in lines[1]
    assert len({len(line) for line in lines[1:-1]}) == 1


def test_render_table_colors():
    table = render_table(PAIRS, [RED, GREEN, 0, 0])
    assert "\x1b[31m To avoid punishment\x1b[0m" in table
    assert "\x1b[32m To feel sad or depressed\x1b[0m" in table


def test_parse_move():
    assert parse_move("3b", 4) == (3, 1)
    assert parse_move("0a", 4) == (0, 0)


@pytest.mark.parametrize("text", ["4a", "1e", "x1", "2", "2B"])
def test_parse_move_rejects(text):
    with pytest.raises(ValueError):
        parse_move(text, 4)


def test_count_and_final_colors():
    response = [PAIRS[0], (PAIRS[1][0], PAIRS[2][1]), (PAIRS[2][0], PAIRS[1][1]), PAIRS[3]]
    assert count_correct(PAIRS, response) == 2
    assert final_colors(PAIRS, response) == [GREEN, RED, RED, GREEN]


@pytest.fixture
def verbs_file(tmp_path):
    path = tmp_path / "phrasal_verbs.txt"
    path.write_text(
        "Get\n"
        "- Get away with: To avoid punishment.\n"
        "- Get down: To feel sad or depressed.\n",
        encoding="utf-8",
    )
    return path


def test_run_exercise_solved(verbs_file):
    answers = iter(["", "5z", "0b", "0a"])
    out = []
    result = run_exercise(verbs_file, lambda: next(answers), out.append, random.Random(3))
    assert result == (2, 2)
    text = "".join(out)
    assert "Unvalid arguments" in text
    assert "2 / 2" in text


def test_run_exercise_given_up(verbs_file):
    answers = iter(["0a"])
    out = []
    result = run_exercise(verbs_file, lambda: next(answers), out.append, random.Random(3))
    assert result == (0, 2)
    assert "expected response :\n" in out


def test_run_exercise_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        run_exercise(path, lambda: "0a", lambda text: None, random.Random(0))