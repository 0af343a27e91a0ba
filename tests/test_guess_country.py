import random

import pytest

from petitsjeux.guess_country import (
    Country,
    hint,
    load_country,
    main,
    play_round,
    random_record_line,
)


def _feed(answers):
    it = iter(answers)
    return lambda: next(it)


def _countries(tmp_path, lines):
    path = tmp_path / "countries.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "attempts, expected",
    [
        (2, "this country is located in Europe"),
        (1, "this country's capital is Paris"),
        (0, "GEOGRAPHY CLASSES"),
    ],
)
def test_hint_levels(attempts, expected):
    assert expected in hint(attempts, "Europe", "Paris")


@pytest.mark.parametrize("attempts", [3, -1])
def test_no_hint_otherwise(attempts):
    assert hint(attempts, "Europe", "Paris") == ""


def test_random_record_line_points_at_record_starts(tmp_path):
    path = _countries(tmp_path, ["3"])
    for seed in range(40):
        line = random_record_line(path, random.Random(seed))
        assert (line - 1) % 4 == 0
        assert 5 <= line <= 4 * 3 + 1


def test_random_record_line_rejects_empty_declaration(tmp_path):
    with pytest.raises(ValueError):
        random_record_line(_countries(tmp_path, ["none"]), random.Random(0))


def test_load_country_reads_three_lines(tmp_path):
    path = _countries(tmp_path, ["1", "", "", "", "France", "Europe", "Paris"])
    assert load_country(path, 5) == Country("France", "Europe", "Paris")


def test_load_country_past_end(tmp_path):
    with pytest.raises(IndexError):
        load_country(_countries(tmp_path, ["1", "France"]), 2)


def test_play_round_win():
    out = []
    won = play_round(Country("Peru", "America", "Lima"), _feed("peru"), out.append, random.Random(1))
    text = "".join(out)
    assert won is True
    assert "CONGRATS! The country was \033[32mPeru" in text
    assert "Peru is located in America and its capital is Lima." in text


def test_play_round_loss_shows_hints():
    out = []
    won = play_round(Country("France", "Europe", "Paris"), _feed("zxqwvy"), out.append, random.Random(2))
    text = "".join(out)
    assert won is False
    assert "Hint 1 :" in text
    assert "Hint 2 :" in text
    assert "Hint 3 :" not in text
    assert text.count("Wrong letter :( ") == 6
    assert "Game lost, the country was : \033[32mFrance" in text


def test_main_plays_a_round(tmp_path, monkeypatch, capsys):
    (tmp_path / "txt").mkdir()
    _countries(tmp_path / "txt", ["1", "x", "x", "x", "Peru", "America", "Lima"])
    monkeypatch.setattr("builtins.input", _feed("peru"))
    status = main(["--dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert status == 0
    assert "Welcome to guess the country !" in out
    assert "CONGRATS! The country was" in out