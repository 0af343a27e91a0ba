import random

import pytest

from petitsjeux.verbs import (
    Language,
    Level,
    choose_level,
    main,
    play_round,
    random_entry_line,
)


def _feed(answers):
    it = iter(answers)
    return lambda: next(it)


def _play(language, word, letters, seed, pauses=None):
    out = []
    pause = pauses.append if pauses is not None else (lambda _s: None)
    won = play_round(language, word, "to eat", _feed(letters), out.append, random.Random(seed), pause)
    return won, "".join(out)


@pytest.mark.parametrize(
    "level, label, filename",
    [
        (Level.A1_VERBS, "A1_verbs", "../txt/a1_verbs.txt"),
        (Level.A2_VERBS, "A2_verbs", "../txt/a2_verbs.txt"),
        (Level.B1_VERBS, "B1_verbs", "../txt/b1_verbs.txt"),
        (Level.B2_VERBS, "B2_verbs", "../txt/b2_verbs.txt"),
    ],
)
def test_level_labels_and_files(level, label, filename):
    assert level.label() == label
    assert level.filename() == filename


@pytest.mark.parametrize(
    "language, answers, expected, snippets",
    [
        (
            Language.PORTUGUESE,
            ["9", "3"],
            Level.B2_VERBS,
            ["Tente uma escolha válida entre 0 e 3 !", "Advinhe o verbo B2_verbs"],
        ),
        (
            Language.SPANISH,
            ["-1", "0"],
            Level.A1_VERBS,
            ["Elija su nivel", "Tente un numero válido entre 0 e 3 !"],
        ),
    ],
)
def test_choose_level_retries(language, answers, expected, snippets):
    out = []
    assert choose_level(language, _feed(answers), out.append) is expected
    text = "".join(out)
    for snippet in snippets:
        assert snippet in text


def test_random_entry_line_points_at_words(tmp_path):
    path = tmp_path / "a1_verbs.txt"
    path.write_text("4\n", encoding="utf-8")
    for seed in range(40):
        line = random_entry_line(path, random.Random(seed))
        assert (line - 1) % 3 == 0
        assert 4 <= line <= 3 * 4 + 1


def test_random_entry_line_rejects_empty(tmp_path):
    path = tmp_path / "a1_verbs.txt"
    path.write_text("zero\n", encoding="utf-8")
    with pytest.raises(ValueError):
        random_entry_line(path, random.Random(0))


@pytest.mark.parametrize(
    "language, message",
    [
        (Language.PORTUGUESE, "ACERTOU ! O verbo é \033[32mcomer"),
        (Language.SPANISH, "GANASTE ! El verbo era \033[32mcomer"),
    ],
)
def test_win(language, message):
    won, text = _play(language, "comer", "comer", 1)
    assert won is True
    assert "to eat\n" in text
    assert message in text


def test_portuguese_loss_counts_attempts():
    won, text = _play(Language.PORTUGUESE, "comer", "zxqwvy", 2)
    assert won is False
    assert text.count("tentativas restantes") == 6
    assert text.count(" ERROU :( ") == 6


def test_spanish_loss_pauses_after_each_guess():
    pauses = []
    won, text = _play(Language.SPANISH, "comer", "zxqwv", 3, pauses)
    assert won is False
    assert pauses == [2.0] * 5
    assert text.count("SE AQUIVOCO") == 5
    assert "JUEGO PERDIDO, El verbo era : \033[32mcomer" in text


def test_spanish_long_word_allows_eight_mistakes():
    won, text = _play(Language.SPANISH, "escribir", "zxqwvyhk", 4)
    assert won is False
    assert text.count("tentativas restantes") == 8


def test_main_portuguese(tmp_path, monkeypatch, capsys):
    (tmp_path / "src").mkdir()
    (tmp_path / "txt").mkdir()
    (tmp_path / "txt" / "a1_verbs.txt").write_text("1\nx\nx\ncomer\nto eat\n", encoding="utf-8")
    monkeypatch.setattr("builtins.input", _feed(["0"] + list("comer")))
    status = main(["portuguese", "--dir", str(tmp_path / "src")])
    out = capsys.readouterr().out
    assert status == 0
    assert "ACERTOU" in out
    assert "to eat" in out