import io
import time

import pytest

from starterkit.guess.display import QuitGame
from starterkit.guess.game import Game
from starterkit.guess.records import load_scores, load_stats


class _SlowInput:
    """Input that answers only after a delay."""

    def __init__(self, delay, answer):
        self.delay = delay
        self.answer = answer

    def readline(self):
        time.sleep(self.delay)
        return self.answer


def _game(tmp_path, **kwargs):
    game = Game("easy", records_dir=tmp_path, **kwargs)
    game.target = 5
    return game


def test_target_within_bounds(tmp_path):
    game = Game("hard", records_dir=tmp_path)
    assert (game.low, game.high) == (1, 100)
    assert game.low <= game.target <= game.high


def test_unknown_difficulty(tmp_path):
    with pytest.raises(ValueError):
        Game("impossible", records_dir=tmp_path)


def test_win_records_score_and_stats(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n5\n"))
    game = _game(tmp_path)
    assert game.play() is True
    assert game.guesses == 2
    stats = load_stats(tmp_path)
    assert (stats.games_played, stats.games_won, stats.total_guesses) == (1, 1, 2)
    scores = load_scores(tmp_path)
    assert [(s.difficulty, s.guesses) for s in scores] == [("easy", 2)]
    assert "Very close! Go higher." in capsys.readouterr().out


def test_plain_hints(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n1\n5\n"))
    _game(tmp_path, hints=False).play()
    out = capsys.readouterr().out
    assert "Too high!" in out
    assert "Too low!" in out


def test_end_of_input_ends_without_record(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    game = _game(tmp_path)
    assert game.play() is False
    assert load_stats(tmp_path).games_played == 0


def test_quit_propagates(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    with pytest.raises(QuitGame):
        _game(tmp_path).play()


def test_timeout_counts_a_lost_game(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _SlowInput(1.1, "1\n"))
    game = _game(tmp_path, time_limit=1)
    assert game.play() is False
    out = capsys.readouterr().out
    assert "Time's up!" in out
    assert "The number was: 5" in out
    stats = load_stats(tmp_path)
    assert (stats.games_played, stats.games_won) == (1, 0)
    assert load_scores(tmp_path) == []


@pytest.mark.parametrize(
    "guess, hint",
    [
        (4, "Very close! Go higher."),
        (3, "Very close! Go higher."),
        (1, "Close! Go higher."),
        (6, "Very close! Go lower."),
        (9, "Close! Go lower."),
    ],
)
def test_hint_near(tmp_path, guess, hint):
    assert _game(tmp_path).hint_for(guess) == hint


def test_hint_far(tmp_path):
    game = Game("hard", records_dir=tmp_path)
    game.target = 50
    assert game.hint_for(42) == "Go higher!"
    assert game.hint_for(30) == "Much higher"
    assert game.hint_for(58) == "Go lower!"
    assert game.hint_for(90) == "Much lower"