import io
import json

import pytest

from starterkit.guess.guess_cli import main
from starterkit.guess.records import load_scores, load_stats


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def _records(home):
    return home / ".config" / "guess-game"


def test_reset_writes_empty_records(home, capsys):
    assert main(["reset"]) == 0
    out = capsys.readouterr().out
    assert "Game data reset successfully!" in out
    stats = json.loads((_records(home) / "stats.json").read_text())
    assert stats["games_played"] == 0
    assert json.loads((_records(home) / "score.json").read_text()) == []


def test_stats_on_fresh_home(home, capsys):
    assert main(["stats"]) == 0
    out = capsys.readouterr().out
    assert "Games Played: 0" in out
    assert "Recent High Scores" not in out


def test_config_shows_defaults(home, capsys):
    assert main(["config"]) == 0
    out = capsys.readouterr().out
    assert "Default Difficulty: medium" in out
    assert "Default Time Limit: 0 seconds" in out


def test_play_with_unknown_difficulty_fails(home, capsys):
    assert main(["play", "-d", "nope"]) == 1
    captured = capsys.readouterr()
    assert "Welcome to the Number Guessing Game!" in captured.out
    assert "unknown difficulty: nope" in captured.err


def test_play_quit_exits_cleanly(home, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main(["play"]) == 0
    assert "Thanks for playing!" in capsys.readouterr().out


def test_play_easy_until_won_records_result(home, capsys, monkeypatch):
    guesses = "".join(f"{n}\n" for n in range(1, 11))
    monkeypatch.setattr("sys.stdin", io.StringIO(guesses))
    assert main(["play", "--difficulty", "easy"]) == 0
    assert "Congratulations!" in capsys.readouterr().out
    stats = load_stats(_records(home))
    assert stats.games_played == 1
    assert stats.games_won == 1
    scores = load_scores(_records(home))
    assert [score.difficulty for score in scores] == ["easy"]


def test_play_without_hints_gives_only_direction(home, capsys, monkeypatch):
    guesses = "".join(f"{n}\n" for n in range(1, 11))
    monkeypatch.setattr("sys.stdin", io.StringIO(guesses))
    assert main(["play", "-d", "easy", "--hints=false"]) == 0
    out = capsys.readouterr().out
    assert "Very close" not in out
    assert "Go higher" not in out


def test_play_rejects_bad_hints_value(home):
    with pytest.raises(SystemExit) as info:
        main(["play", "--hints=maybe"])
    assert info.value.code == 2


def test_no_command_prints_help(home, capsys):
    assert main([]) == 0
    assert "guess-game" in capsys.readouterr().out