"""Scores and statistics of past games, kept as JSON files."""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

_SCORES_FILE = "score.json"
_STATS_FILE = "stats.json"
_FRACTION = re.compile(r"\.(\d+)")


def data_dir() -> Path:
    """The directory the game keeps its records in."""
    return Path.home() / ".config" / "guess-game"


def _directory(directory: str | Path | None) -> Path:
    return Path(directory) if directory is not None else data_dir()


def _parse_time(text: Any) -> datetime:
    if not isinstance(text, str):
        raise TypeError("date must be a string")
    text = text.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.astimezone()
    return value


def _nanoseconds(value: timedelta) -> int:
    return ((value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds) * 1000


def _int(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"field {key!r} must be an integer")
    return value


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class Score:
    """The result of one won game."""

    difficulty: str
    guesses: int
    time: timedelta
    date: datetime = field(default_factory=_now)

    def to_dict(self) -> dict[str, Any]:
        """The score as a JSON-ready mapping; the time in nanoseconds."""
        return {
            "difficulty": self.difficulty,
            "guesses": self.guesses,
            "time": _nanoseconds(self.time),
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Score:
        """Build a score from its JSON mapping."""
        if not isinstance(data, dict):
            raise TypeError("score entry must be an object")
        difficulty = data.get("difficulty") or ""
        if not isinstance(difficulty, str):
            raise TypeError("field 'difficulty' must be a string")
        date = data.get("date")
        return cls(
            difficulty=difficulty,
            guesses=_int(data, "guesses"),
            time=timedelta(microseconds=_int(data, "time") // 1000),
            date=_parse_time(date) if date is not None else datetime.min.astimezone(),
        )


@dataclass
class Stats:
    """Running totals over all games."""

    games_played: int = 0
    games_won: int = 0
    total_guesses: int = 0
    best_streak: int = 0
    current_streak: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Stats:
        """Build statistics from their JSON mapping."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError("statistics must be a JSON object")
        return cls(
            games_played=_int(data, "games_played"),
            games_won=_int(data, "games_won"),
            total_guesses=_int(data, "total_guesses"),
            best_streak=_int(data, "best_streak"),
            current_streak=_int(data, "current_streak"),
        )


def _write(path: Path, payload: Any) -> None:
    path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=1), encoding="utf-8")


def load_scores(directory: str | Path | None = None) -> list[Score]:
    """All recorded scores, newest first."""
    path = _directory(directory) / _SCORES_FILE
    if not path.exists():
        return []
    raw = json.loads(path.read_text(encoding="utf-8"))
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise TypeError("scores must be a JSON list")
    scores = [Score.from_dict(item) for item in raw]
    scores.sort(key=lambda score: score.date, reverse=True)
    return scores


def _save_scores(scores: list[Score], directory: str | Path | None) -> None:
    _write(_directory(directory) / _SCORES_FILE, [score.to_dict() for score in scores])


def save_score(score: Score, directory: str | Path | None = None) -> None:
    """Add a score to the recorded ones."""
    scores = load_scores(directory)
    scores.append(score)
    _save_scores(scores, directory)


def load_stats(directory: str | Path | None = None) -> Stats:
    """The recorded statistics; zero totals when none exist yet."""
    path = _directory(directory) / _STATS_FILE
    if not path.exists():
        return Stats()
    return Stats.from_dict(json.loads(path.read_text(encoding="utf-8")))


def save_stats(stats: Stats, directory: str | Path | None = None) -> None:
    """Write the statistics."""
    _write(_directory(directory) / _STATS_FILE, asdict(stats))


def reset_all(directory: str | Path | None = None) -> None:
    """Forget all scores and statistics."""
    _save_scores([], directory)
    save_stats(Stats(), directory)