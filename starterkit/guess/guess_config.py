"""Settings of the guessing game, kept as a JSON file."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

_CONFIG_NAME = "config.json"


def default_config_path() -> Path:
    """The configuration file in the user's home directory."""
    return Path.home() / ".config" / "guess-game" / _CONFIG_NAME


def _field(data: dict, key: str, kind: type, zero: Any) -> Any:
    value = data.get(key)
    if value is None:
        return zero
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise TypeError(f"config field {key!r} has the wrong type")
    return value


@dataclass
class GameConfig:
    """Game defaults the player can change."""

    default_difficulty: str = "medium"
    enable_colors: bool = True
    enable_sound: bool = False
    default_time_limit: int = 0

    @classmethod
    def load(cls, path: str | Path | None = None) -> GameConfig:
        """Read the configuration; defaults when the file does not exist.

        Fields missing from an existing file take their zero values.
        """
        path = Path(path) if path is not None else default_config_path()
        if not path.exists():
            return cls()
        data = json.loads(path.read_text(encoding="utf-8"))
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TypeError("configuration must be a JSON object")
        return cls(
            default_difficulty=_field(data, "default_difficulty", str, ""),
            enable_colors=_field(data, "enable_colors", bool, False),
            enable_sound=_field(data, "enable_sound", bool, False),
            default_time_limit=_field(data, "default_time_limit", int, 0),
        )

    def save(self, path: str | Path | None = None) -> None:
        """Write the configuration, creating its directory if needed."""
        path = Path(path) if path is not None else default_config_path()
        path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(self), indent=1), encoding="utf-8")