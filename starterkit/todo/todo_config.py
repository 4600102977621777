"""Where the todo list keeps its files."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass
class TodoConfig:
    """Locations of the data, backups and task file."""

    data_dir: Path
    backup_dir: Path
    tasks_file: Path
    max_backups: int = 10

    @classmethod
    def for_home(cls, home: str | Path | None = None) -> TodoConfig:
        """Configuration rooted at ``home``, the user's home directory by default."""
        if home is None:
            try:
                home = Path.home()
            except (RuntimeError, KeyError):
                home = Path(".")
        home = Path(home)
        return cls(
            data_dir=home / ".todo",
            backup_dir=home / "backups",
            tasks_file=home / "tasks.json",
        )

    def ensure_directories(self) -> None:
        """Create the data and backup directories if missing."""
        for directory in (self.data_dir, self.backup_dir):
            directory.mkdir(mode=0o755, parents=True, exist_ok=True)

    def backup_path(self) -> Path:
        """A backup file name stamped with the current time."""
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return self.backup_dir / f"tasks_{stamp}.json"

    def temp_path(self) -> Path:
        """The file written before it replaces the task file."""
        return self.tasks_file.with_name(self.tasks_file.name + ".temp")