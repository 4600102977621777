"""Persistence of the task list as a JSON file, with backups and legacy migration."""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path
from typing import Any, Iterable

from starterkit.todo.task import Task
from starterkit.todo.todo_config import TodoConfig
from starterkit.todo.todo_errors import StorageError

_BACKUP_PREFIX = "tasks_"
_BACKUP_SUFFIX = ".json"


def _legacy_entries(raw: Any) -> list[tuple[int, str, bool]] | None:
    """The (id, description, done) triples of a legacy file, or None if it is not one."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        return None
    entries = []
    for item in raw:
        if not isinstance(item, dict):
            return None
        task_id = item.get("id")
        description = item.get("description")
        done = item.get("done")
        if task_id is None:
            task_id = 0
        if description is None:
            description = ""
        if done is None:
            done = False
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            return None
        if not isinstance(description, str) or not isinstance(done, bool):
            return None
        entries.append((task_id, description, done))
    return entries


class JSONStorage:
    """Reads and writes tasks at the locations a TodoConfig names."""

    def __init__(self, config: TodoConfig):
        self.config = config

    def _ensure_directories(self, op: str, path: Path) -> None:
        try:
            self.config.ensure_directories()
        except OSError as exc:
            raise StorageError(op, str(path), exc) from exc

    def load_tasks(self) -> list[Task]:
        """All stored tasks; an empty list when there is no task file yet."""
        self._ensure_directories("create directories", self.config.data_dir)
        path = self.config.tasks_file
        if not path.exists():
            return []
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError("read", str(path), exc) from exc
        try:
            raw = json.loads(text)
            if raw is None:
                return []
            if not isinstance(raw, list):
                raise TypeError("expected a list of tasks")
            return [Task.from_dict(item) for item in raw]
        except (ValueError, TypeError) as exc:
            raise StorageError("unmarshal", str(path), exc) from exc

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        """Write the tasks, replacing the task file atomically."""
        self._ensure_directories("create directories", self.config.data_dir)
        data = json.dumps([task.to_dict() for task in tasks], indent=1, ensure_ascii=False)
        temp = self.config.temp_path()
        try:
            temp.write_text(data, encoding="utf-8")
        except OSError as exc:
            raise StorageError("write temp", str(temp), exc) from exc
        try:
            os.replace(temp, self.config.tasks_file)
        except OSError as exc:
            temp.unlink(missing_ok=True)
            raise StorageError("rename", str(self.config.tasks_file), exc) from exc

    def _backup_files(self) -> list[Path]:
        pattern = f"{_BACKUP_PREFIX}*{_BACKUP_SUFFIX}"
        return sorted(self.config.backup_dir.glob(pattern), key=str)

    def _cleanup_old_backups(self) -> None:
        files = self._backup_files()
        excess = len(files) - self.config.max_backups
        for path in files[: max(excess, 0)]:
            path.unlink()

    def create_backup(self) -> None:
        """Copy the task file into the backup directory and prune old backups."""
        if not self.config.tasks_file.exists():
            return
        self._ensure_directories("create backup dir", self.config.backup_dir)
        target = self.config.backup_path()
        try:
            shutil.copyfile(self.config.tasks_file, target)
        except OSError as exc:
            raise StorageError("create backup", str(target), exc) from exc
        try:
            self._cleanup_old_backups()
        except OSError:
            pass

    def list_backups(self) -> list[str]:
        """Timestamps of the existing backups, newest first."""
        stamps = [
            path.name[len(_BACKUP_PREFIX) : -len(_BACKUP_SUFFIX)]
            for path in self._backup_files()
        ]
        return sorted(stamps, reverse=True)

    def migrate_legacy_data(self) -> None:
        """Rewrite a task file of the old id/description/done form in the current form."""
        text = self.config.tasks_file.read_text(encoding="utf-8")
        try:
            entries = _legacy_entries(json.loads(text))
        except ValueError:
            return
        if entries is None:
            return
        tasks = []
        for task_id, description, done in entries:
            task = Task(task_id, description)
            if done:
                task.complete()
            tasks.append(task)
        self.save_tasks(tasks)