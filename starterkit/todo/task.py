"""Tasks, their priorities, and their JSON form."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any

from starterkit.todo.todo_errors import ValidationError

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_FRACTION = re.compile(r"\.(\d+)")


class Priority(IntEnum):
    """How urgent a task is; higher values are more urgent."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2

    def __str__(self) -> str:
        return self.name.capitalize()

    def color(self) -> str:
        """Name of the colour the priority is shown in."""
        return _PRIORITY_COLORS.get(self, "white")


_PRIORITY_COLORS = {
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "red",
}

_PRIORITY_ALIASES = {
    "low": Priority.LOW,
    "l": Priority.LOW,
    "1": Priority.LOW,
    "medium": Priority.MEDIUM,
    "m": Priority.MEDIUM,
    "2": Priority.MEDIUM,
    "high": Priority.HIGH,
    "h": Priority.HIGH,
    "3": Priority.HIGH,
}


def parse_priority(text: str) -> Priority:
    """Parse a priority name, letter or number, raising ValidationError otherwise."""
    try:
        return _PRIORITY_ALIASES[text.lower().strip()]
    except KeyError:
        raise ValidationError("priority", "must be low, medium, or high") from None


def _now() -> datetime:
    return datetime.now().astimezone()


def _normalize_tag(tag: str) -> str:
    return tag.lower().strip()


def _parse_time(text: Any) -> datetime:
    if not isinstance(text, str):
        raise TypeError("timestamp must be a string")
    text = text.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.astimezone()
    return value


def _typed(data: dict, key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise TypeError(f"field {key!r} has the wrong type")
    return value


def _optional_time(data: dict, key: str) -> datetime | None:
    value = data.get(key)
    return None if value is None else _parse_time(value)


@dataclass
class Task:
    """A single entry of the todo list."""

    id: int
    description: str
    completed: bool = False
    created_at: datetime = field(default_factory=_now)
    completed_at: datetime | None = None
    due_date: datetime | None = None
    priority: Priority = Priority.MEDIUM
    tags: list[str] = field(default_factory=list)

    def complete(self) -> None:
        """Mark the task done now."""
        self.completed = True
        self.completed_at = _now()

    def uncomplete(self) -> None:
        """Mark the task pending again."""
        self.completed = False
        self.completed_at = None

    def add_tag(self, tag: str) -> None:
        """Add a tag, lower-cased and trimmed; empty and duplicate tags are ignored."""
        tag = _normalize_tag(tag)
        if tag and tag not in self.tags:
            self.tags.append(tag)

    def remove_tag(self, tag: str) -> None:
        """Remove a tag if present."""
        tag = _normalize_tag(tag)
        if tag in self.tags:
            self.tags.remove(tag)

    def has_tag(self, tag: str) -> bool:
        """Whether the task carries the tag."""
        return _normalize_tag(tag) in self.tags

    def is_overdue(self) -> bool:
        """Whether the task is pending and its due date has passed."""
        if self.due_date is None or self.completed:
            return False
        return self.due_date < _now()

    def validate(self) -> None:
        """Raise ValidationError when the task is not valid."""
        if not self.description.strip():
            raise ValidationError("description", "cannot be empty")
        if self.id <= 0:
            raise ValidationError("id", "must be positive")

    def to_dict(self) -> dict[str, Any]:
        """The task as a JSON-ready mapping."""
        data: dict[str, Any] = {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
        }
        if self.completed_at is not None:
            data["completed_at"] = self.completed_at.isoformat()
        if self.due_date is not None:
            data["due_date"] = self.due_date.isoformat()
        data["priority"] = int(self.priority)
        if self.tags:
            data["tags"] = list(self.tags)
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """Build a task from its JSON mapping; raises TypeError or ValueError on bad data."""
        if not isinstance(data, dict):
            raise TypeError("task entry must be an object")
        created = data.get("created_at")
        tags = _typed(data, "tags", list, [])
        if not all(isinstance(tag, str) for tag in tags):
            raise TypeError("field 'tags' must hold strings")
        return cls(
            id=_typed(data, "id", int, 0),
            description=_typed(data, "description", str, ""),
            completed=_typed(data, "completed", bool, False),
            created_at=_ZERO_TIME if created is None else _parse_time(created),
            completed_at=_optional_time(data, "completed_at"),
            due_date=_optional_time(data, "due_date"),
            priority=Priority(_typed(data, "priority", int, 0)),
            tags=list(tags),
        )