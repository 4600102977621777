"""One-line text rendering of tasks."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable

from starterkit.todo.colors import cyan, dim, magenta, priority_color, red, status_color
from starterkit.todo.task import Task

_PENDING_MARK = "○"
_DONE_MARK = "●"


@dataclass
class TaskFormatter:
    """Renders tasks as single lines; each part can be switched off."""

    show_id: bool = True
    show_status: bool = True
    show_priority: bool = True
    show_due_date: bool = True
    show_tags: bool = True
    color_output: bool = True

    def format_task(self, task: Task) -> str:
        """The task as one line of text."""
        parts: list[str] = []

        if self.show_id:
            label = f"[{task.id}]"
            parts.append(dim(label) if self.color_output else label)

        if self.show_status:
            mark = _DONE_MARK if task.completed else _PENDING_MARK
            parts.append(status_color(task.completed)(mark) if self.color_output else mark)

        if self.show_priority:
            name = str(task.priority)
            label = f"({name})"
            parts.append(priority_color(name)(label) if self.color_output else label)

        description = task.description
        if self.color_output and task.completed:
            description = dim(description)
        parts.append(description)

        if self.show_due_date and task.due_date is not None:
            due = f"(due: {task.due_date.strftime('%Y-%m-%d')})"
            if self.color_output:
                due = red(due) if task.is_overdue() else cyan(due)
            parts.append(due)

        if self.show_tags and task.tags:
            tags = "#" + " #".join(task.tags)
            parts.append(magenta(tags) if self.color_output else tags)

        return " ".join(parts)

    def format_task_list(self, tasks: Iterable[Task]) -> str:
        """One line per task, or a notice when there are none."""
        lines = [self.format_task(task) for task in tasks]
        if not lines:
            return "No tasks found"
        return "\n".join(lines)

    def set_options(self, **kwargs: Any) -> None:
        """Switch display parts on or off by name, e.g. ``show_id=False``."""
        known = {item.name for item in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"unknown formatter option(s): {', '.join(unknown)}")
        for name, value in kwargs.items():
            setattr(self, name, bool(value))