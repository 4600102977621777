"""Tabular rendering of task lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from starterkit.todo.colors import bold, dim, red
from starterkit.todo.task import Task

_ID_WIDTH = 3
_STATUS_WIDTH = 6
_PRIORITY_WIDTH = 8
_MIN_DESC_WIDTH = 30
_MAX_DESC_WIDTH = 60
_DUE_WIDTH = 12
_TAGS_WIDTH = 15
_SEPARATOR_EXTRA = 15


def _truncate(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 3] + "..."
    return text


def _row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return " ".join(cell.ljust(width) for cell, width in zip(cells, widths))


@dataclass
class TableFormatter:
    """Renders tasks as an aligned table with a header."""

    color_output: bool = True

    def format_table(self, tasks: Sequence[Task]) -> str:
        """The tasks as table text, or a notice when there are none."""
        if not tasks:
            return "No tasks found!"

        longest = max(len(task.description) for task in tasks)
        desc_width = max(_MIN_DESC_WIDTH, min(longest, _MAX_DESC_WIDTH))
        widths = (_ID_WIDTH, _STATUS_WIDTH, _PRIORITY_WIDTH, desc_width, _DUE_WIDTH, _TAGS_WIDTH)

        header = _row(("ID", "Status", "Priority", "Description", "Due Date", "Tags"), widths)
        lines = [bold(header) if self.color_output else header]
        lines.append("-" * (sum(widths) + _SEPARATOR_EXTRA))

        for task in tasks:
            due = task.due_date.strftime("%Y-%m-%d") if task.due_date is not None else ""
            tags = _truncate("#" + " #".join(task.tags), _TAGS_WIDTH) if task.tags else ""
            row = _row(
                (
                    str(task.id),
                    "Done" if task.completed else "Pending",
                    str(task.priority),
                    _truncate(task.description, desc_width),
                    due,
                    tags,
                ),
                widths,
            )
            if self.color_output:
                if task.completed:
                    row = dim(row)
                if task.is_overdue():
                    row = red(row)
            lines.append(row)

        return "\n".join(lines)