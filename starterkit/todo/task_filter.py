"""Selection of tasks by status, priority, tag, due date and text."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from starterkit.todo.task import Priority, Task


@dataclass
class TaskFilter:
    """Criteria a task must meet; unset criteria match everything."""

    show_completed: bool = True
    show_pending: bool = True
    priority: Priority | None = None
    tag: str = ""
    due_before: datetime | None = None
    due_after: datetime | None = None
    search_term: str = ""

    def apply(self, tasks: Iterable[Task]) -> list[Task]:
        """The tasks that match, in their original order."""
        return [task for task in tasks if self.matches(task)]

    def matches(self, task: Task) -> bool:
        """Whether a single task meets every criterion."""
        if task.completed and not self.show_completed:
            return False
        if not task.completed and not self.show_pending:
            return False
        if self.priority is not None and task.priority != self.priority:
            return False
        if self.tag and not task.has_tag(self.tag):
            return False
        if self.due_before is not None and task.due_date is not None:
            if not task.due_date < self.due_before:
                return False
        if self.due_after is not None and task.due_date is not None:
            if not task.due_date > self.due_after:
                return False
        if self.search_term and self.search_term.lower() not in task.description.lower():
            return False
        return True

    def set_pending_only(self) -> None:
        """Match only tasks that are not done."""
        self.show_completed = False
        self.show_pending = True

    def set_completed_only(self) -> None:
        """Match only tasks that are done."""
        self.show_completed = True
        self.show_pending = False