"""An in-memory task list with id allocation, editing and sorting."""

from __future__ import annotations

from typing import Iterable

from starterkit.todo.task import Task
from starterkit.todo.todo_errors import TaskError, ValidationError


class TaskManager:
    """Holds tasks and hands out increasing ids."""

    def __init__(self) -> None:
        self.tasks: list[Task] = []
        self.next_id = 1

    def load_tasks(self, tasks: Iterable[Task]) -> None:
        """Replace the list and continue ids after the largest one."""
        self.tasks = list(tasks)
        self.next_id = max((task.id for task in self.tasks), default=0) + 1
        if self.next_id < 1:
            self.next_id = 1

    def add_task(self, description: str) -> Task:
        """Create and append a task; raises ValidationError for an empty description."""
        task = Task(self.next_id, description)
        task.validate()
        self.tasks.append(task)
        self.next_id += 1
        return task

    def get_task(self, task_id: int) -> Task:
        """The task with this id; raises TaskError if there is none."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskError("get", ValidationError("id", "task not found!"))

    def remove_task(self, task_id: int) -> None:
        """Remove the task with this id; raises TaskError if there is none."""
        for task in self.tasks:
            if task.id == task_id:
                self.tasks.remove(task)
                return
        raise TaskError("remove", ValidationError("id", "task not found"))

    def complete_task(self, task_id: int) -> None:
        """Mark the task with this id done."""
        self.get_task(task_id).complete()

    def edit_task(self, task_id: int, description: str) -> None:
        """Change a task's description, then validate it."""
        task = self.get_task(task_id)
        task.description = description
        task.validate()

    def stats(self) -> dict[str, int]:
        """Counts of total, completed, pending and overdue tasks."""
        result = {"total": len(self.tasks), "completed": 0, "pending": 0, "overdue": 0}
        for task in self.tasks:
            if task.completed:
                result["completed"] += 1
            else:
                result["pending"] += 1
                if task.is_overdue():
                    result["overdue"] += 1
        return result

    def sort_by_priority(self) -> None:
        """Most urgent first."""
        self.tasks.sort(key=lambda task: task.priority, reverse=True)

    def sort_by_created(self) -> None:
        """Oldest first."""
        self.tasks.sort(key=lambda task: task.created_at)

    def sort_by_due_date(self) -> None:
        """Earliest due first; tasks without a due date last."""
        self.tasks.sort(
            key=lambda task: (
                task.due_date is None,
                task.due_date.timestamp() if task.due_date is not None else 0.0,
            )
        )