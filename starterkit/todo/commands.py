"""The todo list commands: each loads the list, acts, saves and reports."""

from __future__ import annotations

from typing import Sequence

from starterkit.todo.colors import blue, bold, cyan, green, red, yellow
from starterkit.todo.formatter import TaskFormatter
from starterkit.todo.manager import TaskManager
from starterkit.todo.storage import JSONStorage
from starterkit.todo.table import TableFormatter
from starterkit.todo.task import Priority, Task, parse_priority
from starterkit.todo.task_filter import TaskFilter
from starterkit.todo.todo_config import TodoConfig
from starterkit.todo.todo_errors import StorageError, TaskError, ValidationError

_HELP = """Todo CLI - A simple command-line todo list manager

USAGE:
    todo <command> [arguments]

COMMANDS:
    add, a <description>           Add a new task
    list, ls, l [options]          List tasks
    done, complete, d <id>         Mark task as completed
    remove, rm, r <id>             Remove a task
    edit, e <id> <description>     Edit a task
    search, s <term>               Search tasks
    stats                          Show statistics
    version, v                     Show version
    help, h                        Show this help

LIST OPTIONS:
    --all                          Show all tasks (default)
    --pending                      Show only pending tasks
    --completed                    Show only completed tasks
    --priority <level>             Filter by priority (low, medium, high)
    --sort <field>                 Sort by created (default), priority or due
    --table                        Display in table format

EXAMPLES:
    todo add "Buy groceries"
    todo list --pending
    todo list --table
    todo done 1
    todo remove 2
    todo edit 1 "Buy groceries and cook dinner"
    todo search "groceries"

VERSION:
    {version}"""


def _load(storage: JSONStorage) -> list[Task] | None:
    try:
        return storage.load_tasks()
    except StorageError as exc:
        print(f"Error loading tasks: {exc}")
        return None


def _save(storage: JSONStorage, tasks: list[Task]) -> bool:
    try:
        storage.save_tasks(tasks)
    except StorageError as exc:
        print(f"Error saving tasks: {exc}")
        return False
    return True


def _load_manager(storage: JSONStorage) -> TaskManager | None:
    tasks = _load(storage)
    if tasks is None:
        return None
    manager = TaskManager()
    manager.load_tasks(tasks)
    return manager


def add_task(config: TodoConfig, args: Sequence[str]) -> None:
    """Add a task whose description is the words of ``args``."""
    storage = JSONStorage(config)
    manager = _load_manager(storage)
    if manager is None:
        return
    try:
        task = manager.add_task(" ".join(args))
    except ValidationError as exc:
        print(f"Error adding task: {exc}")
        return
    if not _save(storage, manager.tasks):
        return
    print(f"Added: {green('✓')}")
    print(TaskFormatter().format_task(task))


def complete_task(config: TodoConfig, task_id: int) -> None:
    """Mark the task with ``task_id`` done."""
    storage = JSONStorage(config)
    manager = _load_manager(storage)
    if manager is None:
        return
    try:
        manager.complete_task(task_id)
    except TaskError as exc:
        print(f"Error completing task: {exc}")
        return
    if not _save(storage, manager.tasks):
        return
    print(f"Completed: {green('✓')}")
    print(TaskFormatter().format_task(manager.get_task(task_id)))


def edit_task(config: TodoConfig, task_id: int, args: Sequence[str]) -> None:
    """Replace the description of the task with ``task_id``."""
    storage = JSONStorage(config)
    manager = _load_manager(storage)
    if manager is None:
        return
    try:
        manager.edit_task(task_id, " ".join(args))
    except (TaskError, ValidationError) as exc:
        print(f"Error editing task: {exc}")
        return
    if not _save(storage, manager.tasks):
        return
    print(f"Edited: {blue('✎')}")
    print(TaskFormatter().format_task(manager.get_task(task_id)))


def remove_task(config: TodoConfig, task_id: int) -> None:
    """Delete the task with ``task_id``."""
    storage = JSONStorage(config)
    manager = _load_manager(storage)
    if manager is None:
        return
    try:
        task = manager.get_task(task_id)
    except TaskError as exc:
        print(f"Error finding task: {exc}")
        return
    try:
        manager.remove_task(task_id)
    except TaskError as exc:
        print(f"Error removing task: {exc}")
        return
    if not _save(storage, manager.tasks):
        return
    print(f"Removed: {red('✓')}")
    print(TaskFormatter().format_task(task))


def list_tasks(config: TodoConfig, args: Sequence[str]) -> None:
    """Print the tasks, filtered, sorted and laid out as ``args`` ask."""
    storage = JSONStorage(config)
    tasks = _load(storage)
    if tasks is None:
        return

    task_filter = TaskFilter()
    table = False
    sort_by = "created"
    following = list(args[1:]) + [None]
    for arg, value in zip(args, following):
        if arg == "--pending":
            task_filter.set_pending_only()
        elif arg == "--completed":
            task_filter.set_completed_only()
        elif arg == "--priority" and value is not None:
            try:
                task_filter.priority = parse_priority(value)
            except ValidationError:
                pass
        elif arg == "--table":
            table = True
        elif arg == "--sort" and value is not None:
            sort_by = value

    selected = task_filter.apply(tasks)
    manager = TaskManager()
    manager.load_tasks(selected)
    if sort_by == "priority":
        manager.sort_by_priority()
    elif sort_by == "due":
        manager.sort_by_due_date()
    else:
        manager.sort_by_created()

    if table:
        print(TableFormatter().format_table(manager.tasks))
    else:
        print(TaskFormatter().format_task_list(manager.tasks))

    if len(selected) != len(tasks):
        print(f"\nShowing {len(selected)} of {len(tasks)} tasks")


def search_tasks(config: TodoConfig, term: str) -> None:
    """Print the tasks whose description contains ``term``, ignoring case."""
    storage = JSONStorage(config)
    tasks = _load(storage)
    if tasks is None:
        return

    results = TaskFilter(search_term=term).apply(tasks)
    print(f"Search results for {yellow(chr(34) + term + chr(34))}:\n")
    if not results:
        print("No tasks found matching the search term")
        return
    print(TaskFormatter().format_task_list(results))
    print(f"\nFound {len(results)} task(s)")


def show_stats(config: TodoConfig) -> None:
    """Print counts of tasks by status and of pending tasks by priority."""
    storage = JSONStorage(config)
    manager = _load_manager(storage)
    if manager is None:
        return
    stats = manager.stats()
    completion_rate = float(stats["completed"]) if stats["total"] > 0 else 0.0

    print(bold("Task Statistics"))
    print("=" * 20)
    print(f"Total tasks:\t\t{blue(str(stats['total']))}")
    print(f"Completed:\t\t\t{green(str(stats['completed']))}")
    print(f"Pending:\t\t\t{yellow(str(stats['pending']))}")
    print(f"Overdue:\t\t\t{red(str(stats['overdue']))}")
    print(f"Completion rate:\t{cyan(f'{completion_rate:.1f}%')}")

    print(f"\n{bold('Priority Breakdown')}")
    print("-" * 20)
    pending = {priority: 0 for priority in Priority}
    for task in manager.tasks:
        if not task.completed:
            pending[task.priority] = pending.get(task.priority, 0) + 1

    print(f"High priority:\t\t{red(str(pending[Priority.HIGH]))}")
    print(f"Medium priority:\t{yellow(str(pending[Priority.MEDIUM]))}")
    print(f"Low priority:\t\t{green(str(pending[Priority.LOW]))}")


def show_help() -> None:
    """Print the usage text."""
    from starterkit.todo.todo_cli import version_info

    print(_HELP.format(version=version_info()))