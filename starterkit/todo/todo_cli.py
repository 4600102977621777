"""Command line entry point for the todo list."""

from __future__ import annotations

import platform
import re
import sys

from starterkit.todo.commands import (
    add_task,
    complete_task,
    edit_task,
    list_tasks,
    remove_task,
    search_tasks,
    show_help,
    show_stats,
)
from starterkit.todo.todo_config import TodoConfig

VERSION = "dev"
BUILD_DATE = "unknown"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def version_info() -> str:
    """Describe the build and the running platform."""
    return (
        f"Version: {VERSION} ({sys.platform}/{platform.machine()})\n"
        f"Build Date: {BUILD_DATE}\n"
    )


def _fail(message: str) -> int:
    print(f"Error: {message}")
    return 1


def _task_id(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def main(argv: list[str] | None = None) -> int:
    """Dispatch a todo command and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    config = TodoConfig.for_home()

    if not args:
        show_help()
        return 1

    command, rest = args[0], args[1:]

    if command in ("add", "a"):
        if not rest:
            return _fail("Please provide a task description")
        add_task(config, rest)
    elif command in ("list", "ls", "l"):
        list_tasks(config, rest)
    elif command in ("done", "complete", "d", "remove", "rm", "r"):
        if not rest:
            return _fail("Please provide a task ID")
        task_id = _task_id(rest[0])
        if task_id is None:
            return _fail("Invalid task ID")
        if command in ("done", "complete", "d"):
            complete_task(config, task_id)
        else:
            remove_task(config, task_id)
    elif command in ("edit", "e"):
        if len(rest) < 2:
            return _fail("Please provide task ID and new description")
        task_id = _task_id(rest[0])
        if task_id is None:
            return _fail("Invalid task ID")
        edit_task(config, task_id, rest[1:])
    elif command in ("search", "s"):
        if not rest:
            return _fail("Please provide a search term")
        search_tasks(config, rest[0])
    elif command == "stats":
        show_stats(config)
    elif command in ("version", "v"):
        print(f"todo-cli version {VERSION}")
    elif command in ("help", "h"):
        show_help()
    else:
        print(f"Unknown command: {command}")
        show_help()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())