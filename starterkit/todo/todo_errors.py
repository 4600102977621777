"""Errors raised by the todo list."""

from __future__ import annotations


class ValidationError(Exception):
    """A field of a task holds a value it may not hold."""

    def __init__(self, field: str, message: str):
        super().__init__(field, message)
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return f"Validation error: {self.field} - {self.message}"


class TaskError(Exception):
    """An operation on the task list failed."""

    def __init__(self, op: str, cause: BaseException):
        super().__init__(op, cause)
        self.op = op
        self.cause = cause

    def __str__(self) -> str:
        return f"Task {self.op}: {self.cause}"


class StorageError(Exception):
    """Reading or writing the task file failed."""

    def __init__(self, op: str, path: str, cause: BaseException):
        super().__init__(op, path, cause)
        self.op = op
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return f"Storage {self.op} with path {self.path}: {self.cause}"