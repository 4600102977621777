from datetime import datetime, timedelta, timezone

import pytest

from starterkit.todo.task import Priority, Task
from starterkit.todo.task_filter import TaskFilter

NOW = datetime(2030, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def tasks():
    buy = Task(1, "Buy groceries", priority=Priority.LOW, due_date=NOW - timedelta(days=2))
    buy.add_tag("home")
    fix = Task(2, "Fix bug", priority=Priority.HIGH, due_date=NOW + timedelta(days=2))
    fix.add_tag("work")
    fix.complete()
    read = Task(3, "Read a book")
    return [buy, fix, read]


def ids(result):
    return [task.id for task in result]


def test_default_filter_keeps_everything(tasks):
    assert ids(TaskFilter().apply(tasks)) == [1, 2, 3]


def test_pending_and_completed_only(tasks):
    pending = TaskFilter()
    pending.set_pending_only()
    assert ids(pending.apply(tasks)) == [1, 3]
    done = TaskFilter()
    done.set_completed_only()
    assert ids(done.apply(tasks)) == [2]


def test_priority_and_tag(tasks):
    assert ids(TaskFilter(priority=Priority.HIGH).apply(tasks)) == [2]
    assert ids(TaskFilter(tag=" HOME ").apply(tasks)) == [1]


def test_search_is_case_insensitive(tasks):
    assert ids(TaskFilter(search_term="BUY").apply(tasks)) == [1]
    assert TaskFilter(search_term="nothing").apply(tasks) == []


def test_due_dates_ignore_tasks_without_due_date(tasks):
    assert ids(TaskFilter(due_before=NOW).apply(tasks)) == [1, 3]
    assert ids(TaskFilter(due_after=NOW).apply(tasks)) == [2, 3]


def test_matches_single_task(tasks):
    flt = TaskFilter(priority=Priority.LOW)
    assert flt.matches(tasks[0])
    assert not flt.matches(tasks[1])