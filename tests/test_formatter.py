from datetime import datetime, timezone

import pytest

from starterkit.todo.formatter import TaskFormatter
from starterkit.todo.task import Priority, Task


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def test_pending_task_line():
    assert TaskFormatter().format_task(Task(1, "Buy milk")) == "[1] ○ (Medium) Buy milk"


def test_completed_task_uses_filled_mark():
    task = Task(2, "Done thing", priority=Priority.HIGH)
    task.complete()
    line = TaskFormatter().format_task(task)
    assert line.startswith("[2] ● (High) ")
    assert line.endswith("Done thing")


def test_due_date_and_tags_are_appended():
    task = Task(3, "Trip", due_date=datetime(2030, 1, 2, tzinfo=timezone.utc))
    task.add_tag("home")
    task.add_tag("urgent")
    line = TaskFormatter().format_task(task)
    assert "(due: 2030-01-02)" in line
    assert line.endswith("#home #urgent")


def test_options_hide_parts():
    formatter = TaskFormatter()
    formatter.set_options(show_id=False, show_status=False, show_priority=False)
    task = Task(4, "Only text", due_date=datetime(2030, 1, 2, tzinfo=timezone.utc))
    formatter.set_options(show_due_date=False)
    assert formatter.format_task(task) == "Only text"


def test_unknown_option_rejected():
    with pytest.raises(TypeError):
        TaskFormatter().set_options(colour=True)


def test_empty_list_message():
    assert TaskFormatter().format_task_list([]) == "No tasks found"


def test_list_is_one_line_per_task():
    formatter = TaskFormatter()
    tasks = [Task(1, "a"), Task(2, "b")]
    lines = formatter.format_task_list(tasks).split("\n")
    assert lines == [formatter.format_task(task) for task in tasks]


def test_color_output_flag_controls_escapes(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    task = Task(5, "Paint")
    assert "\x1b[" in TaskFormatter().format_task(task)
    assert "\x1b[" not in TaskFormatter(color_output=False).format_task(task)