import pytest

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
from starterkit.todo.storage import JSONStorage
from starterkit.todo.task import Priority, Task
from starterkit.todo.todo_cli import version_info
from starterkit.todo.todo_config import TodoConfig


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture
def config(tmp_path):
    return TodoConfig.for_home(tmp_path)


def _stored(config):
    return JSONStorage(config).load_tasks()


def _seed(config, tasks):
    JSONStorage(config).save_tasks(tasks)


def test_add_stores_task(config, capsys):
    add_task(config, ["Buy", "milk"])
    out = capsys.readouterr().out
    assert "Added: ✓" in out
    assert "[1]" in out
    assert [task.description for task in _stored(config)] == ["Buy milk"]


def test_add_empty_description_reports_error(config, capsys):
    add_task(config, ["  "])
    out = capsys.readouterr().out
    assert "Error adding task: Validation error: description - cannot be empty" in out
    assert _stored(config) == []


def test_complete_marks_task(config, capsys):
    add_task(config, ["write"])
    complete_task(config, 1)
    assert "Completed: ✓" in capsys.readouterr().out
    assert _stored(config)[0].completed is True


def test_complete_missing_task(config, capsys):
    complete_task(config, 9)
    assert "Error completing task" in capsys.readouterr().out


def test_remove_task(config, capsys):
    add_task(config, ["a"])
    add_task(config, ["b"])
    remove_task(config, 1)
    assert "Removed: ✓" in capsys.readouterr().out
    assert [task.id for task in _stored(config)] == [2]


def test_remove_missing_task(config, capsys):
    remove_task(config, 3)
    assert "Error finding task" in capsys.readouterr().out


def test_edit_task(config, capsys):
    add_task(config, ["old"])
    edit_task(config, 1, ["new", "text"])
    assert "Edited: ✎" in capsys.readouterr().out
    assert _stored(config)[0].description == "new text"


def test_edit_to_empty_is_rejected(config, capsys):
    add_task(config, ["keep"])
    edit_task(config, 1, [""])
    assert "Error editing task" in capsys.readouterr().out
    assert _stored(config)[0].description == "keep"


def test_list_pending_only(config, capsys):
    done = Task(1, "finished")
    done.complete()
    _seed(config, [done, Task(2, "open")])
    list_tasks(config, ["--pending"])
    out = capsys.readouterr().out
    assert "open" in out
    assert "finished" not in out
    assert "Showing 1 of 2 tasks" in out


def test_list_priority_filter_and_sort(config, capsys):
    _seed(
        config,
        [
            Task(1, "low one", priority=Priority.LOW),
            Task(2, "high one", priority=Priority.HIGH),
            Task(3, "high two", priority=Priority.HIGH),
        ],
    )
    list_tasks(config, ["--priority", "high"])
    out = capsys.readouterr().out
    assert "low one" not in out
    assert "Showing 2 of 3 tasks" in out

    list_tasks(config, ["--sort", "priority"])
    lines = capsys.readouterr().out.strip().split("\n")
    assert "(High)" in lines[0]
    assert "(Low)" in lines[-1]


def test_list_table(config, capsys):
    _seed(config, [Task(1, "tabled")])
    list_tasks(config, ["--table"])
    out = capsys.readouterr().out
    assert out.split("\n")[0].startswith("ID")
    assert "tabled" in out


def test_list_empty(config, capsys):
    list_tasks(config, [])
    assert capsys.readouterr().out == "No tasks found\n"


def test_search(config, capsys):
    _seed(config, [Task(1, "Buy Groceries"), Task(2, "Call mom")])
    search_tasks(config, "groceries")
    out = capsys.readouterr().out
    assert 'Search results for "groceries":' in out
    assert "Buy Groceries" in out
    assert "Call mom" not in out
    assert "Found 1 task(s)" in out


def test_search_without_results(config, capsys):
    search_tasks(config, "nothing")
    assert "No tasks found matching the search term" in capsys.readouterr().out


def test_stats(config, capsys):
    done = Task(1, "done", priority=Priority.HIGH)
    done.complete()
    _seed(config, [done, Task(2, "open", priority=Priority.HIGH)])
    show_stats(config)
    out = capsys.readouterr().out
    assert "Total tasks:\t\t2" in out
    assert "Completed:\t\t\t1" in out
    assert "Pending:\t\t\t1" in out
    assert "High priority:\t\t1" in out
    assert "Low priority:\t\t0" in out


def test_load_error_is_reported(config, capsys):
    config.tasks_file.write_text("not json", encoding="utf-8")
    list_tasks(config, [])
    assert "Error loading tasks" in capsys.readouterr().out


def test_help_includes_version(capsys):
    show_help()
    out = capsys.readouterr().out
    assert "USAGE:" in out
    assert version_info().strip() in out