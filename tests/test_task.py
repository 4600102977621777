from datetime import datetime, timedelta, timezone

import pytest

from starterkit.todo.task import Priority, Task, parse_priority
from starterkit.todo.todo_errors import ValidationError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("low", Priority.LOW),
        ("L", Priority.LOW),
        ("1", Priority.LOW),
        ("Medium", Priority.MEDIUM),
        ("m", Priority.MEDIUM),
        (" high ", Priority.HIGH),
        ("3", Priority.HIGH),
    ],
)
def test_parse_priority(text, expected):
    assert parse_priority(text) is expected


def test_parse_priority_rejects_unknown():
    with pytest.raises(ValidationError) as info:
        parse_priority("urgent")
    assert info.value.field == "priority"


def test_priority_names_and_colors():
    parsed = [parse_priority(name) for name in ("low", "medium", "high")]
    assert [str(p) for p in parsed] == ["Low", "Medium", "High"]
    assert [p.color() for p in parsed] == ["green", "yellow", "red"]
    assert parsed[2] > parsed[1] > parsed[0]


def test_new_task_defaults():
    task = Task(1, "write report")
    assert task.completed is False
    assert task.priority is Priority.MEDIUM
    assert task.tags == []
    assert task.completed_at is None
    assert task.created_at.tzinfo is not None


def test_complete_and_uncomplete():
    task = Task(1, "write report")
    task.complete()
    assert task.completed
    assert task.completed_at >= task.created_at
    task.uncomplete()
    assert not task.completed
    assert task.completed_at is None


def test_tags_are_normalized_and_unique():
    task = Task(1, "x")
    task.add_tag("  Work ")
    task.add_tag("work")
    task.add_tag("   ")
    task.add_tag("home")
    assert task.tags == ["work", "home"]
    assert task.has_tag("WORK")
    task.remove_tag(" Work")
    assert task.tags == ["home"]
    assert not task.has_tag("work")


def test_is_overdue():
    now = datetime.now(timezone.utc)
    task = Task(1, "x", due_date=now - timedelta(days=1))
    assert task.is_overdue()
    task.complete()
    assert not task.is_overdue()
    assert not Task(2, "y", due_date=now + timedelta(days=1)).is_overdue()
    assert not Task(3, "z").is_overdue()


def test_validate():
    with pytest.raises(ValidationError) as info:
        Task(1, "   ").validate()
    assert info.value.field == "description"
    with pytest.raises(ValidationError) as info:
        Task(0, "x").validate()
    assert info.value.field == "id"


def test_dict_round_trip():
    task = Task(7, "plan trip", priority=Priority.HIGH)
    task.add_tag("travel")
    task.due_date = datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    task.complete()
    assert Task.from_dict(task.to_dict()) == task


def test_to_dict_omits_empty_optional_fields():
    data = Task(1, "x").to_dict()
    assert set(data) == {"id", "description", "completed", "created_at", "priority"}
    assert data["priority"] == int(Priority.MEDIUM)


def test_from_dict_reads_nanosecond_utc_timestamps():
    task = Task.from_dict(
        {"id": 2, "description": "x", "created_at": "2024-05-06T07:08:09.123456789Z"}
    )
    assert task.created_at == datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
    assert task.priority is Priority.LOW


def test_from_dict_rejects_wrong_types():
    with pytest.raises(TypeError):
        Task.from_dict({"id": "one", "description": "x"})
    with pytest.raises(TypeError):
        Task.from_dict(["not", "a", "task"])