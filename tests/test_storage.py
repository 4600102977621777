import json

import pytest

from starterkit.todo.storage import JSONStorage
from starterkit.todo.task import Priority, Task
from starterkit.todo.todo_config import TodoConfig
from starterkit.todo.todo_errors import StorageError


@pytest.fixture
def config(tmp_path):
    return TodoConfig.for_home(tmp_path)


@pytest.fixture
def storage(config):
    return JSONStorage(config)


def test_load_without_file_is_empty(storage, config):
    assert storage.load_tasks() == []
    assert config.data_dir.is_dir()


def test_save_and_load_round_trip(storage, config):
    task = Task(1, "Buy groceries", priority=Priority.HIGH)
    task.add_tag("home")
    other = Task(2, "Read")
    other.complete()
    storage.save_tasks([task, other])
    assert storage.load_tasks() == [task, other]
    assert not config.temp_path().exists()


def test_saved_file_is_indented_json(storage, config):
    storage.save_tasks([Task(1, "x")])
    text = config.tasks_file.read_text(encoding="utf-8")
    assert text.startswith("[\n {")
    assert json.loads(text)[0]["description"] == "x"


def test_load_null_file_is_empty(storage, config):
    config.tasks_file.write_text("null", encoding="utf-8")
    assert storage.load_tasks() == []


def test_load_malformed_file_raises(storage, config):
    config.tasks_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError) as info:
        storage.load_tasks()
    assert info.value.op == "unmarshal"
    assert info.value.path == str(config.tasks_file)


def test_backup_without_tasks_file_does_nothing(storage):
    storage.create_backup()
    assert storage.list_backups() == []


def test_backup_copies_tasks_file(storage, config):
    storage.save_tasks([Task(1, "x")])
    storage.create_backup()
    stamps = storage.list_backups()
    assert len(stamps) == 1
    copy = config.backup_dir / f"tasks_{stamps[0]}.json"
    assert copy.read_text(encoding="utf-8") == config.tasks_file.read_text(encoding="utf-8")


def test_backup_prunes_oldest(storage, config):
    config.max_backups = 2
    config.ensure_directories()
    for stamp in ("20000101_000000", "20000102_000000", "20000103_000000"):
        (config.backup_dir / f"tasks_{stamp}.json").write_text("[]", encoding="utf-8")
    storage.save_tasks([Task(1, "x")])
    storage.create_backup()
    stamps = storage.list_backups()
    assert len(stamps) == 2
    assert stamps == sorted(stamps, reverse=True)
    assert "20000101_000000" not in stamps
    assert "20000102_000000" not in stamps


def test_migrate_legacy_data(storage, config):
    legacy = [
        {"id": 1, "description": "old task", "done": True},
        {"id": 2, "description": "pending", "done": False},
    ]
    config.tasks_file.write_text(json.dumps(legacy), encoding="utf-8")
    storage.migrate_legacy_data()
    tasks = storage.load_tasks()
    assert [(t.id, t.description, t.completed) for t in tasks] == [
        (1, "old task", True),
        (2, "pending", False),
    ]
    assert tasks[0].completed_at is not None
    assert tasks[1].priority is Priority.MEDIUM


def test_migrate_leaves_non_legacy_file_alone(storage, config):
    config.tasks_file.write_text('{"tasks": []}', encoding="utf-8")
    storage.migrate_legacy_data()
    assert config.tasks_file.read_text(encoding="utf-8") == '{"tasks": []}'


def test_migrate_without_file_raises(storage):
    with pytest.raises(FileNotFoundError):
        storage.migrate_legacy_data()