import json
from datetime import datetime

import pytest

from errors import StorageError
from models import Todo
from storage import Storage


def make_todo(tid, **kwargs):
    fields = dict(
        id=tid,
        task=f"task {tid}",
        limit=datetime(2025, 6, 1, 9, 0, 0),
        created_at=datetime(2025, 1, 1, 8, 30, 15, 123456),
        updated_at=datetime(2025, 1, 1, 8, 30, 15, 123456),
    )
    fields.update(kwargs)
    return Todo(**fields)


def test_missing_file_loads_empty(tmp_path):
    assert Storage(tmp_path / "nope.json").load() == []


def test_round_trip(storage):
    todos = [
        make_todo(1),
        make_todo(2, task="牛乳を買う", is_done=True),
        make_todo(3, is_deleted=True, deleted_at=datetime(2025, 2, 1, 10, 0, 0)),
    ]
    storage.save(todos)
    assert storage.load() == todos


def test_save_is_indented_with_stable_field_order(storage):
    storage.save([make_todo(1, task="日本語")])
    text = storage.path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n")
    assert "日本語" in text
    record = json.loads(text)[0]
    assert list(record) == [
        "id", "task", "done", "limit", "created_at",
        "updated_at", "deleted_at", "is_done", "is_deleted",
    ]
    assert record["deleted_at"] is None
    assert record["limit"] == "2025-06-01T09:00:00"


def test_save_creates_parent_directory(tmp_path):
    store = Storage(tmp_path / "nested" / "dir" / "todos.json")
    store.save([make_todo(1)])
    assert store.load() == [make_todo(1)]


def test_malformed_json_raises(storage):
    storage.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError) as info:
        storage.load()
    assert isinstance(info.value.__cause__, json.JSONDecodeError)


def test_non_list_document_raises(storage):
    storage.path.write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(StorageError):
        storage.load()


def test_record_without_task_raises(storage):
    storage.path.write_text('[{"id": 1}]', encoding="utf-8")
    with pytest.raises(StorageError):
        storage.load()


def test_null_document_loads_empty(storage):
    storage.path.write_text("null", encoding="utf-8")
    assert storage.load() == []


def test_loads_document_written_by_go_tool(storage):
    storage.path.write_text(json.dumps([{
        "id": 1,
        "task": "牛乳を買う",
        "done": True,
        "limit": "2025-01-01T12:00:00Z",
        "created_at": "2024-12-31T10:00:00.123456789+09:00",
        "updated_at": "2024-12-31T10:00:00.123456789+09:00",
        "deleted_at": "0001-01-01T00:00:00Z",
        "is_done": False,
        "is_deleted": False,
    }]), encoding="utf-8")
    [todo] = storage.load()
    assert todo.id == 1
    assert todo.is_done is True  # legacy "done" flag is honoured
    assert todo.deleted_at is None
    assert todo.limit.strftime("%Y/%m/%d %H:%M:%S") == "2025/01/01 12:00:00"
    assert todo.created_at.microsecond == 123456


def test_unreadable_path_raises(tmp_path):
    with pytest.raises(StorageError):
        Storage(tmp_path).load()


def test_unwritable_path_raises(tmp_path):
    with pytest.raises(StorageError) as info:
        Storage(tmp_path).save([make_todo(1)])
    assert "Could not save todos" in str(info.value)


def test_non_utf8_document_raises(storage):
    storage.path.write_bytes(b'[{"id": 1, "task": "\xff\xfe"}]')
    with pytest.raises(StorageError) as info:
        storage.load()
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_unencodable_save_keeps_previous_document(storage):
    storage.save([make_todo(1)])
    before = storage.path.read_bytes()
    with pytest.raises(StorageError):
        storage.save([make_todo(1), make_todo(2, task="bad\udcff")])
    assert storage.path.read_bytes() == before
    assert storage.load() == [make_todo(1)]


@pytest.mark.parametrize("stamp,micro", [
    ("2025-01-01T12:00:00.5+09:00", 500000),
    ("2025-01-01T12:00:00.12Z", 120000),
    ("2025-01-01T12:00:00.1234+09:00", 123400),
    ("2025-01-01T12:00:00.12345Z", 123450),
])
def test_loads_go_fractions_of_any_length(storage, stamp, micro):
    storage.path.write_text(json.dumps([{
        "id": 1, "task": "x", "limit": stamp, "created_at": stamp,
    }]), encoding="utf-8")
    [todo] = storage.load()
    assert todo.created_at.microsecond == micro
    assert todo.updated_at == todo.created_at
