"""
Test suite for storage backends and the service layer

Tests:
- MemoryStorage / FileStorage put/get
- Saving and loading a BoardStore through storage
- open_store / commit / export / import helpers
"""

import json

import pytest

from kanban.core import service, storage
from kanban.core.exceptions import ParseError, StorageError, InvalidInputError
from kanban.core.storage import FileStorage, MemoryStorage
from kanban.core.store import BoardStore


# Every test gets its own storage directory
pytestmark = pytest.mark.usefixtures("temp_storage_dir")


# --- Backends ---

def test_memory_storage_get_missing():
    assert MemoryStorage().get("kanban", "state") is None


def test_memory_storage_namespaces_are_separate():
    memory = MemoryStorage()
    memory.put("a", "state", "1")
    memory.put("b", "state", "2")

    assert memory.get("a", "state") == "1"
    assert memory.get("b", "state") == "2"


def test_file_storage_creates_directory_and_file(tmp_path):
    files = FileStorage(tmp_path / "nested" / "dir")
    files.put("kanban", "state", "[]")

    path = tmp_path / "nested" / "dir" / "kanban.json"
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == {"state": "[]"}


def test_file_storage_overwrites_and_keeps_other_keys(tmp_path):
    files = FileStorage(tmp_path)
    files.put("kanban", "state", "old")
    files.put("kanban", "other", "x")
    files.put("kanban", "state", "new")

    assert files.get("kanban", "state") == "new"
    assert files.get("kanban", "other") == "x"
    assert files.get("kanban", "missing") is None
    assert files.get("elsewhere", "state") is None
    # No temp files left behind
    assert sorted(p.name for p in tmp_path.iterdir()) == ["kanban.json"]


def test_file_storage_unreadable_file(tmp_path):
    (tmp_path / "kanban.json").write_text("{broken", encoding="utf-8")

    with pytest.raises(StorageError):
        FileStorage(tmp_path).get("kanban", "state")


def test_default_storage_uses_storage_dir(temp_storage_dir):
    assert storage.default_storage().directory == temp_storage_dir


# --- Store persistence ---

def test_save_then_load_restores_board():
    memory = MemoryStorage()
    store = BoardStore()
    store.add_task(1, "persisted")
    store.save(memory)

    fresh = BoardStore()
    assert fresh.load(memory) is True
    assert fresh.snapshot() == store.snapshot()


def test_save_overwrites_previous_state():
    memory = MemoryStorage()
    store = BoardStore()
    store.save(memory)
    store.add_column()
    store.save(memory)

    assert len(json.loads(memory.get("kanban", "state"))) == 4


def test_load_without_save_keeps_board():
    store = BoardStore()
    store.add_task(0, "unsaved")
    before = store.snapshot()

    assert store.load(MemoryStorage()) is False
    assert store.snapshot() == before


def test_load_malformed_save_raises_and_keeps_board():
    memory = MemoryStorage()
    memory.put("kanban", "state", "not json")
    store = BoardStore()
    before = store.snapshot()

    with pytest.raises(ParseError):
        store.load(memory)
    assert store.snapshot() == before


# --- Service helpers ---

def test_open_store_defaults_when_nothing_saved():
    store = service.open_store()

    assert store.column_count == 3


def test_commit_then_open_store_round_trip(temp_storage_dir):
    store = service.open_store()
    store.add_task(0, "on disk")
    service.commit(store)

    assert (temp_storage_dir / "kanban.json").exists()
    reopened = service.open_store()
    assert reopened.snapshot().columns[0].tasks[0].title == "on disk"


def test_export_and_import(tmp_path):
    store = BoardStore()
    store.rename_column(0, "Exported")
    path = tmp_path / "board.json"
    service.export_board(store, path)

    other = BoardStore()
    service.import_board(other, path)

    assert other.snapshot() == store.snapshot()


def test_import_missing_file(tmp_path):
    with pytest.raises(InvalidInputError):
        service.import_board(BoardStore(), tmp_path / "nope.json")


def test_color_or_random():
    assert service.color_or_random("cyan").to_hex() == "#00FFFF"
    assert service.color_or_random(None).to_hex().startswith("#")
    assert service.color_or_random("  ").to_hex().startswith("#")
