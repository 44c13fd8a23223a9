"""Tests for the JSON store."""

import json
import tempfile
from pathlib import Path

import pytest

from todostore.store import JsonTaskStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store(temp_dir: Path) -> JsonTaskStore:
    """Create an initialized store for testing."""
    store = JsonTaskStore(temp_dir)
    store.initialize()
    return store


class TestJsonTaskStore:
    """Tests for JsonTaskStore."""

    def test_initialize(self, temp_dir: Path):
        """Test store initialization."""
        store = JsonTaskStore(temp_dir)
        store.initialize()

        assert (temp_dir / ".todostore").exists()
        assert (temp_dir / ".todostore" / "config.json").exists()

        data = json.loads((temp_dir / ".todostore" / "tasks.json").read_text())
        assert data == {"next_id": 0, "tasks": [], "version": "0.1"}

    def test_initialize_keeps_existing(self, store: JsonTaskStore):
        """Re-initializing does not wipe tasks."""
        store.add_task("Keep me")
        store.initialize()

        assert len(store.list_tasks()) == 1

    def test_add_task(self, store: JsonTaskStore):
        """Test task creation is persisted."""
        task_id = store.add_task("Buy milk")

        assert task_id == 0
        reloaded = JsonTaskStore(store.root).get_task(task_id)
        assert reloaded is not None
        assert reloaded.description == "Buy milk"
        assert reloaded.completed is False

    def test_ids_survive_reload(self, store: JsonTaskStore):
        """The counter is persisted, so removed ids stay retired."""
        first = store.add_task("First")
        store.remove_task(first)

        assert JsonTaskStore(store.root).add_task("Second") == 1

    def test_complete_task(self, store: JsonTaskStore):
        """Test completing a task."""
        task_id = store.add_task("Buy milk")

        assert store.complete_task(task_id) is True
        assert store.get_task(task_id).completed is True
        assert store.complete_task(99) is False

    def test_remove_task(self, store: JsonTaskStore):
        """Test deleting a task."""
        task_id = store.add_task("To delete")

        assert store.remove_task(task_id) is True
        assert store.get_task(task_id) is None
        assert store.remove_task(task_id) is False  # Already deleted

    def test_list_tasks_order(self, store: JsonTaskStore):
        """Listing keeps insertion order."""
        for description in ("a", "b", "c"):
            store.add_task(description)
        store.remove_task(1)

        assert [t.description for t in store.list_tasks()] == ["a", "c"]

    def test_missing_id_does_not_write(self, store: JsonTaskStore):
        """Operations on unknown ids leave the file alone."""
        store.add_task("a")
        before = store.tasks_file.stat().st_mtime_ns

        store.complete_task(5)
        store.remove_task(5)

        assert store.tasks_file.stat().st_mtime_ns == before

    def test_no_temp_files_left(self, store: JsonTaskStore):
        """Atomic writes clean up after themselves."""
        store.add_task("a")
        store.complete_task(0)

        leftovers = list(store.store_dir.glob(".tmp_*"))
        assert leftovers == []

    def test_config(self, store: JsonTaskStore):
        """Test config read/write."""
        config = store.get_config()
        assert config.version == "0.1"

        config.log_level = "DEBUG"
        store.save_config(config)

        reloaded = store.get_config()
        assert reloaded.log_level == "DEBUG"

    def test_not_initialized_error(self, temp_dir: Path):
        """Test error when store is not initialized."""
        store = JsonTaskStore(temp_dir)

        with pytest.raises(FileNotFoundError):
            store.list_tasks()

        with pytest.raises(FileNotFoundError):
            store.add_task("nowhere")
