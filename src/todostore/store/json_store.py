"""JSON-file host for the task store."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ..models import Task, TodoConfig
from .task_store import TaskStore

logger = logging.getLogger(__name__)

STATE_VERSION = "0.1"


class JsonTaskStore:
    """Persists a single TaskStore in .todostore/tasks.json.

    Each call loads the snapshot, runs one store operation and, when the
    operation changed something, writes the snapshot back atomically.
    """

    def __init__(self, root_path: str | Path | None = None):
        """Initialize the host.

        Args:
            root_path: Root directory containing .todostore/. Defaults to current directory.
        """
        self.root = Path(root_path) if root_path else Path.cwd()
        self.store_dir = self.root / ".todostore"
        self.tasks_file = self.store_dir / "tasks.json"
        self.config_file = self.store_dir / "config.json"

    def ensure_initialized(self) -> None:
        """Ensure the .todostore directory exists."""
        if not self.store_dir.exists():
            raise FileNotFoundError(
                f"todostore not initialized. Run 'todostore init' in {self.root}"
            )

    def initialize(self) -> None:
        """Create the .todostore directory with an empty store."""
        self.store_dir.mkdir(parents=True, exist_ok=True)

        if not self.config_file.exists():
            self._write_json(self.config_file, TodoConfig().to_dict())

        if not self.tasks_file.exists():
            self._save_store(TaskStore())
            logger.info("Initialized empty task store in %s", self.store_dir)

    def _read_json(self, path: Path) -> dict[str, Any]:
        """Read and parse a JSON file."""
        with open(path) as f:
            return json.load(f)

    def _write_json(self, path: Path, data: dict[str, Any]) -> None:
        """Write data to JSON file atomically with sorted keys for git diffs."""
        fd, temp_path = tempfile.mkstemp(
            dir=path.parent, prefix=".tmp_", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write("\n")
            os.replace(temp_path, path)
        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def _load_store(self) -> TaskStore:
        """Load the store snapshot from disk."""
        self.ensure_initialized()
        return TaskStore.from_dict(self._read_json(self.tasks_file))

    def _save_store(self, store: TaskStore) -> None:
        """Write the store snapshot to disk."""
        data = store.to_dict()
        data["version"] = STATE_VERSION
        self._write_json(self.tasks_file, data)

    def add_task(self, description: str) -> int:
        """Add a task and return its id."""
        store = self._load_store()
        task_id = store.add_task(description)
        self._save_store(store)
        return task_id

    def complete_task(self, task_id: int) -> bool:
        """Mark a task as completed. Returns True if the task exists."""
        store = self._load_store()
        if not store.complete_task(task_id):
            return False
        self._save_store(store)
        return True

    def remove_task(self, task_id: int) -> bool:
        """Delete a task by ID. Returns True if deleted."""
        store = self._load_store()
        if not store.remove_task(task_id):
            return False
        self._save_store(store)
        return True

    def list_tasks(self) -> list[Task]:
        """List all tasks in insertion order."""
        return self._load_store().list_tasks()

    def get_task(self, task_id: int) -> Task | None:
        """Get a specific task by ID."""
        return self._load_store().get_task(task_id)

    def get_config(self) -> TodoConfig:
        """Load the directory configuration."""
        self.ensure_initialized()
        data = self._read_json(self.config_file)
        return TodoConfig.from_dict(data)

    def save_config(self, config: TodoConfig) -> None:
        """Save the directory configuration."""
        self._write_json(self.config_file, config.to_dict())
