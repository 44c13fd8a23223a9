"""Task store and its JSON-file host."""

from .task_store import MAX_TASK_ID, TaskStore, saturating_add
from .json_store import JsonTaskStore

__all__ = ["MAX_TASK_ID", "TaskStore", "saturating_add", "JsonTaskStore"]
