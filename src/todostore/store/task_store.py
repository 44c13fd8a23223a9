"""In-memory task store.

Holds the ordered task sequence and the id counter. Every lookup is a linear
scan; "not found" is reported through ``False`` / ``None`` return values.
"""

import logging
from dataclasses import replace
from typing import Any

from ..models import Task

logger = logging.getLogger(__name__)

# Ids are unsigned 32-bit integers.
MAX_TASK_ID = 2**32 - 1


def saturating_add(value: int, step: int = 1, maximum: int = MAX_TASK_ID) -> int:
    """Add ``step`` to ``value``, clamping at ``maximum`` instead of wrapping."""
    return min(value + step, maximum)


class TaskStore:
    """Owner of the task collection and the next-id counter.

    Once ``next_id`` saturates at ``MAX_TASK_ID`` further adds reuse that id.
    The collision is not detected.
    """

    def __init__(self, tasks: list[Task] | None = None, next_id: int = 0):
        self._tasks: list[Task] = list(tasks) if tasks else []
        self._next_id = next_id

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        """Id the next ``add_task`` call will hand out."""
        return self._next_id

    def add_task(self, description: str) -> int:
        """Append a new incomplete task and return its id."""
        task_id = self._next_id
        self._tasks.append(Task(id=task_id, description=description))
        self._next_id = saturating_add(self._next_id)

        if self._next_id == task_id:
            logger.warning(
                "Task id counter saturated at %d; the next add reuses this id",
                task_id,
            )
        logger.debug("Added task id=%d total=%d", task_id, len(self._tasks))
        return task_id

    def complete_task(self, task_id: int) -> bool:
        """Mark a task as completed. Returns False if no task has that id."""
        task = self._find(task_id)
        if task is None:
            logger.debug("complete_task: id=%d not found", task_id)
            return False

        task.completed = True
        logger.debug("Completed task id=%d", task_id)
        return True

    def remove_task(self, task_id: int) -> bool:
        """Delete a task. Returns False if no task has that id."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[i]
                logger.debug("Removed task id=%d total=%d", task_id, len(self._tasks))
                return True

        logger.debug("remove_task: id=%d not found", task_id)
        return False

    def list_tasks(self) -> list[Task]:
        """Return copies of all tasks in insertion order."""
        return [replace(task) for task in self._tasks]

    def get_task(self, task_id: int) -> Task | None:
        """Return a copy of the task with this id, or None."""
        task = self._find(task_id)
        return replace(task) if task is not None else None

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def to_dict(self) -> dict[str, Any]:
        """Snapshot the store state for persistence."""
        return {
            "next_id": self._next_id,
            "tasks": [task.to_dict() for task in self._tasks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TaskStore":
        """Rebuild a store from a snapshot produced by ``to_dict``."""
        return cls(
            tasks=[Task.from_dict(t) for t in data.get("tasks", [])],
            next_id=int(data.get("next_id", 0)),
        )
