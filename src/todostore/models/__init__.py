"""Data models for todostore."""

from .task import Task
from .config import TodoConfig

__all__ = [
    "Task",
    "TodoConfig",
]
