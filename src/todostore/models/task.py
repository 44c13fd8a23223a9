"""Task model for todostore."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Task:
    """A single task record held by the store."""

    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert task to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Create a Task from a dictionary."""
        return cls(
            id=int(data["id"]),
            description=data["description"],
            completed=bool(data.get("completed", False)),
        )

    def format_display(self) -> str:
        """Format task for display."""
        icon = "[x]" if self.completed else "[ ]"
        return f"{icon} {self.id}: {self.description}"
