"""Configuration model for todostore."""

from dataclasses import dataclass
from typing import Any


@dataclass
class TodoConfig:
    """Per-directory todostore configuration."""

    version: str = "0.1"
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "version": self.version,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TodoConfig":
        """Create a TodoConfig from a dictionary."""
        return cls(
            version=data.get("version", "0.1"),
            log_level=data.get("log_level", "WARNING"),
        )
