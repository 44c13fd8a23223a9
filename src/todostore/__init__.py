"""todostore - a minimal task record store."""

__version__ = "0.1.0"
