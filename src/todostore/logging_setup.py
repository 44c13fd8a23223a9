"""Logging configuration shared by the todostore entry points."""

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _PackageFilter(logging.Filter):
    """Pass todostore records; let third-party loggers through only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "todostore" or record.name.startswith("todostore."):
            return True
        return record.levelno >= logging.ERROR


def resolve_level(verbose: bool = False, configured: str | None = None) -> int:
    """Pick the console log level.

    ``--verbose`` wins, then TODOSTORE_LOG_LEVEL, then the configured level.
    Unknown names fall back to WARNING.
    """
    if verbose:
        return logging.DEBUG

    name = os.environ.get("TODOSTORE_LOG_LEVEL") or configured or "WARNING"
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    level: int = logging.WARNING,
    log_file: str | Path | None = None,
) -> None:
    """Configure the root logger with a stderr handler and an optional file.

    Call once, early, from an entry point. Existing root handlers are replaced
    so repeated calls do not duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # stdout belongs to command output and the MCP stdio transport
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_PackageFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
