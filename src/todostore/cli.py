"""todostore CLI interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .logging_setup import resolve_level, setup_logging
from .store import MAX_TASK_ID, JsonTaskStore

logger = logging.getLogger(__name__)


def get_store(root: Path | None = None) -> JsonTaskStore:
    """Get the store host for a directory."""
    if root is None:
        root = Path.cwd()
    return JsonTaskStore(root)


def task_id_arg(value: str) -> int:
    """argparse type for task ids (unsigned 32-bit)."""
    try:
        task_id = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {value!r}")
    if not 0 <= task_id <= MAX_TASK_ID:
        raise argparse.ArgumentTypeError(
            f"task id must be between 0 and {MAX_TASK_ID}"
        )
    return task_id


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize .todostore/ in current directory."""
    root = Path.cwd()
    task_store = JsonTaskStore(root)

    if (root / ".todostore").exists():
        print("todostore already initialized in this directory.")
        return 0

    task_store.initialize()
    print(f"Initialized todostore in {root / '.todostore'}")
    return 0


def cmd_tasks(args: argparse.Namespace) -> int:
    """List tasks."""
    task_store = get_store()

    try:
        tasks = task_store.list_tasks()

        if args.json:
            print(json.dumps([t.to_dict() for t in tasks], indent=2))
            return 0

        if not tasks:
            print("No tasks found.")
            return 0

        for task in tasks:
            print(task.format_display())

        return 0

    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_add(args: argparse.Namespace) -> int:
    """Add a new task."""
    task_store = get_store()

    try:
        task_id = task_store.add_task(args.description)
        print(f"Created {task_id}: {args.description}")
        return 0

    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_done(args: argparse.Namespace) -> int:
    """Mark a task as completed."""
    task_store = get_store()

    try:
        if not task_store.complete_task(args.task_id):
            print(f"Task {args.task_id} not found.", file=sys.stderr)
            return 1

        print(f"Marked {args.task_id} as done.")
        return 0

    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_rm(args: argparse.Namespace) -> int:
    """Remove a task."""
    task_store = get_store()

    try:
        if not task_store.remove_task(args.task_id):
            print(f"Task {args.task_id} not found.", file=sys.stderr)
            return 1

        print(f"Removed {args.task_id}.")
        return 0

    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_show(args: argparse.Namespace) -> int:
    """Show a single task."""
    task_store = get_store()

    try:
        task = task_store.get_task(args.task_id)
        if task is None:
            print(f"Task {args.task_id} not found.", file=sys.stderr)
            return 1

        if args.json:
            print(json.dumps(task.to_dict(), indent=2))
        else:
            print(task.format_display())
        return 0

    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the MCP server."""
    from .server import main as server_main

    server_main()
    return 0


def cmd_web(args: argparse.Namespace) -> int:
    """Start the HTTP API."""
    from .web import main as web_main

    web_main()
    return 0


def _configured_log_level() -> str | None:
    """Log level from config.json, if this directory has one."""
    task_store = get_store()
    if not task_store.config_file.exists():
        return None
    try:
        return task_store.get_config().log_level
    except (OSError, json.JSONDecodeError):
        return None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="todostore",
        description="A minimal task record store",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    subparsers.add_parser("init", help="Initialize .todostore/ in current directory")

    # tasks
    tasks_parser = subparsers.add_parser("tasks", help="List tasks")
    tasks_parser.add_argument("--json", action="store_true", help="Print as JSON")

    # add
    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("description", help="Task description")

    # done
    done_parser = subparsers.add_parser("done", help="Mark a task as completed")
    done_parser.add_argument("task_id", type=task_id_arg, help="Task ID (e.g., 0)")

    # rm
    rm_parser = subparsers.add_parser("rm", help="Remove a task")
    rm_parser.add_argument("task_id", type=task_id_arg, help="Task ID (e.g., 0)")

    # show
    show_parser = subparsers.add_parser("show", help="Show a single task")
    show_parser.add_argument("task_id", type=task_id_arg, help="Task ID (e.g., 0)")
    show_parser.add_argument("--json", action="store_true", help="Print as JSON")

    # serve
    subparsers.add_parser("serve", help="Start the MCP server")

    # web
    subparsers.add_parser("web", help="Start the HTTP API")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(resolve_level(args.verbose, _configured_log_level()))

    if args.command is None:
        parser.print_help()
        return 0

    handlers = {
        "init": cmd_init,
        "tasks": cmd_tasks,
        "add": cmd_add,
        "done": cmd_done,
        "rm": cmd_rm,
        "show": cmd_show,
        "serve": cmd_serve,
        "web": cmd_web,
    }

    handler = handlers.get(args.command)
    if handler:
        logger.debug("Running command %s", args.command)
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
