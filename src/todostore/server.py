"""todostore MCP Server."""

import logging
import os
from pathlib import Path

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .logging_setup import resolve_level, setup_logging
from .store import MAX_TASK_ID, JsonTaskStore

logger = logging.getLogger(__name__)


def get_root_path() -> Path:
    """Get the root path from environment or current directory."""
    root = os.environ.get("TODOSTORE_ROOT")
    if root:
        return Path(root)
    return Path.cwd()


def get_store() -> JsonTaskStore:
    """Get the store host for the configured root."""
    return JsonTaskStore(get_root_path())


TASK_ID_SCHEMA = {
    "type": "integer",
    "minimum": 0,
    "maximum": MAX_TASK_ID,
    "description": "The task ID (e.g., 0).",
}

# Create the MCP server
server = Server("todostore")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="add_task",
            description="Add a new task. Returns the id allocated to it.",
            inputSchema={
                "type": "object",
                "properties": {
                    "description": {
                        "type": "string",
                        "description": "Free-text task description.",
                    },
                },
                "required": ["description"],
            },
        ),
        Tool(
            name="complete_task",
            description="Mark a task as completed. Reports whether the task was found.",
            inputSchema={
                "type": "object",
                "properties": {"task_id": TASK_ID_SCHEMA},
                "required": ["task_id"],
            },
        ),
        Tool(
            name="remove_task",
            description="Delete a task. Its id is never handed out again.",
            inputSchema={
                "type": "object",
                "properties": {"task_id": TASK_ID_SCHEMA},
                "required": ["task_id"],
            },
        ),
        Tool(
            name="list_tasks",
            description="List all tasks in the order they were added.",
            inputSchema={"type": "object", "properties": {}},
        ),
        Tool(
            name="get_task",
            description="Read a single task by id.",
            inputSchema={
                "type": "object",
                "properties": {"task_id": TASK_ID_SCHEMA},
                "required": ["task_id"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    store = get_store()
    logger.debug("Tool call %s %s", name, arguments)

    if name == "add_task":
        return await handle_add_task(store, arguments)
    elif name == "complete_task":
        return await handle_complete_task(store, arguments)
    elif name == "remove_task":
        return await handle_remove_task(store, arguments)
    elif name == "list_tasks":
        return await handle_list_tasks(store, arguments)
    elif name == "get_task":
        return await handle_get_task(store, arguments)
    else:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]


async def handle_add_task(
    store: JsonTaskStore, arguments: dict
) -> list[TextContent]:
    """Handle add_task tool call."""
    try:
        description = arguments["description"]
        task_id = store.add_task(description)

        return [TextContent(type="text", text=f"Created task {task_id}: {description}")]

    except FileNotFoundError as e:
        return [TextContent(type="text", text=f"Error: {e}")]
    except Exception as e:
        logger.exception("add_task failed")
        return [TextContent(type="text", text=f"Error creating task: {e}")]


async def handle_complete_task(
    store: JsonTaskStore, arguments: dict
) -> list[TextContent]:
    """Handle complete_task tool call."""
    try:
        task_id = int(arguments["task_id"])

        if not store.complete_task(task_id):
            return [TextContent(type="text", text=f"Task {task_id} not found.")]

        return [TextContent(type="text", text=f"Completed task {task_id}.")]

    except FileNotFoundError as e:
        return [TextContent(type="text", text=f"Error: {e}")]
    except Exception as e:
        logger.exception("complete_task failed")
        return [TextContent(type="text", text=f"Error completing task: {e}")]


async def handle_remove_task(
    store: JsonTaskStore, arguments: dict
) -> list[TextContent]:
    """Handle remove_task tool call."""
    try:
        task_id = int(arguments["task_id"])

        if not store.remove_task(task_id):
            return [TextContent(type="text", text=f"Task {task_id} not found.")]

        return [TextContent(type="text", text=f"Removed task {task_id}.")]

    except FileNotFoundError as e:
        return [TextContent(type="text", text=f"Error: {e}")]
    except Exception as e:
        logger.exception("remove_task failed")
        return [TextContent(type="text", text=f"Error removing task: {e}")]


async def handle_list_tasks(
    store: JsonTaskStore, arguments: dict
) -> list[TextContent]:
    """Handle list_tasks tool call."""
    try:
        tasks = store.list_tasks()

        if not tasks:
            return [TextContent(type="text", text="No tasks.")]

        lines = [f"## Tasks ({len(tasks)})", ""]
        for task in tasks:
            lines.append(task.format_display())

        return [TextContent(type="text", text="\n".join(lines))]

    except FileNotFoundError as e:
        return [TextContent(type="text", text=f"Error: {e}")]
    except Exception as e:
        logger.exception("list_tasks failed")
        return [TextContent(type="text", text=f"Error reading tasks: {e}")]


async def handle_get_task(
    store: JsonTaskStore, arguments: dict
) -> list[TextContent]:
    """Handle get_task tool call."""
    try:
        task_id = int(arguments["task_id"])
        task = store.get_task(task_id)

        if task is None:
            return [TextContent(type="text", text=f"Task {task_id} not found.")]

        status = "completed" if task.completed else "open"
        return [
            TextContent(
                type="text",
                text=f"{task.format_display()}\nStatus: {status}",
            )
        ]

    except FileNotFoundError as e:
        return [TextContent(type="text", text=f"Error: {e}")]
    except Exception as e:
        logger.exception("get_task failed")
        return [TextContent(type="text", text=f"Error reading task: {e}")]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Entry point for the MCP server."""
    import asyncio

    setup_logging(resolve_level())
    logger.info("Starting MCP server for %s", get_root_path())
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
