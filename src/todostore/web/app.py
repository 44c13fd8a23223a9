"""FastAPI application exposing the task store over HTTP."""

import logging
import os
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Path, Request
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from ..store import MAX_TASK_ID, JsonTaskStore

logger = logging.getLogger(__name__)

app = FastAPI(title="todostore", description="A minimal task record store")


class TaskCreate(BaseModel):
    """Request body for creating a task."""

    description: str


def get_store() -> JsonTaskStore:
    """Dependency to get the task store."""
    root = os.environ.get("TODOSTORE_ROOT", os.getcwd())
    store = JsonTaskStore(root)
    store.ensure_initialized()
    return store


StoreDep = Annotated[JsonTaskStore, Depends(get_store)]
TaskId = Annotated[int, Path(ge=0, le=MAX_TASK_ID)]


@app.exception_handler(FileNotFoundError)
async def store_missing_handler(request: Request, exc: FileNotFoundError):
    """Report an uninitialized store directory."""
    logger.error("Store unavailable: %s", exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.get("/", response_class=RedirectResponse)
async def root():
    """Redirect to tasks listing."""
    return RedirectResponse(url="/tasks", status_code=302)


@app.get("/tasks")
async def list_tasks(store: StoreDep) -> list[dict[str, Any]]:
    """List all tasks in insertion order."""
    return [task.to_dict() for task in store.list_tasks()]


@app.post("/tasks", status_code=201)
async def create_task(body: TaskCreate, store: StoreDep) -> dict[str, int]:
    """Create a new task."""
    task_id = store.add_task(body.description)
    return {"id": task_id}


@app.get("/tasks/{task_id}")
async def get_task(task_id: TaskId, store: StoreDep) -> dict[str, Any]:
    """Get task detail."""
    task = store.get_task(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task.to_dict()


@app.post("/tasks/{task_id}/complete")
async def complete_task(task_id: TaskId, store: StoreDep) -> dict[str, Any]:
    """Mark a task as completed."""
    return {"id": task_id, "completed": store.complete_task(task_id)}


@app.delete("/tasks/{task_id}")
async def delete_task(task_id: TaskId, store: StoreDep) -> dict[str, Any]:
    """Delete a task."""
    return {"id": task_id, "removed": store.remove_task(task_id)}
