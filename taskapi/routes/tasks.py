"""Task API router."""

import logging
import time
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from taskapi.app.core.errors import TaskStoreError
from taskapi.app.deps import backend_label, get_task_repository
from taskapi.app.schemas import TaskCreate, TaskOut
from taskapi.app.task_repo_utils import build_task_document

logger = logging.getLogger(__name__)

router = APIRouter()


def _elapsed_ms(start_time: float) -> int:
    return int((time.perf_counter() - start_time) * 1000)


def _store_unavailable(exc: TaskStoreError, *, op: str, start_time: float) -> HTTPException:
    logger.exception(
        "task store failure: %s",
        exc.message,
        extra={"op": op, "backend": backend_label(), "elapsed_ms": _elapsed_ms(start_time)},
    )
    return HTTPException(status_code=500, detail="task store unavailable")


def _to_out(task: dict[str, Any]) -> TaskOut:
    return TaskOut(
        id=str(task.get("id")),
        title=task.get("title"),
        description=task.get("description"),
    )


@router.get("/tasks", response_model=list[TaskOut])
def list_tasks(repo=Depends(get_task_repository)):
    """Return every stored task."""

    start_time = time.perf_counter()
    try:
        tasks = repo.list()
    except TaskStoreError as exc:
        raise _store_unavailable(exc, op="list", start_time=start_time) from exc
    logger.debug(
        "listed count=%s",
        len(tasks),
        extra={"op": "list", "backend": backend_label(), "elapsed_ms": _elapsed_ms(start_time)},
    )
    return [_to_out(t) for t in tasks]


@router.post("/tasks", response_model=TaskOut)
def create_task(
    payload: Optional[TaskCreate] = Body(None),
    repo=Depends(get_task_repository),
):
    """Store the request body as a new task and return it with its id.

    A missing body is treated as an empty object.
    """

    task = build_task_document((payload or TaskCreate()).model_dump())
    task_id = task["id"]
    start_time = time.perf_counter()
    try:
        repo.create(task)
        stored_task = repo.get(task_id)
    except TaskStoreError as exc:
        raise _store_unavailable(exc, op="create", start_time=start_time) from exc

    if not stored_task:
        raise HTTPException(
            status_code=500,
            detail=f"Task persistence failed for task_id={task_id}",
        )
    backend = backend_label()
    logger.info(
        "created task_id=%s backend=%s",
        task_id,
        backend,
        extra={
            "op": "create",
            "task_id": task_id,
            "backend": backend,
            "elapsed_ms": _elapsed_ms(start_time),
        },
    )
    return _to_out(stored_task)
