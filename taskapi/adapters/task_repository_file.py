"""File-backed task repository (default document store)."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from taskapi.app.core.errors import TaskStoreError
from taskapi.app.core.workspace import tasks_dir, workspace_root
from taskapi.app.task_repo_utils import sort_tasks_by_created, task_id_from_document
from taskapi.ports.task_repository import ITaskRepository


def _task_path(base: Path, task_id: str) -> Path:
    return base / f"{task_id}.json"


def _atomic_write(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    data = json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")
    with open(tmp_path, "wb") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())
    os.replace(tmp_path, path)


def _load_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


class FileTaskRepository(ITaskRepository):
    """Task repository persisted as one JSON file per task."""

    def __init__(self, root: Path | str | None = None) -> None:
        try:
            base = Path(root) if root is not None else workspace_root()
        except OSError as exc:
            raise TaskStoreError(f"workspace unavailable: {exc}", cause=exc) from exc
        self._base = tasks_dir(base)

    def create(self, task: dict[str, Any]) -> dict[str, Any]:
        payload = dict(task)
        task_id = task_id_from_document(payload)
        path = _task_path(self._base, task_id)
        if path.exists():
            raise TaskStoreError(f"task {task_id} already exists")
        try:
            _atomic_write(path, payload)
        except OSError as exc:
            raise TaskStoreError(f"failed to write task {task_id}: {exc}", cause=exc) from exc
        return payload

    def get(self, task_id: str) -> Optional[dict[str, Any]]:
        path = _task_path(self._base, task_id)
        try:
            if not path.is_file():
                return None
            return _load_json(path)
        except (OSError, ValueError) as exc:
            raise TaskStoreError(f"failed to read task {task_id}: {exc}", cause=exc) from exc

    def list(self) -> list[dict[str, Any]]:
        if not self._base.exists():
            return []
        results: list[dict[str, Any]] = []
        try:
            for path in self._base.glob("*.json"):
                results.append(_load_json(path))
        except (OSError, ValueError) as exc:
            raise TaskStoreError(f"failed to list tasks: {exc}", cause=exc) from exc
        return sort_tasks_by_created(results)
