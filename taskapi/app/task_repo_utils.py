"""Helpers for building task documents and ordering task lists."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List
from uuid import uuid4


def new_task_id() -> str:
    return uuid4().hex


def parse_created_at(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (OSError, OverflowError, ValueError):
            return None
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return None


def build_task_document(fields: Dict[str, Any], *, task_id: str | None = None) -> Dict[str, Any]:
    """Return a new task document with a generated id and creation timestamp."""

    return {
        "id": task_id or new_task_id(),
        "title": fields.get("title"),
        "description": fields.get("description"),
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


def task_id_from_document(task: Dict[str, Any]) -> str:
    task_id = task.get("id")
    if not task_id:
        raise ValueError("task document missing id")
    return str(task_id)


def sort_tasks_by_created(tasks: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return tasks oldest first; documents without a usable timestamp go last."""

    far_future = datetime.max.replace(tzinfo=timezone.utc)

    def sort_key(item: Dict[str, Any]) -> datetime:
        return parse_created_at(item.get("created_at")) or far_future

    return sorted(list(tasks or []), key=sort_key)
