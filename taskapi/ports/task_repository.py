"""Port interface for task persistence (repository boundary)."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class ITaskRepository(Protocol):
    """Task repository abstraction for create/get/list operations."""

    def create(self, task: dict[str, Any]) -> dict[str, Any]:
        """Persist a new task document and return the stored document."""

    def get(self, task_id: str) -> Optional[dict[str, Any]]:
        """Return a task document by id or None when missing."""

    def list(self) -> list[dict[str, Any]]:
        """Return every stored task document, oldest first."""
