from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from taskapi.app.core.errors import TaskStoreError
from taskapi.app.db import SessionLocal
from taskapi.app.models import Task
from taskapi.app.task_repo_utils import parse_created_at, task_id_from_document
from taskapi.ports.task_repository import ITaskRepository


class SQLAlchemyTaskRepository(ITaskRepository):
    """Task repository backed by the ``tasks`` table."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self.session_factory = session_factory or SessionLocal

    def create(self, task: Dict[str, Any]) -> Dict[str, Any]:
        task_id = task_id_from_document(task)
        row = Task(
            id=task_id,
            title=task.get("title"),
            description=task.get("description"),
        )
        created_at = parse_created_at(task.get("created_at"))
        if created_at is not None:
            row.created_at = created_at
        try:
            with self.session_factory() as session:
                session.add(row)
                session.commit()
                session.refresh(row)
                return row.to_document()
        except SQLAlchemyError as exc:
            raise TaskStoreError(f"failed to write task {task_id}: {exc}", cause=exc) from exc

    def get(self, task_id: str) -> Optional[Dict[str, Any]]:
        try:
            with self.session_factory() as session:
                row = session.get(Task, task_id)
                return row.to_document() if row else None
        except SQLAlchemyError as exc:
            raise TaskStoreError(f"failed to read task {task_id}: {exc}", cause=exc) from exc

    def list(self) -> List[Dict[str, Any]]:
        try:
            with self.session_factory() as session:
                rows = session.query(Task).order_by(Task.created_at.asc()).all()
                return [row.to_document() for row in rows]
        except SQLAlchemyError as exc:
            raise TaskStoreError(f"failed to list tasks: {exc}", cause=exc) from exc
