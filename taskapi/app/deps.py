"""Dependency providers for the task repository port."""

from __future__ import annotations

import logging

from taskapi.app.config import get_settings
from taskapi.ports.task_repository import ITaskRepository

logger = logging.getLogger(__name__)

SQL_BACKENDS = {"sql", "sqlite", "db"}
S3_BACKENDS = {"s3", "r2"}


def backend_label() -> str:
    backend = (get_settings().task_repo_backend or "").strip().lower()
    if backend in SQL_BACKENDS:
        return "sql"
    if backend in S3_BACKENDS:
        return "s3"
    return "file"


def get_task_repository() -> ITaskRepository:
    """Return the task repository implementation selected by TASK_REPO_BACKEND."""
    backend = backend_label()
    logger.debug("TaskRepository backend=%s", backend, extra={"backend": backend})
    if backend == "sql":
        from taskapi.app.adapters.repo_sql import SQLAlchemyTaskRepository

        return SQLAlchemyTaskRepository()
    if backend == "s3":
        from taskapi.adapters.task_repository_s3 import S3TaskRepository

        return S3TaskRepository()
    from taskapi.adapters.task_repository_file import FileTaskRepository

    return FileTaskRepository()
