"""Shared fixtures: a file-backed repository under tmp_path and a client wired to it."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskapi.adapters.task_repository_file import FileTaskRepository
from taskapi.app.config import get_settings
from taskapi.app.deps import get_task_repository
from taskapi.main import app


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("WORKSPACE_ROOT", str(tmp_path / "workspace"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def file_repo(tmp_path: Path) -> FileTaskRepository:
    return FileTaskRepository(tmp_path / "store")


@pytest.fixture()
def client(file_repo: FileTaskRepository):
    app.dependency_overrides[get_task_repository] = lambda: file_repo
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
