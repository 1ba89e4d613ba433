from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from taskapi.app.adapters.repo_sql import SQLAlchemyTaskRepository
from taskapi.app.core.errors import TaskStoreError
from taskapi.app.db import init_db
from taskapi.app.task_repo_utils import build_task_document


@pytest.fixture()
def session_factory(tmp_path: Path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'tasks.db'}",
        connect_args={"check_same_thread": False},
    )
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


def test_sql_repo_create_and_get(session_factory) -> None:
    repo = SQLAlchemyTaskRepository(session_factory)
    task = build_task_document({"title": "A", "description": "B"})
    stored = repo.create(task)

    assert stored["id"] == task["id"]
    assert stored["title"] == "A"
    assert stored["description"] == "B"
    assert repo.get(task["id"])["title"] == "A"
    assert repo.get("missing") is None


def test_sql_repo_lists_in_insertion_order(session_factory) -> None:
    repo = SQLAlchemyTaskRepository(session_factory)
    for idx, title in enumerate(["first", "second", "third"]):
        task = build_task_document({"title": title})
        task["created_at"] = f"2024-01-0{idx + 1}T00:00:00+00:00"
        repo.create(task)
    assert [t["title"] for t in repo.list()] == ["first", "second", "third"]


def test_sql_repo_duplicate_id_is_store_error(session_factory) -> None:
    repo = SQLAlchemyTaskRepository(session_factory)
    repo.create(build_task_document({"title": "A"}, task_id="fixed"))
    with pytest.raises(TaskStoreError):
        repo.create(build_task_document({"title": "B"}, task_id="fixed"))


def test_sql_repo_wraps_missing_table(tmp_path: Path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    repo = SQLAlchemyTaskRepository(sessionmaker(bind=engine))
    with pytest.raises(TaskStoreError) as excinfo:
        repo.list()
    assert isinstance(excinfo.value.cause, OperationalError)


def test_sql_repo_behind_api(session_factory) -> None:
    from fastapi.testclient import TestClient

    from taskapi.app.deps import get_task_repository
    from taskapi.main import app

    app.dependency_overrides[get_task_repository] = lambda: SQLAlchemyTaskRepository(session_factory)
    try:
        with TestClient(app) as client:
            assert client.get("/tasks").json() == []
            created = client.post("/tasks", json={"title": "A", "description": "B"}).json()
            items = client.get("/tasks").json()
            assert items == [created]
    finally:
        app.dependency_overrides.clear()
