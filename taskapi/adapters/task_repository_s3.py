"""S3/R2-backed task repository."""

from __future__ import annotations

import json
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from taskapi.adapters.s3_client import get_bucket_name, get_s3_client
from taskapi.app.core.errors import TaskStoreError
from taskapi.app.task_repo_utils import sort_tasks_by_created, task_id_from_document
from taskapi.ports.task_repository import ITaskRepository

_PREFIX = "tasks/"


def _task_key(task_id: str) -> str:
    return f"{_PREFIX}{task_id}.json"


def _is_missing(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") in {"NoSuchKey", "404"}


class S3TaskRepository(ITaskRepository):
    """Task repository persisted as JSON objects in S3/R2."""

    def __init__(self, client: Any = None, bucket: Optional[str] = None) -> None:
        try:
            self._client = client if client is not None else get_s3_client()
            self._bucket = bucket or get_bucket_name()
        except RuntimeError as exc:
            raise TaskStoreError(str(exc), cause=exc) from exc

    def create(self, task: dict[str, Any]) -> dict[str, Any]:
        payload = dict(task)
        task_id = task_id_from_document(payload)
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=_task_key(task_id),
                Body=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
                ContentType="application/json",
            )
        except (BotoCoreError, ClientError) as exc:
            raise TaskStoreError(f"failed to write task {task_id}: {exc}", cause=exc) from exc
        return payload

    def get(self, task_id: str) -> Optional[dict[str, Any]]:
        try:
            return self._read(_task_key(task_id))
        except ClientError as exc:
            if _is_missing(exc):
                return None
            raise TaskStoreError(f"failed to read task {task_id}: {exc}", cause=exc) from exc
        except (BotoCoreError, ValueError) as exc:
            raise TaskStoreError(f"failed to read task {task_id}: {exc}", cause=exc) from exc

    def list(self) -> list[dict[str, Any]]:
        results: list[dict[str, Any]] = []
        token: Optional[str] = None
        try:
            while True:
                params = {"Bucket": self._bucket, "Prefix": _PREFIX}
                if token:
                    params["ContinuationToken"] = token
                resp = self._client.list_objects_v2(**params)
                for item in resp.get("Contents", []) or []:
                    key = item.get("Key") or ""
                    if key.endswith(".json"):
                        results.append(self._read(key))
                if not resp.get("IsTruncated"):
                    break
                token = resp.get("NextContinuationToken")
        except (BotoCoreError, ClientError, ValueError) as exc:
            raise TaskStoreError(f"failed to list tasks: {exc}", cause=exc) from exc
        return sort_tasks_by_created(results)

    def _read(self, key: str) -> dict[str, Any]:
        obj = self._client.get_object(Bucket=self._bucket, Key=key)
        return json.loads(obj["Body"].read().decode("utf-8"))
