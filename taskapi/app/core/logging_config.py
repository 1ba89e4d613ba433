"""Root logging setup: one stream handler, key=value task-store fields."""

import logging
import os
from typing import Optional

_CONFIGURED = False

# Extras every task-store log line carries; missing ones print as "-".
LOG_FIELDS = ("op", "task", "backend", "elapsed_ms")

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s "
    "op=%(op)s task=%(task)s backend=%(backend)s elapsed_ms=%(elapsed_ms)s "
    "%(message)s"
)


class TaskLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        if "task" not in record.__dict__ and "task_id" in record.__dict__:
            record.__dict__["task"] = record.__dict__["task_id"]
        for key in LOG_FIELDS:
            if key not in record.__dict__:
                record.__dict__[key] = "-"
        return super().format(record)


def _resolve_level(level: Optional[str]) -> int:
    level_name = (
        level
        or os.getenv("APP_LOG_LEVEL")
        or os.getenv("UVICORN_LOG_LEVEL")
        or os.getenv("LOG_LEVEL")
        or "INFO"
    ).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(level: Optional[str] = None) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved_level = _resolve_level(level)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(TaskLogFormatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolved_level)

    # uvicorn installs its own handlers; keep them at our level without double printing
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.setLevel(resolved_level)
        uvicorn_logger.propagate = False

    _CONFIGURED = True
