from pathlib import Path

from taskapi.app.config import get_settings


def workspace_root() -> Path:
    """Return the configured workspace root, creating it on first use."""

    root = Path(get_settings().workspace_root).expanduser().resolve()
    root.mkdir(parents=True, exist_ok=True)
    return root


def tasks_dir(base: Path | None = None) -> Path:
    """Directory holding one JSON document per task."""

    return (base or workspace_root()) / "tasks"
