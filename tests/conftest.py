# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.tasks.task_store import TaskStore

from .fakes import FailingTaskStore, RecordingTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the CLI.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-tracker",
        log_level="WARNING",
        log_file=None,
        tasks_path=tmp_path / "tasks.json",
        backup_corrupt=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def recording_store(settings: SimpleNamespace) -> RecordingTaskStore:
    return RecordingTaskStore(settings.tasks_path)


@pytest.fixture()
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run the real CLI against a temp working directory.
    Returns the task document path.
    """
    monkeypatch.chdir(tmp_path)
    for suffix in ("APP_NAME", "LOG_LEVEL", "LOG_FILE", "TASKS_PATH", "BACKUP_CORRUPT"):
        monkeypatch.delenv(f"TASK_TRACKER_{suffix}", raising=False)
    path = tmp_path / "tasks.json"
    monkeypatch.setenv("TASK_TRACKER_TASKS_PATH", str(path))
    return path


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def failing_store(settings: SimpleNamespace) -> FailingTaskStore:
    return FailingTaskStore(settings.tasks_path)
