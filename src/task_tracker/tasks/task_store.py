# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_PATH = Path("tasks.json")


class TaskStoreError(RuntimeError):
    """Raised when the task document cannot be serialized or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason


class TaskStore:
    """
    JSON-file task store.

    The whole ordered task list lives in one document (a JSON array of
    {"id", "description", "completed"} objects). Every load reads the full
    document and every save replaces it in full.

    Concurrency:
    - no locking; concurrent processes writing the same file are last-writer-wins
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_PATH, *, backup_corrupt: bool = False) -> None:
        self._path = Path(path)
        self._backup_corrupt = backup_corrupt

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._path.with_name(self._path.name + ".bak")

    # ---- low-level helpers ----

    @staticmethod
    def _decode(data: str) -> list[Task]:
        raw = json.loads(data)
        if not isinstance(raw, list):
            raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
        return [Task.from_dict(item) for item in raw]

    def _write_backup(self, data: bytes) -> None:
        try:
            self.backup_path.write_bytes(data)
            logger.warning("Kept unparseable task file as %s", self.backup_path)
        except OSError as e:
            logger.warning("Failed to back up unparseable task file to %s (%s)", self.backup_path, e)

    # ---- public API ----

    def load(self) -> list[Task]:
        """
        Load all tasks in stored order.

        Missing file -> empty list.
        Unreadable or malformed file -> warning + empty list (never raises).
        """
        if not self._path.exists():
            logger.debug("Task file %s does not exist, starting empty.", self._path)
            return []

        try:
            data = self._path.read_bytes()
        except OSError as e:
            logger.warning("Failed to read %s (%s), starting fresh.", self._path, e)
            return []

        try:
            tasks = self._decode(data.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            # json.JSONDecodeError is a ValueError subclass.
            logger.warning("Failed to parse %s (%s), starting fresh.", self._path, e)
            if self._backup_corrupt:
                self._write_backup(data)
            return []

        logger.debug("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """
        Replace the task document with `tasks`.

        Writes a sibling temp file and renames it over the target.
        Raises TaskStoreError on any serialization or I/O failure.
        """
        try:
            payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise TaskStoreError(self._path, f"cannot serialize tasks: {e}") from e

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except (OSError, UnicodeError) as e:
            # UnicodeEncodeError: lone surrogates (e.g. from undecodable argv bytes).
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TaskStoreError(self._path, getattr(e, "strerror", None) or str(e)) from e

        logger.debug("Saved %d task(s) to %s", len(tasks), self._path)
