# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- configures logging from them,
- wires the concrete TaskStore for the configured document path.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)


def create_task_store(*, settings=None) -> TaskStore:
    """
    Create the TaskStore for the provided settings.

    Keeping settings injectable lets tests point the store at a temp file.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path, backup_corrupt=settings.backup_corrupt)
    logger.debug("TaskStore ready path=%s backup_corrupt=%s", store.path, settings.backup_corrupt)
    return store
