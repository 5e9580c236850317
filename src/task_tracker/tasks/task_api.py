# src/task_tracker/tasks/task_api.py

from __future__ import annotations

import logging
import re

from .task_models import MAX_TASK_ID, Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"\+?[0-9]+")


def add_task(store: TaskStore, tasks: list[Task], description: str) -> Task:
    """
    Append a new task and persist the full list.

    The id is the current list length. Blank descriptions raise ValueError
    before anything is mutated or written.
    """
    if not description or not description.strip():
        raise ValueError("description is required")

    task = Task.new(len(tasks), description)
    tasks.append(task)
    store.save(tasks)
    logger.debug("Task added id=%s", task.id)
    return task


def list_tasks(tasks: list[Task]) -> list[str]:
    return [t.display() for t in tasks]


def parse_task_id(raw: str | None) -> int | None:
    """Parse a user-supplied id. Returns None unless it is an unsigned 32-bit integer."""
    if raw is None or not _ID_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value > MAX_TASK_ID:
        return None
    return value


def complete_task(store: TaskStore, tasks: list[Task], task_id: int) -> int:
    """
    Mark every task with `task_id` as completed.

    Scans the whole list (ids are unique, but there is no early exit).
    Saves only when something matched. Returns the number of matches.
    """
    matched = 0
    for task in tasks:
        if task.id == task_id:
            task.mark_completed()
            matched += 1

    if matched:
        store.save(tasks)
        logger.debug("Task id=%s marked completed (matches=%d)", task_id, matched)
    else:
        logger.debug("Task id=%s not found", task_id)
    return matched
