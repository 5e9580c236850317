# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..tasks.task_api import add_task, complete_task, list_tasks, parse_task_id
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[TaskStore, list[Task], list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps the first command-line word to a handler (add, list, complete)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, tuple[str, str]] = {}

    def register(self, name: str, handler: CommandHandler, usage: str, help_text: str) -> None:
        self._handlers[name] = handler
        self._usage[name] = (usage, help_text)

    def handle(self, store: TaskStore, tasks: list[Task], argv: Sequence[str]) -> str:
        """
        Run the command named by argv[0] with the remaining words as args.
        Returns the text to print (may be empty).
        """
        handler = self._handlers.get(argv[0]) if argv else None
        if handler is None:
            logger.debug("Unknown or missing command: %r", argv[0] if argv else None)
            return "Invalid or missing command.\n" + self.build_usage()
        return handler(store, tasks, list(argv[1:]))

    def build_usage(self) -> str:
        lines = ["Usage:"]
        for usage, help_text in self._usage.values():
            lines.append(f"  {usage:<15}- {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(store: TaskStore, tasks: list[Task], args: list[str]) -> str:
    """add <words...> -> one task whose description is the words joined by spaces"""
    description = " ".join(args)
    if not description.strip():
        return "Please provide a task to add."

    # Save failures propagate as TaskStoreError; main() turns them into exit 1.
    task = add_task(store, tasks, description)
    return f"Added task: {task.description}"


def cmd_list(store: TaskStore, tasks: list[Task], args: list[str]) -> str:
    return "\n".join(list_tasks(tasks))


def cmd_complete(store: TaskStore, tasks: list[Task], args: list[str]) -> str:
    task_id = parse_task_id(args[0] if args else None)
    if task_id is None:
        return "Invalid id provided."

    if complete_task(store, tasks, task_id):
        return f"Task {task_id} marked as complete."
    return f"Task {task_id} could not be found."


registry.register("add", cmd_add, usage="add <task>", help_text="Add a new task")
registry.register("list", cmd_list, usage="list", help_text="List all tasks")
registry.register(
    "complete", cmd_complete, usage="complete <id>", help_text="Mark a task as complete"
)
