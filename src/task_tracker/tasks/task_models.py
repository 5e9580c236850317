# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Ids are persisted as unsigned 32-bit values.
MAX_TASK_ID = 2**32 - 1


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    @classmethod
    def new(cls, task_id: int, description: str) -> Task:
        return cls(id=task_id, description=description, completed=False)

    def display(self) -> str:
        status = "[x]" if self.completed else "[ ]"
        return f"{status} {self.description}"

    def mark_completed(self) -> None:
        self.completed = True

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "description": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one persisted JSON object.

        Raises ValueError when a field is missing or has the wrong JSON type.
        Extra keys are ignored.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")

        missing = [k for k in ("id", "description", "completed") if k not in raw]
        if missing:
            raise ValueError(f"task entry is missing field(s): {', '.join(missing)}")

        task_id = raw["id"]
        # bool is a subclass of int; JSON true/false is not a valid id.
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise ValueError(f"task id must be an integer, got {task_id!r}")
        if not 0 <= task_id <= MAX_TASK_ID:
            raise ValueError(f"task id out of range: {task_id}")

        description = raw["description"]
        if not isinstance(description, str):
            raise ValueError(f"task description must be a string, got {description!r}")
        try:
            # json accepts lone surrogate escapes ("\ud800") that are not valid text.
            description.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"task description is not valid UTF-8 text: {description!r}") from e

        completed = raw["completed"]
        if not isinstance(completed, bool):
            raise ValueError(f"task completed flag must be a boolean, got {completed!r}")

        return cls(id=task_id, description=description, completed=completed)
