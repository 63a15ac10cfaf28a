"""Task record for the tracker."""

from dataclasses import dataclass
from datetime import date
from typing import Any

from task_tracker.constants import priority_label


@dataclass
class Task:
    """A single unit of work.

    Only ``completed`` ever changes after construction, and only from
    False to True through mark_completed().
    """

    title: str
    description: str
    priority: int  # 1 (High) to 3 (Low)
    due_date: date
    completed: bool = False

    def mark_completed(self) -> None:
        self.completed = True

    @property
    def priority_label(self) -> str:
        return priority_label(self.priority)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "priority": self.priority,
            "due_date": self.due_date.isoformat(),
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build a task from its snapshot form.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If the due date is not an ISO date.
            TypeError: If a field has the wrong type.
        """
        priority = data["priority"]
        completed = data.get("completed", False)
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise TypeError(f"priority must be an integer, got {priority!r}")
        if not isinstance(completed, bool):
            raise TypeError(f"completed must be a boolean, got {completed!r}")
        return cls(
            title=str(data["title"]),
            description=str(data["description"]),
            priority=priority,
            due_date=date.fromisoformat(data["due_date"]),
            completed=completed,
        )

    def to_export_line(self) -> str:
        """Render as an unquoted ``description,priority,YYYY-MM-DD,true|false`` line."""
        return ",".join(
            [
                self.description,
                str(self.priority),
                self.due_date.isoformat(),
                "true" if self.completed else "false",
            ]
        )
