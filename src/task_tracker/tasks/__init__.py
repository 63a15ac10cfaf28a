"""Task model and in-memory store.

Example:
    >>> store = TaskStore(gateway)
    >>> store.add(Task("Report", "Q3 numbers", 1, date(2025, 11, 25)))
    >>> store.sorted_view("priority")
"""

from task_tracker.tasks.models import Task
from task_tracker.tasks.store import TaskStore

__all__ = ["Task", "TaskStore"]
