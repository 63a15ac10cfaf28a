"""In-memory task store with save-after-every-mutation persistence.

Tasks are addressed by their 1-based position in the list, the same
number the shell shows next to each task.
"""

from typing import TYPE_CHECKING

from task_tracker.constants import SORT_BY_DATE, SORT_BY_PRIORITY
from task_tracker.logging import Loggers
from task_tracker.tasks.models import Task

if TYPE_CHECKING:
    from task_tracker.persistence.gateway import PersistenceGateway

logger = Loggers.store()


class TaskStore:
    """Ordered task collection backed by a PersistenceGateway.

    The collection is loaded once on construction and written in full
    after each successful add, mark_completed, and delete.

    Example:
        >>> store = TaskStore(PersistenceGateway.from_settings(settings))
        >>> store.add(Task("Report", "Q3 numbers", 1, date(2025, 11, 25)))
        >>> store.mark_completed(1)
        True
        >>> store.sorted_view("date")
    """

    def __init__(self, gateway: "PersistenceGateway") -> None:
        self._gateway = gateway
        self._tasks: list[Task] = gateway.load()

    def __len__(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        """Check if the store has any tasks."""
        return not self._tasks

    def save(self) -> bool:
        """Write the whole collection through the gateway."""
        return self._gateway.save(self._tasks)

    def add(self, task: Task) -> None:
        """Append a task to the end of the list and persist."""
        self._tasks.append(task)
        logger.debug("task_added", position=len(self._tasks))
        self.save()

    def list_tasks(self) -> list[Task]:
        """Return the tasks in insertion order.

        The returned list is a copy; reordering it does not affect the store.
        """
        return list(self._tasks)

    def get(self, index: int) -> Task | None:
        """Get a task by its 1-based number."""
        if not self._valid_index(index):
            return None
        return self._tasks[index - 1]

    def mark_completed(self, index: int) -> bool:
        """Mark the task at 1-based ``index`` as completed.

        Returns:
            True if marked and saved, False if the number is out of range.
        """
        if not self._valid_index(index):
            logger.warning("invalid_task_number", index=index, size=len(self._tasks))
            return False
        self._tasks[index - 1].mark_completed()
        self.save()
        return True

    def delete(self, index: int) -> bool:
        """Remove the task at 1-based ``index``; later tasks move up by one.

        Returns:
            True if deleted and saved, False if the number is out of range.
        """
        if not self._valid_index(index):
            logger.warning("invalid_task_number", index=index, size=len(self._tasks))
            return False
        del self._tasks[index - 1]
        self.save()
        return True

    def sorted_view(self, key: str) -> list[Task]:
        """Return a freshly ordered copy of the tasks.

        Args:
            key: "priority" (1 first) or "date" (earliest first), case
                insensitive. Ties put incomplete tasks before completed ones
                and otherwise keep insertion order. Any other key returns
                the tasks in insertion order.
        """
        key = key.lower()
        if key == SORT_BY_PRIORITY:
            return sorted(self._tasks, key=lambda t: (t.priority, t.completed))
        if key == SORT_BY_DATE:
            return sorted(self._tasks, key=lambda t: (t.due_date, t.completed))
        return self.list_tasks()

    def _valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self._tasks)
