"""Menu command registry and base command class.

Each main-menu entry is a MenuCommand registered under its menu number.

Example of adding an entry:

    class StatsCommand(MenuCommand):
        '''Show task counts.'''

        def __init__(self):
            super().__init__(key="7", label="Show Statistics")

        def execute(self, app: Any) -> None:
            app.console.print(f"{len(app.store)} tasks")
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from task_tracker.cli.app import TaskTrackerApp


class MenuCommand(ABC):
    """Base class for main-menu entries.

    Subclass this and override execute() to implement the entry.
    """

    def __init__(self, key: str, label: str) -> None:
        """Initialize the command.

        Args:
            key: Menu number the user types to select the entry
            label: Text shown in the menu
        """
        self.key = key
        self.label = label

    @abstractmethod
    def execute(self, app: "TaskTrackerApp") -> None:
        """Run the menu entry against the application."""


class CommandRegistry:
    """Registry of menu commands keyed by menu number."""

    def __init__(self) -> None:
        self._commands: dict[str, MenuCommand] = {}

    def register(self, command: MenuCommand) -> None:
        """Register a command under its key, replacing any previous one."""
        self._commands[command.key] = command

    def unregister(self, key: str) -> None:
        self._commands.pop(key, None)

    def get(self, key: str) -> MenuCommand | None:
        """Get a command by menu number."""
        return self._commands.get(key)

    def all_commands(self) -> list[MenuCommand]:
        """All commands ordered by menu number."""
        return sorted(self._commands.values(), key=lambda c: int(c.key))

    def __len__(self) -> int:
        return len(self._commands)
