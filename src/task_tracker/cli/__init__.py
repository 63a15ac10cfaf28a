"""Interactive shell for the task tracker."""

from task_tracker.cli.app import TaskTrackerApp
from task_tracker.cli.commands import CommandRegistry, MenuCommand

__all__ = ["TaskTrackerApp", "CommandRegistry", "MenuCommand"]
