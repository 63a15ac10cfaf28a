"""Task Tracker - a console task list that persists itself after every change.

The package provides:

- Task model and an ordered in-memory TaskStore with priority and date views
- A persistence gateway writing a JSON snapshot and a CSV export
- Layered settings (environment, JSON config files, .env)
- A menu-driven shell built on rich and prompt_toolkit
"""

from task_tracker.config import (
    SettingsContext,
    TrackerSettings,
    get_settings,
    reload_settings,
    set_settings,
)
from task_tracker.persistence.gateway import PersistenceGateway
from task_tracker.tasks.models import Task
from task_tracker.tasks.store import TaskStore

__version__ = "0.1.0"

__all__ = [
    "PersistenceGateway",
    "SettingsContext",
    "Task",
    "TaskStore",
    "TrackerSettings",
    "get_settings",
    "reload_settings",
    "set_settings",
]
