"""Shared test fixtures and utilities for task-tracker tests.

Provides:
- MockContext for isolating tests from global state
- Temporary data directory fixtures
- Gateway, store and task factory fixtures
"""

import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Callable, Generator

import pytest

from task_tracker.config import (
    TrackerSettings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from task_tracker.persistence.gateway import PersistenceGateway
from task_tracker.tasks.models import Task
from task_tracker.tasks.store import TaskStore


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Resetting global settings singleton
    - Providing a temporary data directory
    - Hiding TASK_TRACKER_* environment variables

    Usage:
        with MockContext() as ctx:
            settings = ctx.settings
            data_dir = ctx.data_dir
    """

    def __init__(self, **settings_kwargs) -> None:
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: TrackerSettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()
        data_dir = Path(self._temp_dir.name)

        for var in [v for v in os.environ if v.startswith("TASK_TRACKER_")]:
            self._original_env[var] = os.environ.pop(var)

        self._settings = TrackerSettings(data_dir=data_dir, **self._settings_kwargs)
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)
        os.environ.update(self._original_env)
        reload_settings()
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> TrackerSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def data_dir(self) -> Path:
        if self._temp_dir is None:
            raise RuntimeError("MockContext not entered")
        return Path(self._temp_dir.name)


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def gateway(mock_context: MockContext) -> PersistenceGateway:
    """Gateway writing into the temporary data directory."""
    return PersistenceGateway.from_settings(mock_context.settings)


@pytest.fixture
def store(gateway: PersistenceGateway) -> TaskStore:
    """Empty store backed by a real gateway."""
    return TaskStore(gateway)


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Factory for tasks with sensible defaults."""

    def _make(
        description: str = "Write report",
        priority: int = 2,
        due_date: date = date(2025, 11, 25),
        completed: bool = False,
        title: str = "Task",
    ) -> Task:
        return Task(
            title=title,
            description=description,
            priority=priority,
            due_date=due_date,
            completed=completed,
        )

    return _make
