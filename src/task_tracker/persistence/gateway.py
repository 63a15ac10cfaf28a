"""Dual-format persistence for the task collection.

The collection is always written whole:

    {data_dir}/
    ├── tasks.json   primary snapshot, reloaded at startup
    └── tasks.csv    write-only export for manual inspection

Nothing here raises on I/O trouble. A failed load yields an empty
collection and a failed save is reported through the return value and
the log.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from task_tracker.constants import EXPORT_HEADER, SNAPSHOT_VERSION
from task_tracker.logging import Loggers
from task_tracker.persistence._utils import atomic_write_json, atomic_write_text
from task_tracker.tasks.models import Task

if TYPE_CHECKING:
    from task_tracker.config import TrackerSettings

logger = Loggers.persistence()


class SnapshotFormatError(ValueError):
    """Raised when a snapshot document does not have the expected shape."""


class PersistenceGateway:
    """Loads and saves the task collection.

    Example:
        >>> gateway = PersistenceGateway.from_settings(settings)
        >>> tasks = gateway.load()
        >>> gateway.save(tasks)
    """

    def __init__(self, snapshot_path: Path, export_path: Path) -> None:
        self.snapshot_path = snapshot_path
        self.export_path = export_path

    @classmethod
    def from_settings(cls, settings: "TrackerSettings") -> "PersistenceGateway":
        return cls(settings.snapshot_path, settings.export_path)

    def load(self) -> list[Task]:
        """Load the collection from the primary snapshot.

        A missing snapshot is the normal first-run state. A snapshot that
        cannot be read or decoded is logged and discarded; the file itself
        is left in place until the next save overwrites it.

        Returns:
            The stored tasks in their saved order, or an empty list.
        """
        if not self.snapshot_path.exists():
            logger.debug("snapshot_missing", path=str(self.snapshot_path))
            return []

        try:
            raw = self.snapshot_path.read_text(encoding="utf-8")
            tasks = _decode_snapshot(json.loads(raw))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "snapshot_read_failed", path=str(self.snapshot_path), error=str(e)
            )
            return []
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            # json.JSONDecodeError and SnapshotFormatError are ValueErrors;
            # deeply nested documents exhaust the decoder stack
            logger.error(
                "snapshot_decode_failed", path=str(self.snapshot_path), error=str(e)
            )
            return []

        logger.info("snapshot_loaded", path=str(self.snapshot_path), count=len(tasks))
        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        """Rewrite the snapshot and then the export.

        The two writes are independent: a failure in one is logged and the
        other is still attempted.

        Returns:
            True if both files were written.
        """
        tasks = list(tasks)
        snapshot_ok = self._save_snapshot(tasks)
        export_ok = self._save_export(tasks)
        return snapshot_ok and export_ok

    def _save_snapshot(self, tasks: list[Task]) -> bool:
        document = {
            "version": SNAPSHOT_VERSION,
            "saved_at": datetime.now().isoformat(),
            "tasks": [task.to_dict() for task in tasks],
        }
        try:
            atomic_write_json(self.snapshot_path, document)
        except OSError as e:
            logger.error(
                "snapshot_save_failed", path=str(self.snapshot_path), error=str(e)
            )
            return False
        logger.debug("snapshot_saved", path=str(self.snapshot_path), count=len(tasks))
        return True

    def _save_export(self, tasks: list[Task]) -> bool:
        lines = [EXPORT_HEADER, *(task.to_export_line() for task in tasks)]
        try:
            atomic_write_text(self.export_path, "\n".join(lines) + "\n")
        except OSError as e:
            logger.error("export_save_failed", path=str(self.export_path), error=str(e))
            return False
        logger.debug("export_saved", path=str(self.export_path), count=len(tasks))
        return True


def _decode_snapshot(document: object) -> list[Task]:
    if not isinstance(document, dict):
        raise SnapshotFormatError("snapshot must be a JSON object")
    version = document.get("version")
    if version != SNAPSHOT_VERSION:
        raise SnapshotFormatError(f"unsupported snapshot version: {version!r}")
    items = document.get("tasks")
    if not isinstance(items, list):
        raise SnapshotFormatError("snapshot 'tasks' must be a list")
    return [Task.from_dict(item) for item in items]
