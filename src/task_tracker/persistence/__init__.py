"""Persistence module for the task tracker."""

from task_tracker.persistence.gateway import PersistenceGateway, SnapshotFormatError

__all__ = [
    "PersistenceGateway",
    "SnapshotFormatError",
]
