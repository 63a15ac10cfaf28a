"""Entry point for the task-tracker console script."""

from task_tracker.cli.app import TaskTrackerApp
from task_tracker.config import TrackerSettings, get_settings, set_settings
from task_tracker.logging import Loggers, bind_context, configure_logging
from task_tracker.persistence.gateway import PersistenceGateway
from task_tracker.tasks.store import TaskStore

logger = Loggers.config()


def build_app(settings: TrackerSettings) -> TaskTrackerApp:
    """Wire gateway, store and shell for the given settings."""
    settings.ensure_data_dir_exists()
    gateway = PersistenceGateway.from_settings(settings)
    store = TaskStore(gateway)
    return TaskTrackerApp(store)


def main(settings: TrackerSettings | None = None) -> None:
    if settings is None:
        settings = get_settings()
    else:
        set_settings(settings)
    configure_logging(settings)
    bind_context(data_dir=str(settings.data_dir))
    logger.debug(
        "settings_loaded",
        snapshot=settings.snapshot_file,
        export=settings.export_file,
    )
    build_app(settings).run()


if __name__ == "__main__":
    main()
