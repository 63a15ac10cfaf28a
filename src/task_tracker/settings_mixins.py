"""Settings mixins for application identity and CLI configuration.

AppSettingsMixin: Application identity and disk layout (app_name, data dir, file paths).
CLISettingsMixin: Logging settings for the interactive shell.

These live outside cli/ so that config.py can compose TrackerSettings
without importing the cli package.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator


class AppSettingsMixin:
    """Settings for application identity and disk layout.

    Mixin class that provides:
    - Application name and data directory
    - Snapshot and export file names
    - Path expansion for data_dir
    - Derived path properties

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="task_tracker",
        title="App Name",
        description="Application name, also used for config directories",
    )

    data_dir: Path = Field(
        default_factory=Path.cwd,
        title="Data Directory",
        description="Directory holding the task snapshot and export",
    )
    snapshot_file: str = Field(
        default="tasks.json",
        title="Snapshot File",
        description="File name of the primary snapshot reloaded at startup",
    )
    export_file: str = Field(
        default="tasks.csv",
        title="Export File",
        description="File name of the write-only CSV export",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    def ensure_data_dir_exists(self) -> None:
        """Create data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def snapshot_path(self) -> Path:
        """Path of the primary snapshot."""
        return self.data_dir / self.snapshot_file

    @property
    def export_path(self) -> Path:
        """Path of the CSV export."""
        return self.data_dir / self.export_file


class CLISettingsMixin:
    """Settings for CLI configuration.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )
