"""Tests for configuration module."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from task_tracker.config import (
    SettingsContext,
    TrackerSettings,
    get_settings,
    reload_settings,
    set_settings,
)


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


class TestTrackerSettings:
    """Tests for TrackerSettings class."""

    def test_default_values(self, temp_data_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            settings = TrackerSettings(data_dir=temp_data_dir)

        assert settings.app_name == "task_tracker"
        assert settings.snapshot_file == "tasks.json"
        assert settings.export_file == "tasks.csv"
        assert settings.log_level == "warning"
        assert settings.log_format == "console"

    def test_data_dir_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            settings = TrackerSettings()
        assert settings.data_dir == tmp_path

    def test_data_dir_path_expansion(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = TrackerSettings(data_dir="~/tracker_data")
            expected = Path.home() / "tracker_data"

        assert not str(settings.data_dir).startswith("~")
        assert settings.data_dir == expected

    def test_derived_paths(self, temp_data_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            settings = TrackerSettings(data_dir=temp_data_dir, snapshot_file="snap.json")

        assert settings.snapshot_path == temp_data_dir / "snap.json"
        assert settings.export_path == temp_data_dir / "tasks.csv"

    def test_env_override(self, temp_data_dir: Path):
        env = {
            "TASK_TRACKER_DATA_DIR": str(temp_data_dir),
            "TASK_TRACKER_LOG_LEVEL": "debug",
            "TASK_TRACKER_EXPORT_FILE": "mirror.csv",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = TrackerSettings()

        assert settings.data_dir == temp_data_dir
        assert settings.log_level == "debug"
        assert settings.export_path == temp_data_dir / "mirror.csv"

    def test_invalid_log_level_rejected(self, temp_data_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError):
                TrackerSettings(data_dir=temp_data_dir, log_level="loud")

    def test_project_json_config(self, tmp_path: Path, monkeypatch):
        config_dir = tmp_path / ".task_tracker"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text(
            json.dumps({"snapshot_file": "from_json.json", "log_format": "json"})
        )
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {}, clear=True):
            settings = TrackerSettings(data_dir=tmp_path)

        assert settings.snapshot_file == "from_json.json"
        assert settings.log_format == "json"

    def test_env_beats_project_json(self, tmp_path: Path, monkeypatch):
        config_dir = tmp_path / ".task_tracker"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text(json.dumps({"log_level": "info"}))
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {"TASK_TRACKER_LOG_LEVEL": "error"}, clear=True):
            settings = TrackerSettings(data_dir=tmp_path)

        assert settings.log_level == "error"


class TestGlobalSettings:
    """Tests for global settings management."""

    def test_get_settings_creates_default(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        reload_settings()
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()
        assert isinstance(settings, TrackerSettings)
        reload_settings()

    def test_set_settings(self, temp_data_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            custom = TrackerSettings(data_dir=temp_data_dir, app_name="custom_app")

        set_settings(custom)
        try:
            assert get_settings() is custom
        finally:
            reload_settings()

    def test_settings_context(self, mock_context, temp_data_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            isolated = TrackerSettings(data_dir=temp_data_dir)

        with SettingsContext(isolated) as s:
            assert s is isolated
            assert get_settings() is isolated
        assert get_settings() is mock_context.settings


class TestDataDirOperations:
    """Tests for data directory operations."""

    def test_ensure_data_dir_exists(self, temp_data_dir: Path):
        data_dir = temp_data_dir / "nested" / "tracker"
        with patch.dict(os.environ, {}, clear=True):
            settings = TrackerSettings(data_dir=data_dir)

        assert not data_dir.exists()
        settings.ensure_data_dir_exists()
        assert data_dir.is_dir()
