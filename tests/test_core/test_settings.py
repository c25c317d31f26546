"""Tests for settings management."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from n8nforge.core.settings import ForgeSettings, SettingsManager, load_settings


@pytest.fixture
def settings_manager(tmp_path: Path) -> SettingsManager:
    """Create a SettingsManager with temporary directory."""
    return SettingsManager(settings_path=tmp_path / ".n8nforge" / "settings.json")


def write_settings(manager: SettingsManager, data: dict) -> None:
    manager.settings_path.parent.mkdir(parents=True, exist_ok=True)
    manager.settings_path.write_text(json.dumps(data))


class TestForgeSettings:
    """Default locations and derived paths."""

    def test_defaults(self, tmp_path):
        settings = ForgeSettings(project_root=tmp_path)

        assert settings.retrieval_timeout == 120.0
        assert settings.interpreter == tmp_path / "venv" / "bin" / "python"
        assert settings.retrieval_script_path == tmp_path / "rag_client_wrapper.py"
        assert settings.background_path == tmp_path / "CLAUDE.md"

    def test_explicit_interpreter_wins(self, tmp_path):
        settings = ForgeSettings(project_root=tmp_path, python_executable=Path("/usr/bin/python3"))

        assert settings.interpreter == Path("/usr/bin/python3")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError, match="retrieval_timeout"):
            ForgeSettings(retrieval_timeout=0)


class TestSettingsFile:
    """Loading from the settings file."""

    def test_missing_file_returns_defaults(self, settings_manager):
        settings = settings_manager.load()

        assert settings.retrieval_script == "rag_client_wrapper.py"

    def test_loads_values_from_file(self, settings_manager, tmp_path):
        write_settings(settings_manager, {"project_root": str(tmp_path), "retrieval_timeout": 30})

        settings = settings_manager.load()

        assert settings.project_root == tmp_path
        assert settings.retrieval_timeout == 30.0

    def test_corrupt_file_falls_back_to_defaults(self, settings_manager, caplog):
        settings_manager.settings_path.parent.mkdir(parents=True)
        settings_manager.settings_path.write_text("{not json")

        settings = settings_manager.load()

        assert settings.retrieval_timeout == 120.0
        assert "Failed to load settings" in caplog.text

    def test_reload_reads_file_again(self, settings_manager):
        write_settings(settings_manager, {"retrieval_timeout": 10})
        assert settings_manager.load().retrieval_timeout == 10.0

        write_settings(settings_manager, {"retrieval_timeout": 20})
        assert settings_manager.load().retrieval_timeout == 10.0
        assert settings_manager.reload().retrieval_timeout == 20.0


class TestEnvOverrides:
    """Environment variables take precedence over the file."""

    def test_project_root_and_python(self, settings_manager, monkeypatch, tmp_path):
        monkeypatch.setenv("N8NFORGE_PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("N8NFORGE_PYTHON", "/opt/python/bin/python")

        settings = settings_manager.load()

        assert settings.project_root == tmp_path
        assert settings.interpreter == Path("/opt/python/bin/python")

    def test_timeout_override(self, settings_manager, monkeypatch):
        write_settings(settings_manager, {"retrieval_timeout": 30})
        monkeypatch.setenv("N8NFORGE_RETRIEVAL_TIMEOUT", "5")

        assert settings_manager.load().retrieval_timeout == 5.0

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_timeout_override_is_ignored(self, settings_manager, monkeypatch, caplog, value):
        monkeypatch.setenv("N8NFORGE_RETRIEVAL_TIMEOUT", value)

        assert settings_manager.load().retrieval_timeout == 120.0
        assert "Invalid N8NFORGE_RETRIEVAL_TIMEOUT" in caplog.text

    def test_load_settings_uses_default_manager(self, monkeypatch, tmp_path):
        monkeypatch.setenv("N8NFORGE_PROJECT_ROOT", str(tmp_path))

        assert load_settings().project_root == tmp_path
