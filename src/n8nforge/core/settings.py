"""Settings management for n8nforge with environment variable override support."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class ForgeSettings(BaseModel):
    """Locations of the retrieval process and example documents.

    Every relative location is resolved against ``project_root``, the
    directory that holds the retrieval wrapper script, the example workflow
    folders and the background document.
    """

    project_root: Path = Field(default_factory=Path.cwd)
    python_executable: Optional[Path] = Field(
        default=None,
        description="Interpreter for the retrieval script. Defaults to <project_root>/venv/bin/python.",
    )
    retrieval_script: str = Field(default="rag_client_wrapper.py")
    retrieval_timeout: float = Field(default=120.0, description="Seconds before a retrieval call is abandoned")
    microservice_examples_dir: str = Field(default="DemoVideoCreation")
    task_manager_examples_dir: str = Field(default="TaskManager")
    background_document: str = Field(default="CLAUDE.md")

    @field_validator("retrieval_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError(f"Invalid retrieval_timeout: {v}. Must be greater than 0")
        return v

    @property
    def interpreter(self) -> Path:
        if self.python_executable is not None:
            return self.python_executable
        return self.project_root / "venv" / "bin" / "python"

    @property
    def retrieval_script_path(self) -> Path:
        return self.project_root / self.retrieval_script

    @property
    def background_path(self) -> Path:
        return self.project_root / self.background_document


class SettingsManager:
    """Manages n8nforge settings with environment variable override support."""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = settings_path or Path.home() / ".n8nforge" / "settings.json"
        self._settings: Optional[ForgeSettings] = None

    def load(self) -> ForgeSettings:
        """Load settings with environment variable overrides."""
        if self._settings is None:
            self._settings = self._load_from_file()
        settings = self._settings
        # Always (re)apply env overrides to handle toggling without restart
        self._apply_env_overrides(settings)
        return settings

    def reload(self) -> ForgeSettings:
        """Force reload settings from file."""
        self._settings = None
        return self.load()

    def _load_from_file(self) -> ForgeSettings:
        """Load settings from file or return defaults."""
        if self.settings_path.exists():
            try:
                with open(self.settings_path) as f:
                    data = json.load(f)
                return ForgeSettings(**data)
            except Exception as e:
                # If file is corrupted, use defaults
                logger.warning(f"Failed to load settings from {self.settings_path} ({e}); using defaults")
        return ForgeSettings()

    def _apply_env_overrides(self, settings: ForgeSettings) -> None:
        """Apply environment variable overrides."""
        env_root = os.getenv("N8NFORGE_PROJECT_ROOT")
        if env_root:
            settings.project_root = Path(env_root).expanduser()

        env_python = os.getenv("N8NFORGE_PYTHON")
        if env_python:
            settings.python_executable = Path(env_python).expanduser()

        env_timeout = os.getenv("N8NFORGE_RETRIEVAL_TIMEOUT")
        if env_timeout is not None:
            try:
                timeout = float(env_timeout)
            except ValueError:
                timeout = 0.0
            if timeout > 0:
                settings.retrieval_timeout = timeout
            else:
                logger.warning(
                    f"Invalid N8NFORGE_RETRIEVAL_TIMEOUT: {env_timeout}. Using default: {settings.retrieval_timeout}"
                )


def load_settings() -> ForgeSettings:
    """Load settings from the default location with env overrides applied."""
    return SettingsManager().load()
