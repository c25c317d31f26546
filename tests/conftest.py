"""Root-level test configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path_factory, monkeypatch):
    """Keep tests away from the user's settings file and environment.

    Every SettingsManager created without an explicit path reads a settings
    file in a temporary directory, and N8NFORGE_* overrides are cleared.
    """
    from n8nforge.core.settings import SettingsManager

    test_settings_path = tmp_path_factory.mktemp("n8nforge_home") / "settings.json"
    original_init = SettingsManager.__init__

    def patched_settings_init(self, *args, **kwargs):
        if "settings_path" not in kwargs and (len(args) < 1 or args[0] is None):
            kwargs["settings_path"] = test_settings_path
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(SettingsManager, "__init__", patched_settings_init)
    for name in ("N8NFORGE_PROJECT_ROOT", "N8NFORGE_PYTHON", "N8NFORGE_RETRIEVAL_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    """Retries inside flows must not sleep during tests."""
    from n8nforge.mcp_server.services import GeneratorService, RagService

    monkeypatch.setattr(RagService, "retry_wait", 0)
    monkeypatch.setattr(GeneratorService, "retry_wait", 0)
