import sys
from pathlib import Path

import pytest

# Ensure `src/` is on sys.path for tests when the package is not installed editable.
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def settings_env(monkeypatch):
    """Apply env overrides and return fresh (uncached) settings."""
    from collections_showcase import config as config_module

    def _apply(**env):
        for key, value in env.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, str(value))
        config_module.get_settings.cache_clear()
        return config_module.get_settings()

    yield _apply
    config_module.get_settings.cache_clear()
