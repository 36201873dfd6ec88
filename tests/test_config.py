# ABOUTME: Contract tests for environment-driven service settings.
# ABOUTME: Validates defaults, env overrides, and rejection of invalid values.

import pydantic
import pytest

from src.config import Settings, load_settings
from src.engine import DEFAULT_LOCATION

_ENV_VARS = ("HOST", "PORT", "WEATHER_LOCATION", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, clean_env):
        """load_settings falls back to model defaults when nothing is set.

        Implementation: Clears all settings env vars before loading.
        Passing implies: The service starts on port 3000 with the default location tag.
        """
        settings = load_settings()
        assert settings.port == 3000
        assert settings.host == "127.0.0.1"
        assert settings.location == DEFAULT_LOCATION

    def test_env_overrides(self, clean_env):
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("WEATHER_LOCATION", "Roof Station")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = load_settings()
        assert settings.port == 8080
        assert settings.location == "Roof Station"
        assert settings.log_level == "debug"

    def test_invalid_port_rejected(self, clean_env):
        """A non-numeric PORT fails at startup rather than at first request."""
        clean_env.setenv("PORT", "not-a-port")
        with pytest.raises(pydantic.ValidationError):
            load_settings()


class TestSettings:
    def test_port_range(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(port=70000)
