"""Tests for Application Settings."""

import pytest
from pydantic import ValidationError

from pokedex.core.config import Settings


@pytest.fixture()
def clean_env(monkeypatch):
    """Remove settings overrides that the test environment may carry"""
    for key in ("HOST", "PORT", "POKEAPI_BASE_URL", "TRANSLATION_API_BASE_URL",
                "HTTP_TIMEOUT_SECS", "REQUEST_TIMEOUT_SECS", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSettings:
    """Test suite for Settings"""

    def test_defaults(self, clean_env):
        """Test the default configuration"""
        settings = Settings(_env_file=None)

        assert settings.HOST == "0.0.0.0"
        assert settings.PORT == 5000
        assert settings.POKEAPI_BASE_URL == "https://pokeapi.co/api/v2"
        assert settings.TRANSLATION_API_BASE_URL == "https://api.funtranslations.com/translate"
        assert settings.HTTP_TIMEOUT_SECS == 10.0
        assert settings.REQUEST_TIMEOUT_SECS == 30.0
        assert settings.LOG_LEVEL == "INFO"
        assert settings.TRACING_ENABLED is False

    def test_environment_overrides(self, clean_env):
        """Test settings are read from environment variables"""
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("POKEAPI_BASE_URL", "http://localhost:9000/api/v2")
        clean_env.setenv("HTTP_TIMEOUT_SECS", "2.5")

        settings = Settings(_env_file=None)

        assert settings.PORT == 8080
        assert settings.POKEAPI_BASE_URL == "http://localhost:9000/api/v2"
        assert settings.HTTP_TIMEOUT_SECS == 2.5

    def test_trailing_slash_is_stripped(self, clean_env):
        """Test base URLs are stored without a trailing slash"""
        clean_env.setenv("TRANSLATION_API_BASE_URL", "http://localhost:9001/translate/")

        settings = Settings(_env_file=None)

        assert settings.TRANSLATION_API_BASE_URL == "http://localhost:9001/translate"

    def test_log_level_is_upper_cased(self, clean_env):
        """Test LOG_LEVEL accepts any case"""
        clean_env.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("key,value", [
        ("PORT", "0"),
        ("PORT", "70000"),
        ("PORT", "not-a-port"),
        ("HTTP_TIMEOUT_SECS", "0"),
        ("REQUEST_TIMEOUT_SECS", "-1"),
        ("LOG_LEVEL", "VERBOSE"),
    ])
    def test_invalid_values_are_rejected(self, clean_env, key, value):
        """Test invalid configuration fails at startup"""
        clean_env.setenv(key, value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_user_agent(self, clean_env):
        """Test the outbound User-Agent names the service and version"""
        assert Settings(_env_file=None).user_agent == "pokedex-api/1.0.0"
