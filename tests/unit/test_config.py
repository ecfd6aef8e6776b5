"""
Unit tests for application settings.
"""

import pytest

from app.config import DEFAULT_CORS_ORIGINS, Settings


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("DATABASE_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.port == 3000
        assert settings.api_prefix == "/api"
        assert settings.docs_url == "/api-docs"
        assert settings.database_url == "sqlite+aiosqlite:///./tasks.db"
        assert settings.cors_origins == DEFAULT_CORS_ORIGINS

    def test_cors_origins_from_comma_separated_string(self):
        settings = Settings(_env_file=None, cors_origins="https://a.example, https://b.example")

        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_blank_cors_origins_fall_back_to_defaults(self):
        settings = Settings(_env_file=None, cors_origins="  ")

        assert settings.cors_origins == DEFAULT_CORS_ORIGINS

    def test_environment_from_env(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("PORT", "8080")

        settings = Settings(_env_file=None)

        assert settings.is_production
        assert not settings.is_development
        assert settings.port == 8080

    @pytest.mark.parametrize("debug, log_level, expected", [
        (False, None, "INFO"),
        (True, None, "DEBUG"),
        (True, "warning", "WARNING"),
    ])
    def test_effective_log_level(self, debug, log_level, expected):
        settings = Settings(_env_file=None, debug=debug, log_level=log_level)

        assert settings.effective_log_level == expected

    def test_validate_environment_requires_database_url(self):
        settings = Settings(_env_file=None, database_url="")

        with pytest.raises(ValueError) as exc_info:
            settings.validate_environment()

        assert "DATABASE_URL" in str(exc_info.value)

    def test_validate_environment_rejects_in_memory_database(self):
        settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")

        with pytest.raises(ValueError):
            settings.validate_environment()

    def test_empty_database_url_from_env_is_rejected(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "")

        settings = Settings(_env_file=None)

        assert settings.database_url == ""
        with pytest.raises(ValueError) as exc_info:
            settings.validate_environment()
        assert "DATABASE_URL" in str(exc_info.value)
