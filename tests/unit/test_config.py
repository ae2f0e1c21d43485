"""Tests for settings."""

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings


class TestSettings:
    """Tests for Settings."""

    def test_env_overrides(self, monkeypatch):
        """Test values come from the environment."""
        monkeypatch.setenv("SCRAPER_API_KEY", "abc123")
        monkeypatch.setenv("SCRAPER_API_DEFAULT_TIMEOUT", "60")
        monkeypatch.setenv("APP_ENV", "production")

        config = Settings()

        assert config.scraper_api_key == "abc123"
        assert config.scraper_api_default_timeout == 60.0
        assert config.app_env == Environment.PRODUCTION
        assert config.app_name == "ScrapeFlow"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SCRAPER_API_URL", raising=False)

        config = Settings(_env_file=None)

        assert config.scraper_api_url == "https://api.scraperapi.com/"
        assert config.scraper_api_default_timeout == 300.0

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(scraper_api_default_timeout=0)
