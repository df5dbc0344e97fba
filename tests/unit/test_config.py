"""Tests for runtime settings."""

from cnis_analyzer.shared.config import DEFAULT_API_BASE_URL, Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CNIS_API_BASE_URL", raising=False)
        monkeypatch.delenv("CNIS_REQUEST_TIMEOUT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.request_timeout is None
        assert settings.analyze_url == DEFAULT_API_BASE_URL + "/analyze"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CNIS_API_BASE_URL", "http://localhost:8080/api/")
        monkeypatch.setenv("CNIS_REQUEST_TIMEOUT", "30")
        settings = Settings(_env_file=None)
        assert settings.analyze_url == "http://localhost:8080/api/analyze"
        assert settings.request_timeout == 30.0

    def test_explicit_value(self):
        settings = Settings(api_base_url="https://example.test", _env_file=None)
        assert settings.analyze_url == "https://example.test/analyze"

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
