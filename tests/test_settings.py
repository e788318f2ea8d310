"""Tests for settings loading."""

import pytest

from ghrelease.config import DEFAULT_API_URL, Settings, get_settings
from ghrelease.errors import ConfigurationError


class TestSettings:

    def test_defaults(self):
        settings = get_settings()
        assert settings.api_url == DEFAULT_API_URL
        assert settings.timeout == 30
        assert settings.batch_size == 10
        assert settings.batch_delay == 0.1
        assert settings.github_access_token is None

    def test_credentials_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACCESS_TOKEN", "secret")
        monkeypatch.setenv("GITHUB_USERNAME", "octocat")
        settings = get_settings()
        assert settings.github_access_token == "secret"
        assert settings.github_username == "octocat"
        settings.require_credentials()

    def test_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("GHRELEASE_BATCH_SIZE", "5")
        monkeypatch.setenv("GHRELEASE_API_URL", "https://github.example.com/api/v3")
        settings = get_settings()
        assert settings.batch_size == 5
        assert settings.api_url == "https://github.example.com/api/v3/"

    def test_overrides_win_and_none_is_ignored(self, monkeypatch):
        monkeypatch.setenv("GITHUB_USERNAME", "from-env")
        settings = get_settings(github_username="explicit", github_access_token=None)
        assert settings.github_username == "explicit"
        assert settings.github_access_token is None

    @pytest.mark.parametrize("url, expected", [
        ("api.github.com", "https://api.github.com/"),
        ("http://localhost:8080", "http://localhost:8080/"),
        ("https://api.github.com/", "https://api.github.com/"),
    ])
    def test_api_url_normalized(self, url, expected):
        assert Settings(api_url=url).api_url == expected

    @pytest.mark.parametrize("credentials", [
        {},
        {"github_access_token": "", "github_username": "octocat"},
        {"github_access_token": "token"},
    ])
    def test_require_credentials(self, credentials):
        with pytest.raises(ConfigurationError, match="GitHub credentials required"):
            Settings(**credentials).require_credentials()
