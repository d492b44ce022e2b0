"""Unit tests for settings loading and the GitHub session handle."""

from component_updates.core.config import _load_config
from component_updates.github.auth import GitHubContext


class TestLoadConfig:
    def test_defaults(self, monkeypatch):
        for name in ("GITHUB_API_HOST", "GITHUB_TOKEN", "HELPER_USER_AGENT", "HTTP_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        cfg = _load_config()
        assert cfg.github_api_host == "api.github.com"
        assert cfg.github_token == ""
        assert cfg.user_agent == "ComponentUpdateHelper/0.1"
        assert cfg.http_timeout == 30.0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GITHUB_API_HOST", "ghe.example.com")
        monkeypatch.setenv("HTTP_TIMEOUT", "5")
        cfg = _load_config()
        assert cfg.github_api_host == "ghe.example.com"
        assert cfg.http_timeout == 5.0


class TestGitHubContext:
    def test_token_header(self):
        assert GitHubContext(token="abc").as_headers() == {"Authorization": "Bearer abc"}

    def test_anonymous(self):
        assert GitHubContext().as_headers() == {}
