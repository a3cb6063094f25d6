"""Tests for the typed AppConfig dataclass."""

from trakt_actions.config import CONFIG, AppConfig, TraktConfig


class TestTraktConfig:
    def test_defaults(self):
        c = TraktConfig()
        assert c.api_base == "https://api.trakt.tv"
        assert c.api_key == ""
        assert c.timeout == 15.0

    def test_custom(self):
        c = TraktConfig(username="jdoe", timeout=5)
        assert c.username == "jdoe"
        assert c.timeout == 5


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert c.port == 3000
        assert c.episode_number_format == "default"
        assert isinstance(c.trakt, TraktConfig)

    def test_from_env(self):
        c = AppConfig.from_env()
        assert c.port == CONFIG["port"]
        assert c.trakt.api_base == CONFIG["trakt_api_base"]
        assert c.episode_number_format in ("default", "padded", "english")

    def test_from_env_returns_fresh_instances(self):
        assert AppConfig.from_env().trakt is not AppConfig.from_env().trakt
