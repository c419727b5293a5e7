"""Tests for environment-driven settings."""

from config.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ALERT_LIMIT", raising=False)
        s = Settings(_env_file=None)
        assert s.alert_limit == 5
        assert s.recommendation_limit == 4
        assert s.top_sub_region_limit == 12
        assert s.trend_window == 6
        assert s.strict_parsing is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ALERT_LIMIT", "3")
        monkeypatch.setenv("STRICT_PARSING", "true")
        s = Settings(_env_file=None)
        assert s.alert_limit == 3
        assert s.strict_parsing is True
