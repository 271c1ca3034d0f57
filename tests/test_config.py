"""Tests for Config and logging setup."""

import logging

from curem.config import Config
from curem.utils import logging_utils


class TestConfig:
    def test_defaults_are_valid(self, monkeypatch):
        monkeypatch.setattr(Config, "APP_ENV", "development")
        assert Config.validate() == []

    def test_invalid_slug_attempts(self, monkeypatch):
        monkeypatch.setattr(Config, "SLUG_MAX_ATTEMPTS", 0)
        assert "SLUG_MAX_ATTEMPTS (must be >= 1)" in Config.validate()

    def test_production_requires_mongo_uri(self, monkeypatch):
        monkeypatch.setattr(Config, "APP_ENV", "production")
        monkeypatch.delenv("MONGO_URI", raising=False)
        assert Config.is_production()
        assert "MONGO_URI (production)" in Config.validate()

    def test_log_level(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "debug")
        assert Config.get_log_level() == logging.DEBUG
        monkeypatch.setattr(Config, "LOG_LEVEL", "nonsense")
        assert Config.get_log_level() == logging.INFO

    def test_summary_has_no_uri(self):
        assert "MONGO_URI" not in str(Config.summary())


class TestLogging:
    def test_get_logger_is_cached(self):
        assert logging_utils.get_logger("curem.test") is logging_utils.get_logger("curem.test")

    def test_configure_installs_single_handler(self, monkeypatch):
        monkeypatch.setattr(Config, "APP_ENV", "production")
        logging_utils.configure_logging(force=True)
        logging_utils.configure_logging(force=True)

        ours = [h for h in logging.getLogger().handlers if getattr(h, "_curem", False)]
        assert len(ours) == 1
        assert not hasattr(ours[0].formatter, "log_colors")
