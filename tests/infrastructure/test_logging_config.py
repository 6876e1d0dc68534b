"""Tests for CLI logging setup."""

import logging

from storefront.infrastructure.logging_config import (
    LOG_LEVEL_ENV,
    ClickEchoHandler,
    configure_logging,
    resolve_level,
)


class TestResolveLevel:

    def test_verbose_wins(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert resolve_level(verbose=True) == logging.DEBUG

    def test_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert resolve_level() == logging.INFO

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert resolve_level() == logging.WARNING


class TestConfigureLogging:

    def test_installs_single_handler(self):
        configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)
        logger = logging.getLogger("storefront")
        assert logger.level == logging.DEBUG
        assert sum(isinstance(h, ClickEchoHandler) for h in logger.handlers) == 1
