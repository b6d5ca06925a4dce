"""Tests for shared/logging_config.py."""

import logging

from shared.logging_config import configure_logging


class TestConfigureLogging:
    def teardown_method(self):
        configure_logging("INFO")

    def test_sets_root_level(self):
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_http_client_loggers(self):
        configure_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
