"""Tests for logging setup."""

import logging

from config.logging_config import QUIET_LOGGERS, get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_quiets_server_loggers(self):
        setup_logging()
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_accepts_level_override(self):
        setup_logging("debug")
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_get_logger(self):
        assert get_logger("engine.ratios").name == "engine.ratios"
