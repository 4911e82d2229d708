"""
Unit tests for logging setup.

Tests cover:
- Application logger level taken from settings
- SQLAlchemy statement logging off by default and on with log_sql
"""

import logging

import pytest

from mybudget.config.logging_config import QUIET_LOGGERS, setup_logging
from mybudget.config.settings import Settings, set_settings


@pytest.fixture(autouse=True)
def restore_levels():
    names = ("mybudget",) + QUIET_LOGGERS
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_app_logger_follows_configured_level(self):
        set_settings(Settings(_env_file=None, log_level="debug"))

        setup_logging()

        assert logging.getLogger("mybudget").level == logging.DEBUG

    def test_library_loggers_are_quiet(self):
        """
        GIVEN the default settings
        WHEN logging is set up
        THEN SQL, pool and HTTP client records below WARNING are dropped
        """
        set_settings(Settings(_env_file=None, log_level="INFO", log_sql=False))

        setup_logging()

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_quiet_loggers_never_go_below_app_level(self):
        set_settings(Settings(_env_file=None, log_level="ERROR"))

        setup_logging()

        assert logging.getLogger("sqlalchemy.pool").level == logging.ERROR

    def test_log_sql_enables_statement_logging(self):
        set_settings(Settings(_env_file=None, log_sql=True))

        setup_logging()

        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
