"""Logging configuration."""

import logging
import sys

from mybudget.config.settings import get_settings

# Chatty at INFO: SQL statements, pool checkouts, test-client requests
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "httpx")


def setup_logging() -> None:
    """Send records to stdout with the configured level and format."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper())

    logging.basicConfig(
        level=level,
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("mybudget").setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    if settings.log_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
