"""Logging setup."""

import logging

import structlog


def configure_logging(level: int = logging.INFO) -> None:
    """Configure structlog to render events to the console."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
