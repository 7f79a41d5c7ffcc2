"""
structlog setup for applications embedding the client
"""
from __future__ import annotations

import logging
from typing import Optional

import structlog

from .config import LoggingSettings


def configure_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Configure structlog on top of the stdlib logging module.

    Missing arguments are read from :class:`~shipi18n.config.LoggingSettings`.
    """
    if level is None or json_logs is None:
        settings = LoggingSettings()
        level = level or settings.log_level
        json_logs = settings.json_logs if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s")
    logging.getLogger().setLevel(level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging"]
