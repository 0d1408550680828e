"""
Logging Setup - RFP Evaluation Scoring Engine
rfp_scoring/core/logging.py

Configures structlog on top of stdlib logging so scoring modules can emit
event-style records (logger.info("consensus_scored", total_score=...)).
"""

import logging
import sys
from typing import Optional

import structlog

from rfp_scoring.config import Settings, get_settings


def configure_logging(app_settings: Optional[Settings] = None) -> None:
    """
    Configure structlog + stdlib logging from settings.

    LOG_FORMAT="json" renders one JSON object per line; "console" renders
    a human-readable, coloured line for local development.
    """
    app_settings = app_settings or get_settings()
    level = getattr(logging, app_settings.LOG_LEVEL)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    if app_settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
