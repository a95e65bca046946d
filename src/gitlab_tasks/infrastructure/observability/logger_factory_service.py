"""Logging for gitlab_tasks.

Library modules log through plain stdlib loggers and never touch the host's
configuration; records propagate to whatever handlers the host installed.
`configure_logging()` is opt-in and only called by the command-line entry
point: it renders records through structlog's ProcessorFormatter with
access tokens redacted.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from gitlab_tasks.infrastructure.observability.logging.redaction_processor import (
    redaction_processor,
)

PACKAGE_LOGGER = "gitlab_tasks"


def build_formatter(log_format: str | None = None) -> structlog.stdlib.ProcessorFormatter:
    """Formatter that timestamps, redacts and renders stdlib records."""
    return structlog.stdlib.ProcessorFormatter(
        # Runs while the stdlib record is still attached to the event
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            redaction_processor,
            _select_renderer(log_format),
        ],
    )


def configure_logging(level: str | None = None, log_format: str | None = None, stream: Any = None) -> logging.Handler:
    """
    Sends gitlab_tasks records to `stream` (stdout by default).
    Level falls back to LOG_LEVEL, format to LOG_FORMAT (json|console).
    Returns the installed handler so callers can remove it again.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(build_formatter(log_format))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(handler)
    package_logger.setLevel((level or os.environ.get("LOG_LEVEL", "INFO")).upper())
    return handler


def _select_renderer(log_format: str | None) -> Any:
    log_format = (log_format or os.environ.get("LOG_FORMAT", "console")).lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
