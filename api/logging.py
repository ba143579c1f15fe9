"""Structured logging shared by the API and the command-line scripts.

Log lines always go to stderr so scripts can print reports on stdout.
"""

import logging
import sys
from typing import Any

import structlog

from api.config import get_settings

QUIET_LOGGERS = ("uvicorn.access",)


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger; sys.stderr may be replaced after configuration
    return structlog.PrintLogger(file=sys.stderr)


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Overrides ``settings.log_level`` (e.g. "DEBUG" to see per-page scoring)
        json_output: Overrides the default of JSON in production, console elsewhere
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    if json_output is None:
        json_output = settings.is_production

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_site_context(site_config_path: str, business: str) -> None:
    """Attach the site being processed to every following log line."""
    structlog.contextvars.bind_contextvars(site_config=site_config_path, business=business)
