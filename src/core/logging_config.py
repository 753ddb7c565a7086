"""structlog setup for a single CLI invocation.

stdout is reserved for the generated secret, so log lines always go to
stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog
from pydantic import ValidationError

from core.config import AppSettings


def _settings_level(settings: AppSettings | None) -> tuple[int, bool]:
    """Level from settings; `(WARNING, False)` when the environment is invalid."""

    if settings is None:
        try:
            settings = AppSettings()
        except ValidationError:
            return logging.WARNING, False
    return settings.log_level_number(), True


def configure_logging(*, verbose: bool = False, settings: AppSettings | None = None) -> None:
    settings_ok = True
    if verbose:
        level = logging.DEBUG
    else:
        level, settings_ok = _settings_level(settings)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    if not settings_ok:
        structlog.get_logger().warning("invalid_log_level_setting", fallback="WARNING")
