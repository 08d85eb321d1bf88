"""Structured logging configuration using structlog.

Console output on a terminal, JSON lines everywhere else, unless
``SUMMARY_OBSERVABILITY_LOG_FORMAT`` forces one or the other.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from application_summary.core.config import ObservabilityConfig

_PACKAGE_LOGGER = "application_summary"


def _render_chain(log_format: str) -> list[Any]:
    if log_format == "auto":
        log_format = "console" if sys.stderr.isatty() else "json"
    if log_format == "console":
        return [structlog.dev.ConsoleRenderer()]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging(config: ObservabilityConfig) -> None:
    """Send stdlib and structlog records through a single stderr handler."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    pre_chain: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_render_chain(config.log_format),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger(_PACKAGE_LOGGER).setLevel(level)

    structlog.contextvars.bind_contextvars(service=config.service_name)
