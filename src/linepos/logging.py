"""Structured logging setup for linepos."""
from __future__ import annotations

import logging
import sys

import structlog

_DEFAULT_LEVEL = "warning"

_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(level: str | None = None) -> None:
    """Route structlog through stdlib logging on stderr.

    Library modules only ever call ``structlog.get_logger``; applications
    (the ``linepos`` CLI among them) call this once at startup. Output goes to
    stderr so it never mixes with positions printed on stdout.
    """

    numeric_level = level_from_str(level or _DEFAULT_LEVEL)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["level", "event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def level_from_str(level: str) -> int:
    return _LEVELS.get(level.lower(), logging.WARNING)


__all__ = ["configure_logging", "level_from_str"]
