"""
structlog setup for the profile trust core.

Every record carries event_type, level, logger and an ISO timestamp.
Login and lockout events run next to credentials, so any key that looks
like a secret (password, password_hash, plaintext, token) is masked
before rendering. JSON output by default (LOG_FORMAT=json), console
rendering otherwise; level from LOG_LEVEL. Writes to stderr so CLI
output on stdout stays machine-readable.

No profile_trust imports here to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

import structlog

SECRET_KEYS = frozenset({"password", "password_hash", "plaintext", "token"})
MASK = "***"


def mask_secrets(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Replace values of secret-looking keys with a fixed mask."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = MASK
    return event_dict


def configure_logging(
    level: str | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    (Re)configure structlog. Arguments override LOG_LEVEL / LOG_FORMAT.

    Called once at import; tools call it again to honor --log-level.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    fmt = (fmt or os.getenv("LOG_FORMAT") or "json").strip().lower()

    renderer: Any
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.format_exc_info,
            mask_secrets,
            structlog.processors.EventRenamer("event_type"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Structured logger for a module; pass event_type first, context as kwargs.
    Resolved lazily, so a later configure_logging() call still applies:

        logger = get_logger(__name__)
        logger.info("account_locked", account_id=acc_id, lock_until=ts)
    """
    return structlog.get_logger().bind(logger=name)
