"""Logging configuration for sample-helper.

Modules log through ``logging.getLogger(__name__)``; nothing is emitted
until :func:`configure_logging` attaches a handler to the package logger.

Controlled via env (no CLI changes):
    SAMPLE_HELPER_LOG_LEVEL -> level name ("DEBUG", "INFO", ...) or number
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Final

PACKAGE_LOGGER_NAME: Final[str] = "sample_helper"
LOG_LEVEL_ENV: Final[str] = "SAMPLE_HELPER_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_HANDLER_MARKER: Final[str] = "_sample_helper_handler"


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment, or ``None`` if unset.

    Honors ``SAMPLE_HELPER_LOG_LEVEL`` (e.g. ``"DEBUG"``, ``"warn"``, ``"10"``).
    Unrecognised values are ignored.
    """
    val = os.environ.get(LOG_LEVEL_ENV)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    if v == "WARN":
        v = "WARNING"
    level = logging.getLevelName(v)
    return level if isinstance(level, int) else None


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once replaces the level but never stacks
    handlers.

    Parameters
    ----------
    level:
        Explicit level.  When ``None``, the environment is consulted and
        ``WARNING`` is used as the fallback.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    handler = next(
        (h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)

    fmt = DEBUG_LOG_FORMAT if level <= logging.DEBUG else LOG_FORMAT
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level)
    return logger
