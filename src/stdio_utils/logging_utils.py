"""Logging setup and structured log helpers."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional

LOG_LEVEL_ENV = "STDIO_UTILS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def resolve_log_level(verbosity: int = 0, env_level: Optional[str] = None) -> int:
    """Pick a log level from ``-v`` count, falling back to the environment.

    Resolution order:
    1. -v/--verbose count (1 = INFO, 2+ = DEBUG)
    2. $STDIO_UTILS_LOG_LEVEL (level name, e.g. "DEBUG")
    3. WARNING
    """
    if verbosity > 0:
        return _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)

    raw = env_level if env_level is not None else os.environ.get(LOG_LEVEL_ENV)
    if raw:
        level = logging.getLevelName(raw.strip().upper())
        if isinstance(level, int):
            return level
    return logging.WARNING


def configure_logging(verbosity: int = 0) -> None:
    """Configure root logging once for the CLI process (stderr only)."""
    logging.basicConfig(level=resolve_log_level(verbosity), format=LOG_FORMAT)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """Emit one structured log line as compact JSON."""
    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))
