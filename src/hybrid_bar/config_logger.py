from __future__ import annotations

import sys
from loguru import logger

from hybrid_bar.core.accessor import get_or_default
from hybrid_bar.core.cache import ConfigCache


# Loguru’s valid level names
_LOGURU_LEVELS = {
    "TRACE",
    "DEBUG",
    "INFO",
    "SUCCESS",
    "WARNING",
    "ERROR",
    "CRITICAL",
}

DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level: str | None, cache: ConfigCache | None = None) -> str:
    """
    Pick the effective level: explicit LEVEL, else hybrid:log_level from
    the cached config, else INFO. Unknown names fall back to INFO.
    """
    if level:
        candidate = level.upper()
    elif cache is not None:
        configured = get_or_default(cache, "hybrid", "log_level", True, False).string
        candidate = (configured or DEFAULT_LOG_LEVEL).upper()
    else:
        candidate = DEFAULT_LOG_LEVEL

    return candidate if candidate in _LOGURU_LEVELS else DEFAULT_LOG_LEVEL


def init_logging(level: str | None = None, cache: ConfigCache | None = None) -> str:
    """
    Initialize Loguru with a config or CLI override log level.
    Supports Loguru-specific levels: TRACE and SUCCESS.
    """
    effective = resolve_log_level(level, cache)

    # Reset handlers
    logger.remove()

    # Add clean stderr handler
    logger.add(
        sys.stderr,
        level=effective,
        format="<level>{level:7}</level> | <level>{message}</level>",
        backtrace=False,
        diagnose=False,
    )

    logger.debug(f"Loguru initialized at level: {effective}")
    return effective
