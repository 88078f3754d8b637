# src/hybrid_bar/cli/_errors.py

import sys
from loguru import logger

from hybrid_bar.core.errors import ConfigError


def fatal(err: ConfigError):
    """Report a fatal configuration error and end the process."""
    logger.error(f"FATAL ERROR: {err}")
    sys.exit(1)
