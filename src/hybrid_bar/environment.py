# src/hybrid_bar/environment.py

"""
Resolves where the Hybrid Bar config file lives.

    <home>/.config/HybridBar/<$HYBRID_CONFIG or config.json>
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_ENV_VAR = "HYBRID_CONFIG"
DEFAULT_CONFIG_FILENAME = "config.json"


def try_get_var(name: str, default: str) -> str:
    """Return environment variable NAME, or DEFAULT when unset or empty."""
    value = os.environ.get(name)
    if not value:
        return default
    return value


def get_path() -> Path:
    """Return the root config directory of Hybrid Bar."""
    return Path.home() / ".config" / "HybridBar"


def get_config_path() -> Path:
    return get_path() / try_get_var(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILENAME)
