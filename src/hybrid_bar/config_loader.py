# src/hybrid_bar/config_loader.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from hybrid_bar.core.errors import ConfigParseError, ConfigReadError


def read_config_raw(path: Path) -> Any:
    """
    Read and parse the JSON config file at PATH.

    Works on a standalone copy of the file; the shared cache is never
    touched here, so a failure leaves any cached document intact.

    Raises:
        ConfigReadError if the file cannot be read.
        ConfigParseError if the text is not valid JSON.
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Failed reading config file from '{path}': {e}") from e

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ConfigParseError(f"Failed parsing config from '{path}': {e}") from e


def _reject_constant(name: str):
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name!r}")
