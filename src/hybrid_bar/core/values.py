# src/hybrid_bar/core/values.py

"""Conversions from raw JSON values to the two supported lanes."""

from __future__ import annotations

import json
from typing import Any

I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1


def as_string(value: Any) -> str:
    """
    Render VALUE as a string. Never fails.

    JSON strings are returned verbatim, anything else as compact JSON
    (42 -> "42", True -> "true", None -> "null").
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def as_i32(value: Any) -> int | None:
    """Return VALUE as a signed 32-bit integer, or None if it isn't one."""
    # bool is an int subclass, but true/false are not integers in JSON
    if isinstance(value, bool):
        return None

    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)

    if not isinstance(value, int):
        return None

    if value < I32_MIN or value > I32_MAX:
        return None
    return value
