# src/hybrid_bar/core/errors.py

"""
Fatal configuration errors.

A missing root or key is never an error: lookups return None for that.
Everything below is raised where it is detected and is expected to end
the process at the top-level call site (see cli/_main.py).
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for every fatal configuration error."""


class ConfigReadError(ConfigError):
    """The config file could not be read."""


class ConfigParseError(ConfigError):
    """The config file is not valid JSON."""


class ConfigValueError(ConfigError):
    """A value requested as an integer is not integer-shaped."""

    def __init__(self, root: str, key: str, value: object):
        self.root = root
        self.key = key
        self.value = value
        super().__init__(f"Failed parsing {root}:{key} as i32 (got {value!r})")


class VariableLimitError(ConfigError):
    """The `variables` section defines more entries than allowed."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"You cannot have more than `{limit}` variables (found {count})"
        )


class UpdateRateError(ConfigError):
    """The update rate cannot be represented as an unsigned duration."""
