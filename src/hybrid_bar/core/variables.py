# src/hybrid_bar/core/variables.py

"""
User-defined variables and literal substring substitution.

Variables live in the `variables` section of the config:

    "variables": {
        "%user%": "alice",
        "%greeting%": "Hello %user%"
    }

substitute() walks the table in document order and, for each variable
whose name occurs in the text, replaces every occurrence with the value.
Later variables see the output of earlier ones, so a value that contains
another variable's name is rewritten again if that variable comes later
("cascading"). Existing configs rely on this; keep the order-dependent
behaviour.
"""

from __future__ import annotations

from typing import Any, List, NamedTuple

from loguru import logger

from hybrid_bar.core.cache import ConfigCache
from hybrid_bar.core.errors import VariableLimitError
from hybrid_bar.core.values import as_string

VARIABLES_ROOT = "variables"
MAX_VARIABLES = 64


class Variable(NamedTuple):
    name: str
    value: str


def variables_from_document(document: Any) -> List[Variable]:
    """
    Build the variable table from an already-borrowed document.

    Raises VariableLimitError if more than MAX_VARIABLES are defined.
    """
    if not isinstance(document, dict):
        return []

    section = document.get(VARIABLES_ROOT)
    if not isinstance(section, dict):
        return []

    if len(section) > MAX_VARIABLES:
        raise VariableLimitError(len(section), MAX_VARIABLES)

    return [Variable(str(name), as_string(value)) for name, value in section.items()]


def collect_variables(cache: ConfigCache) -> List[Variable]:
    """Copy the variable table out of the current cached document."""
    with cache.read() as document:
        table = variables_from_document(document)

    logger.trace(f"Collected {len(table)} variables")
    return table


def apply_variables(text: str, table: List[Variable]) -> str:
    result = text
    for variable in table:
        if variable.name in result:
            result = result.replace(variable.name, variable.value)
    return result


def substitute(cache: ConfigCache, text: str) -> str:
    """
    Replace variable names in TEXT with their values.

    The table is copied under the read lock, the rewrite runs unlocked.
    """
    return apply_variables(text, collect_variables(cache))
