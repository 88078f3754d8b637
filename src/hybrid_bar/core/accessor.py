# src/hybrid_bar/core/accessor.py

"""
Typed lookups against the cached config.

Every lookup returns a TypedValue (string, integer) pair. Only the lane
that was asked for carries data; the other holds its default ("" or 0)
so call sites can unpack without branching.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from hybrid_bar.core.cache import ConfigCache
from hybrid_bar.core.errors import ConfigValueError
from hybrid_bar.core.values import as_i32, as_string
from hybrid_bar.core.variables import apply_variables, variables_from_document


class TypedValue(NamedTuple):
    string: str = ""
    integer: int = 0


def try_get(
    cache: ConfigCache,
    root: str,
    key: str,
    is_string: bool,
    with_custom_variables: bool = False,
) -> Optional[TypedValue]:
    """
    Fetch ROOT:KEY from the cache.

    Returns None when either the root or the key is missing.

    Raises:
        ConfigValueError if is_string is False and the value is not a
        32-bit integer.
        VariableLimitError if substitution is requested and the variables
        section is over the limit.
    """
    table = None

    with cache.read() as document:
        section = document.get(root) if isinstance(document, dict) else None
        if not isinstance(section, dict) or key not in section:
            return None

        raw = section[key]

        if not is_string:
            number = as_i32(raw)
            if number is None:
                raise ConfigValueError(root, key, raw)
            return TypedValue(integer=number)

        text = as_string(raw)
        if with_custom_variables:
            # Same snapshot as the value itself.
            table = variables_from_document(document)

    if table is not None:
        text = apply_variables(text, table)

    return TypedValue(string=text)


def get_or_default(
    cache: ConfigCache,
    root: str,
    key: str,
    is_string: bool,
    with_custom_variables: bool = False,
) -> TypedValue:
    """
    Same as try_get(), but a missing value becomes TypedValue("", 0).

    Only use this where "missing" and "empty/zero" mean the same thing.
    """
    value = try_get(cache, root, key, is_string, with_custom_variables)
    if value is None:
        return TypedValue()
    return value
