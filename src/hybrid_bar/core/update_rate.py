# src/hybrid_bar/core/update_rate.py

from __future__ import annotations

from hybrid_bar.core.accessor import try_get
from hybrid_bar.core.cache import ConfigCache
from hybrid_bar.core.errors import UpdateRateError
from hybrid_bar.math_utils import clamp_i32

DEFAULT_UPDATE_RATE = 100
MIN_UPDATE_RATE = 5
MAX_UPDATE_RATE = 10_000


def get_update_rate(cache: ConfigCache) -> int:
    """
    Return the UI refresh interval in milliseconds.

    Reads hybrid:update_rate, clamped to [5, 10000]; 100 when unset.
    """
    update_rate = DEFAULT_UPDATE_RATE

    configured = try_get(cache, "hybrid", "update_rate", False, False)
    if configured is not None:
        update_rate = clamp_i32(configured.integer, MIN_UPDATE_RATE, MAX_UPDATE_RATE)

    if update_rate < 0:
        raise UpdateRateError(f"Cannot convert update_rate {update_rate} into an unsigned duration")

    return update_rate
