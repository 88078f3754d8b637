# src/hybrid_bar/core/config.py

"""
Application context owning the config cache.

Components receive an AppContext (or its cache) explicitly instead of
reaching for a module-level singleton:

    ctx = AppContext()
    ctx.refresh()
    title = ctx.get_or_default("hybrid", "title", True, True).string
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from hybrid_bar.core import accessor, update_rate
from hybrid_bar.core.cache import ConfigCache
from hybrid_bar.core.variables import Variable, collect_variables, substitute


@dataclass
class AppContext:
    cache: ConfigCache = field(default_factory=ConfigCache)

    @classmethod
    def from_file(cls, path: str | Path | None) -> "AppContext":
        return cls(cache=ConfigCache(source=path))

    def refresh(self) -> None:
        self.cache.refresh()

    def try_get(
        self, root: str, key: str, is_string: bool, with_custom_variables: bool = False
    ) -> Optional[accessor.TypedValue]:
        return accessor.try_get(self.cache, root, key, is_string, with_custom_variables)

    def get_or_default(
        self, root: str, key: str, is_string: bool, with_custom_variables: bool = False
    ) -> accessor.TypedValue:
        return accessor.get_or_default(self.cache, root, key, is_string, with_custom_variables)

    def get_update_rate(self) -> int:
        return update_rate.get_update_rate(self.cache)

    def variables(self) -> List[Variable]:
        return collect_variables(self.cache)

    def substitute(self, text: str) -> str:
        return substitute(self.cache, text)
