# src/hybrid_bar/core/cache.py

"""
In-memory cache of the parsed config document.

The file is read and parsed once per refresh() instead of on every
lookup. The cached document is replaced wholesale on each refresh and
is never mutated in place, so readers always see one complete document.

Before the first refresh() the document is None; lookups against it
behave as "not found".
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from loguru import logger

from hybrid_bar.config_loader import read_config_raw
from hybrid_bar.core.rwlock import ReadWriteLock
from hybrid_bar.environment import get_config_path


class ConfigCache:

    def __init__(self, source: str | Path | None = None):
        # None -> resolve through environment.get_config_path() on every refresh
        self._source = Path(source) if source is not None else None
        self._document: Any = None
        self._loaded_from: Path | None = None
        self._lock = ReadWriteLock()

    @property
    def source(self) -> Path:
        """Path the next refresh() will read from."""
        return self._source if self._source is not None else get_config_path()

    @property
    def loaded_from(self) -> Path | None:
        return self._loaded_from

    def refresh(self) -> None:
        """
        Re-read and re-parse the config file, then swap it in.

        Parsing happens before the write lock is taken; on failure the
        ConfigReadError / ConfigParseError propagates and the previously
        cached document stays in place.
        """
        path = self.source
        document = read_config_raw(path)

        with self._lock.write_locked():
            self._document = document
            self._loaded_from = path

        sections = len(document) if isinstance(document, dict) else 0
        logger.debug(f"Cached config from {path} ({sections} sections)")

    def load_document(self, document: Any) -> None:
        """Swap in an already-parsed document (no file IO)."""
        with self._lock.write_locked():
            self._document = document
            self._loaded_from = None

    @contextmanager
    def read(self) -> Iterator[Any]:
        """
        Borrow the current document under a shared lock.

        The yielded value must not be mutated or kept after the
        `with` block ends.
        """
        with self._lock.read_locked():
            yield self._document

    def section(self, root: str) -> dict | None:
        """Return a shallow copy of section ROOT, or None if absent."""
        with self.read() as document:
            return _section_of(document, root)

    def sections(self) -> list[str]:
        with self.read() as document:
            if not isinstance(document, dict):
                return []
            return list(document.keys())


def _section_of(document: Any, root: str) -> dict | None:
    if not isinstance(document, dict):
        return None
    section = document.get(root)
    if not isinstance(section, dict):
        return None
    return dict(section)
