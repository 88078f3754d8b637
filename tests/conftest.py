# tests/conftest.py
import json
import pytest

from hybrid_bar.core.cache import ConfigCache


@pytest.fixture
def write_config(tmp_path):
    """Write DATA as JSON under tmp_path and return the file path."""
    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path
    return _write


@pytest.fixture
def make_cache(write_config):
    """Return a refreshed ConfigCache backed by a temp file holding DATA."""
    def _make(data):
        cache = ConfigCache(source=write_config(data))
        cache.refresh()
        return cache
    return _make
