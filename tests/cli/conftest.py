import sys
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def restore_loguru():
    """The CLI replaces loguru's sinks; put a plain stderr sink back."""
    yield
    logger.remove()
    logger.add(sys.stderr)
