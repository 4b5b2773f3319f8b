import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo setup_logging() calls made by a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
