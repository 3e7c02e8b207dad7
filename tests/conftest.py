"""Root conftest — shared test configuration."""

import logging
import os

import pytest

from listzipper.config import get_settings

# Human-readable logs in test output
os.environ.setdefault("LISTZIPPER_LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test sees settings built from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def detach_log_handler():
    """Drop the handler setup_logging installs, so it never outlives a captured stream."""
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == "listzipper":
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
