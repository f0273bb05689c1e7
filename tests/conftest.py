"""
Shared fixtures for the superposition test suite.
"""

import logging

import pytest

from superposition.config import LOGGER_NAME, reset_config


@pytest.fixture(autouse=True)
def clean_runtime_state(monkeypatch):
    """Isolate each test from environment config and installed log handlers."""
    for name in ("SUPERPOSITION_LOG_LEVEL", "SUPERPOSITION_LOG_FILE", "SUPERPOSITION_SEED"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
