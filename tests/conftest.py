"""Configure test environment for catalogkit."""

from __future__ import annotations
import logging
import os
from collections.abc import Iterator
import pytest
from catalogkit import config
from catalogkit.logging_config import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop CATALOGKIT_* variables and the cached settings around each test."""
    for name in list(os.environ):
        if name.startswith("CATALOGKIT_"):
            monkeypatch.delenv(name, raising=False)
    config.get_settings(refresh=True)
    yield
    config._load_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handler changes made by ``configure_logging`` during a test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
