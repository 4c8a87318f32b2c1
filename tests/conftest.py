"""Shared pytest fixtures for dlit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler and level changes made by enable_logging."""
    dlit_logger = logging.getLogger("dlit")
    original_handlers = dlit_logger.handlers[:]
    original_level = dlit_logger.level
    yield
    dlit_logger.handlers = original_handlers
    dlit_logger.setLevel(original_level)
