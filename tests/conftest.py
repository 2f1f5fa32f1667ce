"""Shared pytest fixtures for the full Grammarify test suite."""

from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru_sinks():
    """Drop loguru sinks added by stage loggers so tests never share streams."""

    yield
    logger.remove()
