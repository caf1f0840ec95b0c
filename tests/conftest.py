"""Shared test fixtures."""

import calendar

import pytest
from loguru import logger

from epochcal.clock import FixedClock


def unix(year, month, day, hour=0, minute=0, second=0):
    """Unix timestamp for a UTC civil instant, via the standard library."""
    return calendar.timegm((year, month, day, hour, minute, second))


@pytest.fixture
def log_messages():
    """Capture epochcal log records as plain strings."""
    messages = []
    logger.enable("epochcal")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("epochcal")


@pytest.fixture
def fixed_clock():
    return FixedClock(1712311291)
