"""Clock abstraction for an injectable wall-clock source."""

from __future__ import annotations

import time
from typing import Protocol

from loguru import logger

from epochcal._constants import EPOCH
from epochcal._errors import ERR_MSG_CLOCK_BEFORE_EPOCH, ClockError


class Clock(Protocol):
    def now_seconds(self) -> int: ...


class SystemClock:
    """Default implementation: operating system clock, whole Unix seconds."""

    def now_seconds(self) -> int:
        return int(time.time())


class FixedClock:
    """Clock that always reports the same instant."""

    def __init__(self, seconds: int) -> None:
        self.seconds = seconds

    def now_seconds(self) -> int:
        return self.seconds


def now_timestamp(clock: Clock | None = None) -> int:
    """Read the current Unix timestamp from ``clock``.

    Raises:
        ClockError: If the clock reports a time before 2001-01-01T00:00:00Z.
    """
    if clock is None:
        clock = SystemClock()

    seconds = clock.now_seconds()
    logger.debug("read {} from {}", seconds, type(clock).__name__)

    if seconds < EPOCH:
        err = ClockError(
            ERR_MSG_CLOCK_BEFORE_EPOCH,
            f"{type(clock).__name__} reported {seconds}, epoch is {EPOCH}",
        )
        logger.error(err.internal())
        raise err
    return seconds
