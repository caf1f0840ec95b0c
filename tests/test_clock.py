"""Wall-clock collaborator tests."""

import time

import pytest

from epochcal import EPOCH, FixedClock, SystemClock, now_timestamp
from epochcal._errors import ClockError, EpochCalError


class TestSystemClock:
    def test_whole_seconds(self):
        seconds = SystemClock().now_seconds()
        assert isinstance(seconds, int)

    def test_tracks_os_time(self):
        before = int(time.time())
        seconds = SystemClock().now_seconds()
        assert before <= seconds <= int(time.time())


class TestFixedClock:
    def test_constant(self):
        clock = FixedClock(1712311291)
        assert clock.now_seconds() == clock.now_seconds() == 1712311291


class TestNowTimestamp:
    def test_default_clock(self):
        assert now_timestamp() >= EPOCH

    def test_injected_clock(self, fixed_clock):
        assert now_timestamp(fixed_clock) == 1712311291

    def test_epoch_is_accepted(self):
        assert now_timestamp(FixedClock(EPOCH)) == EPOCH

    def test_before_epoch_is_fatal(self):
        with pytest.raises(ClockError, match="system clock is set before the calendar epoch"):
            now_timestamp(FixedClock(EPOCH - 1))

    def test_clock_error_is_library_error(self):
        with pytest.raises(EpochCalError):
            now_timestamp(FixedClock(0))


class TestLogging:
    def test_debug_on_read(self, log_messages, fixed_clock):
        now_timestamp(fixed_clock)
        assert any(m.startswith("DEBUG|read 1712311291 from FixedClock") for m in log_messages)

    def test_error_before_raise(self, log_messages):
        with pytest.raises(ClockError):
            now_timestamp(FixedClock(978307199))
        errors = [m for m in log_messages if m.startswith("ERROR|")]
        assert len(errors) == 1
        assert "FixedClock reported 978307199" in errors[0]

    def test_silent_by_default(self, fixed_clock):
        from loguru import logger

        messages = []
        handler_id = logger.add(messages.append, level="DEBUG")
        try:
            now_timestamp(fixed_clock)
        finally:
            logger.remove(handler_id)
        assert messages == []
