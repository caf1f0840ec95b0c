"""Acceptance tests against the standard library's calendar.

Property-based: random timestamps across the whole supported range must
agree with ``datetime`` for date, time, text and the inverse mapping.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from epochcal import (
    EPOCH,
    MAX_TIMESTAMP,
    Datetime,
    civil_date_from_timestamp,
    clock_time_from_timestamp,
    format_iso8601,
    timestamp_from_civil,
)
from epochcal._errors import TimestampBeforeEpochError

pytestmark = pytest.mark.integration

supported_timestamps = st.integers(min_value=EPOCH, max_value=MAX_TIMESTAMP)


def _reference(ts: int) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc)


class TestAgainstDatetime:
    @settings(max_examples=2000)
    @given(ts=supported_timestamps)
    def test_date(self, ts):
        ref = _reference(ts)
        assert civil_date_from_timestamp(ts) == (ref.year, ref.month, ref.day)

    @settings(max_examples=2000)
    @given(ts=supported_timestamps)
    def test_time(self, ts):
        ref = _reference(ts)
        assert clock_time_from_timestamp(ts) == (ref.hour, ref.minute, ref.second)

    @settings(max_examples=2000)
    @given(ts=supported_timestamps)
    def test_format_z(self, ts):
        assert format_iso8601(ts) == _reference(ts).strftime("%Y-%m-%dT%H:%M:%SZ")

    @settings(max_examples=2000)
    @given(ts=supported_timestamps)
    def test_format_offset_matches_isoformat(self, ts):
        assert str(Datetime(ts, suffix_style="+00:00")) == _reference(ts).isoformat()


class TestRoundTrip:
    @settings(max_examples=2000)
    @given(ts=supported_timestamps)
    def test_civil_back_to_timestamp(self, ts):
        date = civil_date_from_timestamp(ts)
        time = clock_time_from_timestamp(ts)
        assert timestamp_from_civil(*date, *time) == ts

    @given(days=st.integers(min_value=0, max_value=(MAX_TIMESTAMP - EPOCH) // 86400))
    def test_day_boundaries(self, days):
        ts = EPOCH + days * 86400
        assert clock_time_from_timestamp(ts) == (0, 0, 0)
        if days:
            assert clock_time_from_timestamp(ts - 1) == (23, 59, 59)
            assert civil_date_from_timestamp(ts - 1) == _reference(ts - 1).timetuple()[:3]


class TestRejection:
    @given(ts=st.integers(min_value=-(2**40), max_value=EPOCH - 1))
    def test_before_epoch(self, ts):
        with pytest.raises(TimestampBeforeEpochError):
            civil_date_from_timestamp(ts)
