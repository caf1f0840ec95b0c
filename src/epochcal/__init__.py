"""epochcal - Convert Unix timestamps to Gregorian dates and ISO-8601 text."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

try:
    __version__ = _distribution_version("epochcal")
except PackageNotFoundError:  # running from a source tree without an install
    __version__ = "0.0.0.dev0"

from loguru import logger

from epochcal._calendar import (
    CivilDate,
    ClockTime,
    civil_date_from_timestamp,
    clock_time_from_timestamp,
    days_in_month,
    is_leap_year,
    timestamp_from_civil,
)
from epochcal._constants import EPOCH, MAX_TIMESTAMP
from epochcal._datetime import Datetime
from epochcal._errors import (
    ClockError,
    EpochCalError,
    FormatWidthError,
    InvalidCivilDateError,
    InvalidSuffixStyleError,
    InvalidTimestampError,
    TimestampBeforeEpochError,
    TimestampOutOfRangeError,
)
from epochcal._format import SuffixStyle, format_iso8601
from epochcal.clock import Clock, FixedClock, SystemClock, now_timestamp

__all__ = [
    "civil_date_from_timestamp",
    "clock_time_from_timestamp",
    "days_in_month",
    "format_iso8601",
    "is_leap_year",
    "now_timestamp",
    "timestamp_from_civil",
    "EPOCH",
    "MAX_TIMESTAMP",
    "CivilDate",
    "ClockTime",
    "Datetime",
    "SuffixStyle",
    "Clock",
    "FixedClock",
    "SystemClock",
    "ClockError",
    "EpochCalError",
    "FormatWidthError",
    "InvalidCivilDateError",
    "InvalidSuffixStyleError",
    "InvalidTimestampError",
    "TimestampBeforeEpochError",
    "TimestampOutOfRangeError",
]

logger.disable("epochcal")
