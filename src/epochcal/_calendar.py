"""Integer-only conversion between Unix timestamps and civil dates.

Days are split into 4-year cycles of 1461 days counted from the epoch
year 2001. Because 2001 follows a leap year, the leap year of every cycle
is its last one (2004, 2008, ...), so leap-ness is the year's position in
its cycle rather than ``year % 4 == 0``. Both rules agree for every year
from 2001 to 2099; the supported range stops there since 2100 breaks the
4-year rule.
"""

from __future__ import annotations

from typing import NamedTuple

from epochcal._constants import (
    DAYS_PER_FOUR_YEARS,
    DAYS_PER_YEAR,
    EPOCH,
    EPOCH_YEAR,
    LEAP_MONTH_TABLE,
    LEAP_YEAR_IN_CYCLE,
    MAX_TIMESTAMP,
    MAX_YEAR,
    MONTH_TABLE,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from epochcal._errors import (
    ERR_MSG_BEFORE_EPOCH,
    ERR_MSG_INVALID_CIVIL_DATE,
    ERR_MSG_INVALID_CLOCK_TIME,
    ERR_MSG_INVALID_TIMESTAMP,
    ERR_MSG_OUT_OF_RANGE,
    ERR_MSG_YEAR_OUT_OF_RANGE,
    InvalidCivilDateError,
    InvalidTimestampError,
    TimestampBeforeEpochError,
    TimestampOutOfRangeError,
)


class CivilDate(NamedTuple):
    """A proleptic Gregorian (year, month, day)."""

    year: int
    month: int
    day: int


class ClockTime(NamedTuple):
    """An (hour, minute, second) time of day."""

    hour: int
    minute: int
    second: int


def _require_int(value: object, name: str) -> None:
    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"{name} must be int, got {type(value).__name__}: {value!r}",
        )


def validate_timestamp(ts: int) -> None:
    """Check that ``ts`` lies within ``EPOCH..MAX_TIMESTAMP``."""
    _require_int(ts, "timestamp")
    if ts < EPOCH:
        raise TimestampBeforeEpochError(
            ERR_MSG_BEFORE_EPOCH,
            f"timestamp {ts} is before epoch {EPOCH} (2001-01-01T00:00:00Z)",
        )
    if ts > MAX_TIMESTAMP:
        raise TimestampOutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"timestamp {ts} exceeds {MAX_TIMESTAMP} (2099-12-31T23:59:59Z)",
        )


def _check_year(year: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidCivilDateError(
            ERR_MSG_INVALID_CIVIL_DATE,
            f"year must be int, got {type(year).__name__}: {year!r}",
        )
    if not EPOCH_YEAR <= year <= MAX_YEAR:
        raise TimestampOutOfRangeError(
            ERR_MSG_YEAR_OUT_OF_RANGE,
            f"year {year} is outside {EPOCH_YEAR}..{MAX_YEAR}",
        )


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is the leap year of its 4-year cycle."""
    _check_year(year)
    return (year - EPOCH_YEAR) % 4 == LEAP_YEAR_IN_CYCLE


def _month_table(year: int) -> tuple[int, ...]:
    return LEAP_MONTH_TABLE if is_leap_year(year) else MONTH_TABLE


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidCivilDateError(
            ERR_MSG_INVALID_CIVIL_DATE,
            f"month {month!r} is not in 1..12",
        )
    table = _month_table(year)
    return table[month] - table[month - 1]


def civil_date_from_timestamp(ts: int) -> CivilDate:
    """Convert a Unix timestamp to its UTC civil date.

    Args:
        ts: Seconds since 1970-01-01T00:00:00Z, at or after the epoch.

    Returns:
        The (year, month, day) the timestamp falls on.

    Raises:
        InvalidTimestampError: If ``ts`` is not an int.
        TimestampBeforeEpochError: If ``ts`` precedes 2001-01-01T00:00:00Z.
        TimestampOutOfRangeError: If ``ts`` is past 2099-12-31T23:59:59Z.
    """
    validate_timestamp(ts)

    days = (ts - EPOCH) // SECONDS_PER_DAY
    cycles, day_in_cycle = divmod(days, DAYS_PER_FOUR_YEARS)

    # Day 1460 is the 366th day of the cycle's leap year; dividing by 365
    # would push it into a fifth year.
    if day_in_cycle == DAYS_PER_FOUR_YEARS - 1:
        return CivilDate(EPOCH_YEAR + LEAP_YEAR_IN_CYCLE + cycles * 4, 12, 31)

    year_in_cycle, day_in_year = divmod(day_in_cycle, DAYS_PER_YEAR)
    year = EPOCH_YEAR + cycles * 4 + year_in_cycle
    table = LEAP_MONTH_TABLE if year_in_cycle == LEAP_YEAR_IN_CYCLE else MONTH_TABLE

    month = 1
    while table[month] <= day_in_year:
        month += 1

    return CivilDate(year, month, day_in_year - table[month - 1] + 1)


def clock_time_from_timestamp(ts: int) -> ClockTime:
    """Convert a Unix timestamp to its UTC time of day.

    Defined for every non-negative timestamp, independent of the date range.
    """
    _require_int(ts, "timestamp")
    if ts < 0:
        raise TimestampBeforeEpochError(
            ERR_MSG_BEFORE_EPOCH,
            f"timestamp {ts} is negative",
        )

    secs = ts % SECONDS_PER_DAY
    hour, secs = divmod(secs, SECONDS_PER_HOUR)
    minute, second = divmod(secs, SECONDS_PER_MINUTE)
    return ClockTime(hour, minute, second)


def timestamp_from_civil(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Convert a UTC civil date and time back to a Unix timestamp.

    Raises:
        TimestampOutOfRangeError: If ``year`` is outside 2001..2099.
        InvalidCivilDateError: If any other field is impossible.
    """
    _check_year(year)
    month_length = days_in_month(year, month)
    for name, value, upper in (
        ("day", day, month_length),
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
    ):
        lower = 1 if name == "day" else 0
        if isinstance(value, bool) or not isinstance(value, int) or not lower <= value <= upper:
            raise InvalidCivilDateError(
                ERR_MSG_INVALID_CIVIL_DATE if name == "day" else ERR_MSG_INVALID_CLOCK_TIME,
                f"{name} {value!r} is not in {lower}..{upper} for {year:04d}-{month:02d}",
            )

    cycles, year_in_cycle = divmod(year - EPOCH_YEAR, 4)
    days = (
        cycles * DAYS_PER_FOUR_YEARS
        + year_in_cycle * DAYS_PER_YEAR
        + _month_table(year)[month - 1]
        + day
        - 1
    )
    return (
        EPOCH
        + days * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )
