"""ISO-8601 rendering of civil dates and times."""

from __future__ import annotations

import enum

from epochcal._calendar import (
    CivilDate,
    ClockTime,
    civil_date_from_timestamp,
    clock_time_from_timestamp,
    timestamp_from_civil,
)
from epochcal._constants import DEFAULT_SUFFIX_STYLE
from epochcal._errors import (
    ERR_MSG_FIELD_TOO_WIDE,
    ERR_MSG_INVALID_SUFFIX_STYLE,
    FormatWidthError,
    InvalidSuffixStyleError,
)


class SuffixStyle(enum.StrEnum):
    """Literal suffix marking a formatted instant as UTC."""

    Z = "Z"
    OFFSET = "+00:00"


def resolve_suffix_style(style: SuffixStyle | str) -> SuffixStyle:
    """Coerce a style name or literal to a SuffixStyle."""
    try:
        return SuffixStyle(style)
    except ValueError as e:
        allowed = ", ".join(repr(s.value) for s in SuffixStyle)
        raise InvalidSuffixStyleError(
            ERR_MSG_INVALID_SUFFIX_STYLE,
            f"suffix style {style!r} is not one of {allowed}",
            wrapped=e,
        ) from e


def zeropad(number: int, width: int) -> str:
    """Render ``number`` as exactly ``width`` zero-filled decimal digits."""
    text = str(number)
    if number < 0 or len(text) > width:
        raise FormatWidthError(
            ERR_MSG_FIELD_TOO_WIDE,
            f"{number} does not fit in {width} digits",
        )
    return "0" * (width - len(text)) + text


def format_civil(
    date: CivilDate,
    time: ClockTime,
    *,
    suffix_style: SuffixStyle | str = DEFAULT_SUFFIX_STYLE,
) -> str:
    """Render a civil date and time as ``YYYY-MM-DDTHH:MM:SS<suffix>``.

    Raises:
        InvalidCivilDateError: If a field is impossible, e.g. month 13.
        TimestampOutOfRangeError: If the year is outside 2001..2099.
    """
    timestamp_from_civil(*date, *time)
    suffix = resolve_suffix_style(suffix_style)
    return (
        f"{zeropad(date.year, 4)}-{zeropad(date.month, 2)}-{zeropad(date.day, 2)}"
        f"T{zeropad(time.hour, 2)}:{zeropad(time.minute, 2)}:{zeropad(time.second, 2)}"
        f"{suffix.value}"
    )


def format_iso8601(
    ts: int,
    *,
    suffix_style: SuffixStyle | str = DEFAULT_SUFFIX_STYLE,
) -> str:
    """Format a Unix timestamp as an ISO-8601 UTC string.

    Args:
        ts: Seconds since 1970-01-01T00:00:00Z, within 2001..2099.
        suffix_style: ``"Z"`` (default) or ``"+00:00"``.

    Returns:
        The formatted instant, e.g. ``2024-04-05T10:01:31Z``.

    Raises:
        EpochCalError: If ``ts`` is out of range or the style is unknown.
    """
    return format_civil(
        civil_date_from_timestamp(ts),
        clock_time_from_timestamp(ts),
        suffix_style=suffix_style,
    )
