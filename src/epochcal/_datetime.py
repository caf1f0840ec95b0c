"""Immutable timestamp value holder."""

from __future__ import annotations

from dataclasses import dataclass, field

from epochcal._calendar import (
    CivilDate,
    ClockTime,
    civil_date_from_timestamp,
    clock_time_from_timestamp,
    timestamp_from_civil,
    validate_timestamp,
)
from epochcal._constants import DEFAULT_SUFFIX_STYLE
from epochcal._format import SuffixStyle, format_civil, resolve_suffix_style
from epochcal.clock import Clock, now_timestamp


@dataclass(frozen=True, order=True)
class Datetime:
    """A UTC instant stored as whole Unix seconds.

    Date, time and text are derived on every call; nothing is cached.
    """

    timestamp: int
    suffix_style: SuffixStyle = field(
        default=SuffixStyle(DEFAULT_SUFFIX_STYLE), compare=False, kw_only=True
    )

    def __post_init__(self) -> None:
        validate_timestamp(self.timestamp)
        object.__setattr__(self, "suffix_style", resolve_suffix_style(self.suffix_style))

    @classmethod
    def now(
        cls,
        clock: Clock | None = None,
        *,
        suffix_style: SuffixStyle | str = DEFAULT_SUFFIX_STYLE,
    ) -> Datetime:
        """Current instant read from ``clock`` (the system clock by default)."""
        return cls(now_timestamp(clock), suffix_style=suffix_style)

    @classmethod
    def from_civil(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        suffix_style: SuffixStyle | str = DEFAULT_SUFFIX_STYLE,
    ) -> Datetime:
        ts = timestamp_from_civil(year, month, day, hour, minute, second)
        return cls(ts, suffix_style=suffix_style)

    def date(self) -> CivilDate:
        return civil_date_from_timestamp(self.timestamp)

    def time(self) -> ClockTime:
        return clock_time_from_timestamp(self.timestamp)

    def format_iso8601(self) -> str:
        return format_civil(self.date(), self.time(), suffix_style=self.suffix_style)

    def __str__(self) -> str:
        return self.format_iso8601()
