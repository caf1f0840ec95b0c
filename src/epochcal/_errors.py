"""Exception hierarchy for epoch-to-calendar conversion."""


class EpochCalError(Exception):
    """Base exception for calendar conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidTimestampError(EpochCalError):
    """Raised when a timestamp is not an integer."""


class TimestampBeforeEpochError(EpochCalError):
    """Raised when a timestamp precedes the calendar epoch."""


class TimestampOutOfRangeError(EpochCalError):
    """Raised when a timestamp or year lies past the supported range."""


class InvalidCivilDateError(EpochCalError):
    """Raised when a civil date or time field is impossible."""


class InvalidSuffixStyleError(EpochCalError):
    """Raised when a UTC suffix style is not recognized."""


class FormatWidthError(EpochCalError):
    """Raised when a number does not fit its fixed field width."""


class ClockError(EpochCalError):
    """Raised when the wall clock reports a time before the epoch."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_TIMESTAMP = "timestamp must be an integer"
ERR_MSG_BEFORE_EPOCH = "timestamp precedes the calendar epoch"
ERR_MSG_OUT_OF_RANGE = "timestamp is past the supported range"
ERR_MSG_YEAR_OUT_OF_RANGE = "year is outside the supported range"
ERR_MSG_INVALID_CIVIL_DATE = "invalid civil date"
ERR_MSG_INVALID_CLOCK_TIME = "invalid clock time"
ERR_MSG_INVALID_SUFFIX_STYLE = "unknown UTC suffix style"
ERR_MSG_FIELD_TOO_WIDE = "value does not fit field width"
ERR_MSG_CLOCK_BEFORE_EPOCH = "system clock is set before the calendar epoch"
