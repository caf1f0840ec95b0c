"""Epoch anchor, unit conversions and calendar tables."""

EPOCH = 978307200
"""2001-01-01T00:00:00Z as a Unix timestamp."""

EPOCH_YEAR = 2001

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_MINUTE = 60

DAYS_PER_YEAR = 365
DAYS_PER_FOUR_YEARS = DAYS_PER_YEAR * 4 + 1
"""Day count of a 4-year span holding exactly one leap year."""

LEAP_YEAR_IN_CYCLE = 3
"""Zero-based position of the leap year within a cycle starting at EPOCH_YEAR."""

MAX_YEAR = 2099
"""Last year the 4-year rule is exact for; 2100 is not a leap year."""

MAX_TIMESTAMP = 4102444799
"""2099-12-31T23:59:59Z as a Unix timestamp."""

MONTH_TABLE = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
"""Cumulative day count at the end of each month of an ordinary year."""

LEAP_MONTH_TABLE = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)
"""Cumulative day count at the end of each month of a leap year."""

DEFAULT_SUFFIX_STYLE = "Z"
