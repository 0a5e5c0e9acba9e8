"""pyUTCStamp: seconds since the epoch to UTC calendar fields and timestamps.

Converts a whole number of seconds since 1970-01-01 00:00:00 UTC into
year/month/day/weekday/hour/minute/second fields without a time-zone
database, leap-second table or locale, computing the fields lazily on first
access.
"""

from __future__ import annotations

import logging

from .cache import Lazy, SynchronizedLazy
from .calendar import (
    CalendarFields,
    Month,
    Weekday,
    convert,
    days_in_month,
    days_in_year,
    is_leap_year,
    weekday_of,
)
from .clock import Clock, FixedClock, SystemClock
from .exceptions import OutOfRangeError, PreEpochError, UTCStampError
from .format import format_timestamp
from .utcdatetime import UTCDateTime

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Time value
    "UTCDateTime",
    # Calendar
    "CalendarFields",
    "Month",
    "Weekday",
    "convert",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "weekday_of",
    # Formatting
    "format_timestamp",
    # Lazy cache
    "Lazy",
    "SynchronizedLazy",
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    # Exceptions
    "OutOfRangeError",
    "PreEpochError",
    "UTCStampError",
]
