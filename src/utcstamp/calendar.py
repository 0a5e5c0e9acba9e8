"""Gregorian calendar arithmetic for seconds counted from the Unix epoch.

This module implements the conversion from a non-negative number of seconds
since 1970-01-01 00:00:00 UTC into calendar fields:

Classes:
    - Month: Enum of the twelve months with their abbreviations
    - Weekday: Enum of the seven weekdays (Sunday first) with abbreviations
    - CalendarFields: Immutable record of the converted date and time

Functions:
    - convert: Seconds since the epoch to CalendarFields
    - is_leap_year, days_in_year, days_in_month: Gregorian leap-year rules
    - weekday_of: Weekday of a seconds count

The calendar is the proleptic Gregorian calendar in UTC. Leap seconds do not
exist in this model: every day has exactly 86400 seconds.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from .exceptions import PreEpochError

_LOGGER = logging.getLogger(__name__)

# =============================================================================
# Calendar Constants
# =============================================================================


SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

EPOCH_YEAR = 1970
EPOCH_WEEKDAY_OFFSET = 4  # 1970-01-01 was a Thursday (Sunday = 0)

# A Gregorian cycle of 400 years always has 97 leap years
YEARS_PER_GREGORIAN_CYCLE = 400
DAYS_PER_GREGORIAN_CYCLE = 146097
SECONDS_PER_GREGORIAN_CYCLE = DAYS_PER_GREGORIAN_CYCLE * SECONDS_PER_DAY

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_MONTH_DAYS_LEAP = (_MONTH_DAYS[0], _MONTH_DAYS[1] + 1) + _MONTH_DAYS[2:]  # Feb 29


# =============================================================================
# Calendar Enums and Records
# =============================================================================


class Month(Enum):
    """Months of the Gregorian year, valued 1-12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def abbreviation(self) -> str:
        """Three-letter English abbreviation ("Jan", "Feb", ...)."""
        return self.name[:3].capitalize()


class Weekday(Enum):
    """Days of the week, valued 0-6 with Sunday as 0."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def abbreviation(self) -> str:
        """Three-letter English abbreviation ("Sun", "Mon", ...)."""
        return self.name[:3].capitalize()


class CalendarFields(NamedTuple):
    """Date and time fields of a seconds count, in UTC.

    Attributes:
        year: Full year (1970 or later)
        month: Month of the year
        weekday: Day of the week
        day: Day of the month (1-31)
        hour: Hour of the day (0-23)
        minute: Minute of the hour (0-59)
        second: Second of the minute (0-59)
    """

    year: int
    month: Month
    weekday: Weekday
    day: int
    hour: int
    minute: int
    second: int

    def to_seconds(self) -> int:
        """Reassemble the seconds count since the epoch from the fields.

        Inverse of convert(): convert(fields.to_seconds()) == fields for any
        fields produced by convert().

        Returns:
            Seconds since 1970-01-01 00:00:00 UTC
        """
        cycles, year_in_cycle = divmod(self.year - EPOCH_YEAR, YEARS_PER_GREGORIAN_CYCLE)

        days = cycles * DAYS_PER_GREGORIAN_CYCLE
        days += sum(days_in_year(EPOCH_YEAR + i) for i in range(year_in_cycle))
        days += sum(_month_table(self.year)[: self.month.value - 1])
        days += self.day - 1

        return (
            days * SECONDS_PER_DAY
            + self.hour * SECONDS_PER_HOUR
            + self.minute * SECONDS_PER_MINUTE
            + self.second
        )


# =============================================================================
# Leap Year Rules
# =============================================================================


def is_leap_year(year: int) -> bool:
    """Check a year against the Gregorian leap-year rule.

    Divisible by 400 is a leap year, otherwise divisible by 100 is not,
    otherwise divisible by 4 is.
    """
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_year(year: int) -> int:
    """Number of days in the given year (365 or 366)."""
    return 366 if is_leap_year(year) else 365


def _month_table(year: int) -> tuple[int, ...]:
    return _MONTH_DAYS_LEAP if is_leap_year(year) else _MONTH_DAYS


def days_in_month(year: int, month: Month) -> int:
    """Number of days in a month, accounting for February in leap years."""
    return _month_table(year)[month.value - 1]


# =============================================================================
# Conversion
# =============================================================================


def check_seconds(seconds: int) -> int:
    """Validate a seconds count since the epoch.

    Args:
        seconds: Candidate seconds count

    Returns:
        The seconds count, unchanged

    Raises:
        TypeError: If seconds is not an integer (bool is rejected)
        PreEpochError: If seconds is negative
    """
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise TypeError(f"Seconds since the epoch must be an int, not {type(seconds).__name__}")

    if seconds < 0:
        raise PreEpochError(f"{seconds} seconds lies before the epoch")

    return seconds


def weekday_of(seconds: int) -> Weekday:
    """Weekday of a seconds count, anchored on 1970-01-01 being a Thursday."""
    return Weekday((seconds // SECONDS_PER_DAY + EPOCH_WEEKDAY_OFFSET) % 7)


def convert(seconds: int) -> CalendarFields:
    """Convert seconds since the epoch to calendar fields.

    Whole 400-year cycles are skipped first, then years and months are
    consumed one at a time while the remainder is at least as long as the
    current unit. A remainder exactly equal to a unit rolls over into the
    next one.

    Args:
        seconds: Non-negative seconds since 1970-01-01 00:00:00 UTC

    Returns:
        The corresponding CalendarFields

    Raises:
        TypeError: If seconds is not an integer
        PreEpochError: If seconds is negative
    """
    remaining = check_seconds(seconds)

    cycles, remaining = divmod(remaining, SECONDS_PER_GREGORIAN_CYCLE)
    year = EPOCH_YEAR + cycles * YEARS_PER_GREGORIAN_CYCLE

    while remaining >= days_in_year(year) * SECONDS_PER_DAY:
        remaining -= days_in_year(year) * SECONDS_PER_DAY
        year += 1

    # February depends on the year resolved above
    month = Month.JANUARY
    for month, days in zip(Month, _month_table(year), strict=True):
        if remaining < days * SECONDS_PER_DAY:
            break
        remaining -= days * SECONDS_PER_DAY

    day, remaining = divmod(remaining, SECONDS_PER_DAY)
    hour, remaining = divmod(remaining, SECONDS_PER_HOUR)
    minute, second = divmod(remaining, SECONDS_PER_MINUTE)

    fields = CalendarFields(
        year=year,
        month=month,
        weekday=weekday_of(seconds),
        day=day + 1,
        hour=hour,
        minute=minute,
        second=second,
    )
    _LOGGER.debug("Converted %d seconds to %r", seconds, fields)
    return fields
