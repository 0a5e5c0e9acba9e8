"""Timestamp string rendering for calendar fields."""

from __future__ import annotations

from .calendar import CalendarFields


def format_timestamp(fields: CalendarFields) -> str:
    """Render calendar fields as a fixed-format UTC timestamp.

    Day, year and hour are unpadded; minute and second always have two
    digits. Two spaces separate the date from the time.

    Args:
        fields: Converted calendar fields

    Returns:
        Timestamp string

    Examples:
        "Mon Sep 9, 1996  15:23:44 (UTC)"
        "Thu Jan 1, 1970  0:00:00 (UTC)"
    """
    return (
        f"{fields.weekday.abbreviation} {fields.month.abbreviation} {fields.day}, {fields.year}  "
        f"{fields.hour}:{fields.minute:02d}:{fields.second:02d} (UTC)"
    )
