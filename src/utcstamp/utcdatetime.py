"""UTC date and time backed by a lazily converted seconds count.

UTCDateTime stores a seconds count since the epoch and converts it to
calendar fields only when a field is first read. The conversion result is
memoized in a Lazy owned by the instance, so every field accessor and the
timestamp formatter share one conversion.

Examples:
    >>> stamp = UTCDateTime.from_seconds(842282624)
    >>> stamp.is_evaluated
    False
    >>> stamp.year, stamp.month, stamp.day_of_month
    (1996, <Month.SEPTEMBER: 9>, 9)
    >>> str(stamp)
    'Mon Sep 9, 1996  15:23:44 (UTC)'
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, date, datetime, time, timedelta
from functools import total_ordering
from typing import Any

from .cache import Lazy, SynchronizedLazy
from .calendar import CalendarFields, Month, Weekday, check_seconds, convert
from .clock import Clock, SystemClock
from .exceptions import OutOfRangeError, PreEpochError
from .format import format_timestamp

_LOGGER = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, 0, 0, 0, tzinfo=UTC)

_ONE_SECOND = timedelta(seconds=1)

# Last second representable by datetime: 9999-12-31 23:59:59 UTC
MAX_DATETIME_SECONDS = 253402300799


def _external_to_seconds(value: Any) -> int:
    """Convert an external time value to whole seconds since the epoch.

    Supported values:
        - datetime: naive values are taken as UTC, aware values are converted
        - date: midnight UTC of that day
        - timedelta: a duration measured from the epoch
        - anything else with a timestamp() method returning POSIX seconds

    Sub-second parts are truncated towards the past, so an instant half a
    second before the epoch is still rejected.

    Raises:
        PreEpochError: If the value lies before the epoch
        TypeError: If the value is of an unsupported type
    """
    if isinstance(value, timedelta):
        seconds = value // _ONE_SECOND
    elif isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        seconds = (value - EPOCH) // _ONE_SECOND
    elif isinstance(value, date):
        seconds = (datetime.combine(value, time(), tzinfo=UTC) - EPOCH) // _ONE_SECOND
    elif callable(getattr(value, "timestamp", None)):
        timestamp = value.timestamp()
        if not math.isfinite(timestamp):
            if timestamp < 0:
                raise PreEpochError(f"{value!r} lies before the epoch")
            raise TypeError(f"Cannot convert non-finite timestamp {timestamp!r} to seconds since the epoch")
        seconds = math.floor(timestamp)
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to seconds since the epoch")

    if seconds < 0:
        raise PreEpochError(f"{value!r} lies before the epoch")

    return seconds


@total_ordering
class UTCDateTime:
    """A point in time at whole-second resolution, read out in UTC.

    Calendar fields are computed on first access and cached until the
    instance is mutated with add_in_place() (or +=), which discards the
    cache and starts over from the new seconds count.

    Instances compare by their seconds count. They are mutable and so
    unhashable.
    """

    # Private attributes
    _seconds: int
    _thread_safe: bool
    _cache: Lazy[CalendarFields]

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, seconds: int, *, thread_safe: bool = False) -> None:
        """Initialize from a seconds count (no conversion happens here).

        Args:
            seconds: Non-negative seconds since 1970-01-01 00:00:00 UTC
            thread_safe: Guard the field cache with a lock so concurrent
                         first reads convert only once (default False)

        Raises:
            TypeError: If seconds is not an integer
            PreEpochError: If seconds is negative
        """
        self._seconds = check_seconds(seconds)
        self._thread_safe = thread_safe
        self._cache = self._new_cache()

    def _new_cache(self) -> Lazy[CalendarFields]:
        seconds = self._seconds
        cache_type = SynchronizedLazy if self._thread_safe else Lazy
        return cache_type(lambda: convert(seconds))

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_seconds(cls, seconds: int, *, thread_safe: bool = False) -> UTCDateTime:
        """Create from an explicit seconds count since the epoch."""
        return cls(seconds, thread_safe=thread_safe)

    @classmethod
    def now(cls, clock: Clock | None = None, *, thread_safe: bool = False) -> UTCDateTime:
        """Create from the current time.

        Args:
            clock: Time source (default SystemClock())
            thread_safe: See __init__

        Raises:
            PreEpochError: If the clock reports a time before the epoch
        """
        if clock is None:
            clock = SystemClock()
        return cls.from_seconds(clock.seconds(), thread_safe=thread_safe)

    @classmethod
    def from_external_time(cls, value: Any, *, thread_safe: bool = False) -> UTCDateTime:
        """Create from a datetime, date, timedelta or timestamp()-capable value.

        Raises:
            PreEpochError: If the value lies before the epoch
            TypeError: If the value is of an unsupported type
        """
        return cls.from_seconds(_external_to_seconds(value), thread_safe=thread_safe)

    # =========================================================================
    # Field access
    # =========================================================================

    @property
    def seconds(self) -> int:
        """Seconds since the epoch."""
        return self._seconds

    @property
    def is_thread_safe(self) -> bool:
        """True if first field access is serialized with a lock."""
        return self._thread_safe

    @property
    def is_evaluated(self) -> bool:
        """True if the calendar fields have been computed."""
        return self._cache.is_ready

    @property
    def fields(self) -> CalendarFields:
        """All calendar fields as an immutable record."""
        return self._cache.get()

    @property
    def year(self) -> int:
        return self.fields.year

    @property
    def month(self) -> Month:
        return self.fields.month

    @property
    def weekday(self) -> Weekday:
        return self.fields.weekday

    @property
    def day_of_month(self) -> int:
        return self.fields.day

    @property
    def hour(self) -> int:
        return self.fields.hour

    @property
    def minute(self) -> int:
        return self.fields.minute

    @property
    def second(self) -> int:
        return self.fields.second

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, other: UTCDateTime) -> UTCDateTime:
        """Return a new instance whose seconds are the sum of both operands.

        Raises:
            TypeError: If other is not a UTCDateTime
        """
        if not isinstance(other, UTCDateTime):
            raise TypeError(f"Cannot add {type(other).__name__} to UTCDateTime")
        return type(self).from_seconds(self._seconds + other._seconds, thread_safe=self._thread_safe)

    def add_in_place(self, other: UTCDateTime) -> UTCDateTime:
        """Add other's seconds to this instance and discard cached fields.

        Returns:
            self

        Raises:
            TypeError: If other is not a UTCDateTime
        """
        if not isinstance(other, UTCDateTime):
            raise TypeError(f"Cannot add {type(other).__name__} to UTCDateTime")

        self._seconds += other._seconds
        if self._cache.is_ready:
            _LOGGER.debug("Discarding cached fields, now at %d seconds", self._seconds)
        self._cache = self._new_cache()
        return self

    def __add__(self, other: object) -> UTCDateTime:
        if not isinstance(other, UTCDateTime):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: object) -> UTCDateTime:
        if not isinstance(other, UTCDateTime):
            return NotImplemented
        return self.add_in_place(other)

    # =========================================================================
    # Conversion and representation
    # =========================================================================

    def format_timestamp(self) -> str:
        """Render as e.g. "Mon Sep 9, 1996  15:23:44 (UTC)"."""
        return format_timestamp(self.fields)

    def to_datetime(self) -> datetime:
        """Convert to an aware Python datetime in UTC.

        Raises:
            OutOfRangeError: If the instant is after 9999-12-31 23:59:59 UTC
                             (MAX_DATETIME_SECONDS), the last datetime value
        """
        if self._seconds > MAX_DATETIME_SECONDS:
            raise OutOfRangeError(
                f"{self._seconds} seconds lies after the last datetime value (9999-12-31 23:59:59)"
            )
        return EPOCH + timedelta(seconds=self._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UTCDateTime):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UTCDateTime):
            return NotImplemented
        return self._seconds < other._seconds

    def __str__(self) -> str:
        return self.format_timestamp()

    def __repr__(self) -> str:
        """Developer representation (does not trigger conversion)."""
        state = "evaluated" if self.is_evaluated else "pending"
        return f"UTCDateTime(seconds={self._seconds}, {state})"
