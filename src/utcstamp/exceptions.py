"""UTC timestamp exception classes."""

from __future__ import annotations


class UTCStampError(Exception):
    """Base exception for all utcstamp errors."""


class PreEpochError(UTCStampError, ValueError):
    """Time value lies before the epoch (1970-01-01 00:00:00 UTC)."""


class OutOfRangeError(UTCStampError, ValueError):
    """Time value cannot be represented by the requested target type."""
