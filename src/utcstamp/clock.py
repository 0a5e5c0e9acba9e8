"""Clock sources reporting whole seconds since the epoch.

UTCDateTime.now() reads the current time through a Clock instead of calling
the host clock directly, so callers and tests can inject a fixed time.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol

from .calendar import check_seconds


class Clock(Protocol):
    """A source of the current time in seconds since the epoch."""

    def seconds(self) -> int:
        """Return whole seconds elapsed since 1970-01-01 00:00:00 UTC."""
        ...


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Clock reading the host's wall-clock time."""

    def seconds(self) -> int:
        """Return the host time, truncated to whole seconds.

        Raises:
            PreEpochError: If the host clock is set before the epoch
        """
        return check_seconds(int(time.time()))


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock that always returns the same time (useful for tests)."""

    fixed_seconds: int

    def __post_init__(self) -> None:
        check_seconds(self.fixed_seconds)

    def seconds(self) -> int:
        return self.fixed_seconds
