"""Deferred, compute-once value containers.

A Lazy holds either a pending zero-argument producer or the value that
producer returned. The first get() runs the producer and stores the result;
every later get() returns the stored object. Nothing runs at construction.

Lazy is meant for single-threaded use. SynchronizedLazy guards the
pending-to-ready transition with a lock so the producer runs at most once
even when several threads call get() concurrently.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class Lazy(Generic[T]):
    """Value computed by a producer on first access, then memoized.

    Examples:
        >>> calls = []
        >>> lazy = Lazy(lambda: calls.append(1) or 42)
        >>> lazy.is_ready
        False
        >>> lazy.get(), lazy.get()
        (42, 42)
        >>> len(calls)
        1
    """

    # Private attributes
    _producer: Callable[[], T] | None
    _value: T | None

    def __init__(self, producer: Callable[[], T]) -> None:
        """Initialize a pending cache (does not call the producer).

        Args:
            producer: Zero-argument callable returning the value
        """
        self._producer = producer
        self._value = None

    @property
    def is_ready(self) -> bool:
        """True once the producer has run and its value is stored."""
        return self._producer is None

    def get(self) -> T:
        """Return the value, running the producer on the first call.

        If the producer raises, the cache stays pending and the exception
        propagates; a later call runs the producer again.

        Returns:
            The stored value (the same object on every call)
        """
        if self._producer is not None:
            self._evaluate()
        return self._value  # type: ignore[return-value]

    def _evaluate(self) -> None:
        producer = self._producer
        if producer is None:
            return

        _LOGGER.debug("Evaluating %r", self)
        self._value = producer()
        # Drop the producer so its captured state can be released
        self._producer = None

    def __repr__(self) -> str:
        """Developer representation without forcing evaluation."""
        if self.is_ready:
            return f"{type(self).__name__}(ready, value={self._value!r})"
        return f"{type(self).__name__}(pending)"


class SynchronizedLazy(Lazy[T]):
    """Lazy whose first evaluation is serialized with a lock.

    The ready check in get() is done without the lock; only the transition
    takes it and re-checks, so the producer runs at most once under
    contention and reads after evaluation never block.
    """

    _lock: threading.Lock

    def __init__(self, producer: Callable[[], T]) -> None:
        super().__init__(producer)
        self._lock = threading.Lock()

    def _evaluate(self) -> None:
        with self._lock:
            super()._evaluate()
