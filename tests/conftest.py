"""Shared test fixtures for pyUTCStamp tests."""

from __future__ import annotations

from typing import Any

import pytest

from src.utcstamp.clock import FixedClock


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at Mon Sep 9, 1996 15:23:44 UTC."""
    return FixedClock(842282624)


@pytest.fixture
def reference_instants() -> dict[str, int]:
    """Seconds counts at well-known instants."""
    return {
        "epoch": 0,
        "sample_1996": 842282624,
        "last_second_1999": 946684799,
        "y2k": 946684800,
        "leap_day_2000": 951782400,
        "march_2100": 4107542400,
        "y2038": 2147483647,
        "uint32_max": 4294967295,
    }


# Test markers for different test types
def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, single-threaded)"
    )
    config.addinivalue_line(
        "markers", "threading: mark test as using multiple threads"
    )
