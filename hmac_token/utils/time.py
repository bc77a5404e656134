"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], int]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def now_ms() -> int:
    """Return the current Unix time in milliseconds."""
    return int(utc_now().timestamp() * 1000)


def fixed_clock(value_ms: int) -> Clock:
    """Return a clock that always reports ``value_ms``."""

    def _clock() -> int:
        return value_ms

    return _clock
