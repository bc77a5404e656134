"""Utility helpers for time operations."""

from .time import Clock, fixed_clock, now_ms, utc_now

__all__ = ["Clock", "fixed_clock", "now_ms", "utc_now"]
