"""Timestamp sources."""

from .monotonic import MonotonicClock

__all__ = ["MonotonicClock"]
