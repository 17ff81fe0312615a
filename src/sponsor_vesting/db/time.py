# src/sponsor_vesting/db/time.py
"""Time utilities for ledger timestamps."""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], int]


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def epoch_seconds() -> int:
    """Return whole seconds since the Unix epoch from the UTC clock."""
    return int(utcnow().timestamp())
