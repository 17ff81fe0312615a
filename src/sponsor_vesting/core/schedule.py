"""Vesting schedule arithmetic.

Each purchased unit unlocks sponsorship credits over 30-day periods. The
per-period rate starts at one credit and rises by one at every 12-period
year boundary, so the cumulative production per unit after ``p`` periods is::

    years, rem = divmod(p, 12)
    produced = 6 * years * (years + 1) + rem * (years + 1)

A batch counts its first period at the moment of activation and stops
producing after 72 periods, where one unit has produced 252 credits.

Every function here is pure. Results are bounded by ``MAX_AMOUNT`` because
amounts are persisted in signed 64-bit columns; anything larger raises
``ArithmeticOverflow`` instead of being truncated.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from sponsor_vesting.core.errors import ArithmeticOverflow, ScheduleError

PERIOD_SECONDS: Final[int] = 30 * 24 * 3600
PERIODS_PER_YEAR: Final[int] = 12
MAX_PERIODS: Final[int] = 72
MAX_AMOUNT: Final[int] = 2**63 - 1

__all__ = [
    "MAX_AMOUNT",
    "MAX_PERIODS",
    "MAX_PRODUCED_PER_UNIT",
    "PERIOD_SECONDS",
    "PERIODS_PER_YEAR",
    "batch_produced",
    "checked_add",
    "checked_mul",
    "periods_elapsed",
    "produced_for_periods",
    "produced_per_unit",
    "schedule_table",
    "total_produced",
]


def checked_add(left: int, right: int) -> int:
    """Add two non-negative amounts, refusing results above ``MAX_AMOUNT``."""
    result = left + right
    if result > MAX_AMOUNT:
        raise ArithmeticOverflow(f"{left} + {right} exceeds {MAX_AMOUNT}")
    return result


def checked_mul(left: int, right: int) -> int:
    """Multiply two non-negative amounts, refusing results above ``MAX_AMOUNT``."""
    result = left * right
    if result > MAX_AMOUNT:
        raise ArithmeticOverflow(f"{left} * {right} exceeds {MAX_AMOUNT}")
    return result


def periods_elapsed(elapsed_seconds: int) -> int:
    """Return the number of started periods, capped at ``MAX_PERIODS``.

    Raises:
        ScheduleError: If ``elapsed_seconds`` is negative.
    """
    if elapsed_seconds < 0:
        raise ScheduleError(f"elapsed time is negative: {elapsed_seconds}s")
    return min(elapsed_seconds // PERIOD_SECONDS + 1, MAX_PERIODS)


def produced_for_periods(periods: int) -> int:
    """Cumulative credits one unit has produced after ``periods`` periods."""
    years, remainder = divmod(periods, PERIODS_PER_YEAR)
    return 6 * years * (years + 1) + remainder * (years + 1)


MAX_PRODUCED_PER_UNIT: Final[int] = produced_for_periods(MAX_PERIODS)


def produced_per_unit(elapsed_seconds: int) -> int:
    """Cumulative credits one unit has produced after ``elapsed_seconds``."""
    return produced_for_periods(periods_elapsed(elapsed_seconds))


def batch_produced(purchased_at: int, size: int, now: int) -> int:
    """Cumulative credits produced by a batch of ``size`` units at ``now``."""
    return checked_mul(produced_per_unit(now - purchased_at), size)


def total_produced(batches: Iterable[tuple[int, int]], now: int) -> int:
    """Sum production over ``(purchased_at, size)`` pairs at ``now``."""
    total = 0
    for purchased_at, size in batches:
        total = checked_add(total, batch_produced(purchased_at, size, now))
    return total


def schedule_table() -> list[tuple[int, int]]:
    """Return ``(period, produced_per_unit)`` for every period of the schedule."""
    return [(period, produced_for_periods(period)) for period in range(1, MAX_PERIODS + 1)]
