"""Tests for the vesting schedule arithmetic."""

import pytest

from sponsor_vesting.core.errors import ArithmeticOverflow, ScheduleError
from sponsor_vesting.core.schedule import (
    MAX_AMOUNT,
    MAX_PERIODS,
    MAX_PRODUCED_PER_UNIT,
    PERIOD_SECONDS,
    batch_produced,
    periods_elapsed,
    produced_per_unit,
    schedule_table,
    total_produced,
)

DAY = 24 * 3600


def _start_of(period: int) -> int:
    """Elapsed seconds at which ``period`` begins."""
    return (period - 1) * PERIOD_SECONDS


def test_new_batch_is_worth_one_period() -> None:
    assert periods_elapsed(0) == 1
    assert produced_per_unit(0) == 1


def test_forty_days_is_two_periods() -> None:
    assert periods_elapsed(40 * DAY) == 2
    assert produced_per_unit(40 * DAY) == 2


def test_period_boundary_is_exact() -> None:
    assert produced_per_unit(PERIOD_SECONDS - 1) == 1
    assert produced_per_unit(PERIOD_SECONDS) == 2


@pytest.mark.parametrize(
    ("period", "expected"),
    [
        (1, 1),
        (11, 11),
        (12, 12),
        (13, 14),
        (23, 34),
        (24, 36),
        (25, 39),
        (36, 72),
        (60, 180),
        (71, 246),
        (72, 252),
    ],
)
def test_staircase_values(period: int, expected: int) -> None:
    assert produced_per_unit(_start_of(period)) == expected


@pytest.mark.parametrize("periods", [71, 72, 100, 10_000])
def test_production_caps_at_252(periods: int) -> None:
    assert produced_per_unit(periods * PERIOD_SECONDS) == 252
    assert produced_per_unit(periods * PERIOD_SECONDS + 12345) == MAX_PRODUCED_PER_UNIT


def test_production_never_decreases() -> None:
    previous = 0
    for period in range(1, MAX_PERIODS + 5):
        current = produced_per_unit(_start_of(period))
        assert current >= previous
        previous = current


def test_negative_elapsed_time_is_an_invariant_violation() -> None:
    with pytest.raises(ScheduleError):
        produced_per_unit(-1)


def test_batch_production_scales_with_size() -> None:
    assert batch_produced(1_000, 7, 1_000 + 40 * DAY) == 14


def test_batch_production_refuses_to_overflow() -> None:
    size = MAX_AMOUNT // 252 + 1
    assert batch_produced(0, size, 0) == size
    with pytest.raises(ArithmeticOverflow):
        batch_produced(0, size, 72 * PERIOD_SECONDS)


def test_total_production_sums_batches() -> None:
    batches = [(0, 1), (40 * DAY, 3)]
    assert total_produced(batches, 40 * DAY) == 2 + 3
    assert total_produced([], 40 * DAY) == 0


def test_total_production_refuses_to_overflow() -> None:
    with pytest.raises(ArithmeticOverflow):
        total_produced([(0, MAX_AMOUNT), (0, 1)], 0)


def test_schedule_table_covers_every_period() -> None:
    table = schedule_table()
    assert len(table) == MAX_PERIODS
    assert table[0] == (1, 1)
    assert table[-1] == (72, 252)
