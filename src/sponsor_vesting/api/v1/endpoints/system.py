"""System and transparency endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from sponsor_vesting.core import schedule
from sponsor_vesting.core.settings import settings
from sponsor_vesting.models import LedgerEvent, PurchaseBatch, VestingAccount

from ..dependencies import ClockDep, SessionDep

router = APIRouter(prefix="/system", tags=["system", "transparency"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of public runtime configuration.

    Excludes secrets and connection strings.
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "jwt_algorithm": settings.jwt_algorithm,
            "debug": settings.debug,
        },
        "schedule": {
            "period_seconds": schedule.PERIOD_SECONDS,
            "max_periods": schedule.MAX_PERIODS,
            "max_produced_per_unit": schedule.MAX_PRODUCED_PER_UNIT,
            "max_amount": schedule.MAX_AMOUNT,
        },
    }


@router.get("/clock")
async def get_clock_reading(clock: ClockDep) -> dict[str, int]:
    """Expose the clock used to stamp and evaluate batches."""
    return {"now": clock()}


@router.get("/activity-stats")
async def get_activity_stats(db: SessionDep) -> dict[str, int]:
    """Ledger-wide counters.

    Returns:
        Dictionary with counts of accounts, batches and recorded events
    """
    accounts = db.query(VestingAccount).count() or 0
    batches = db.query(PurchaseBatch).count() or 0
    events = db.query(LedgerEvent).count() or 0
    return {
        "accounts": int(accounts),
        "batches": int(batches),
        "events": int(events),
    }
