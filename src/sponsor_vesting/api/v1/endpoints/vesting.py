# src/sponsor_vesting/api/v1/endpoints/vesting.py
"""Vesting endpoints: activation, claimable reads and claims."""

from fastapi import APIRouter, status

from sponsor_vesting.core import schedule
from sponsor_vesting.schemas.vesting import (
    AccountSummaryResponse,
    ActivateRequest,
    BatchResponse,
    ClaimableResponse,
    ClaimResponse,
    ScheduleResponse,
    ScheduleRow,
)

from ..dependencies import CurrentAccountDep, VestingServiceDep

router = APIRouter(prefix="/vesting", tags=["vesting"])


@router.get("/schedule", response_model=ScheduleResponse)
async def get_schedule() -> ScheduleResponse:
    """Return cumulative credits per unit for every period of the schedule."""
    return ScheduleResponse(
        period_seconds=schedule.PERIOD_SECONDS,
        max_periods=schedule.MAX_PERIODS,
        rows=[
            ScheduleRow(period=period, produced_per_unit=produced)
            for period, produced in schedule.schedule_table()
        ],
    )


@router.post("/activate", status_code=status.HTTP_201_CREATED, response_model=BatchResponse)
async def activate(
    payload: ActivateRequest,
    caller: CurrentAccountDep,
    service: VestingServiceDep,
) -> BatchResponse:
    """Burn the caller's units and open a new vesting batch."""
    batch = service.activate(caller, payload.size)
    return BatchResponse.model_validate(batch)


@router.get("/{account_id}", response_model=AccountSummaryResponse)
async def get_account_summary(account_id: str, service: VestingServiceDep) -> AccountSummaryResponse:
    """Return claimed, produced and claimable totals with per-batch detail."""
    return AccountSummaryResponse.model_validate(service.summary(account_id))


@router.get("/{account_id}/claimable", response_model=ClaimableResponse)
async def get_claimable(account_id: str, service: VestingServiceDep) -> ClaimableResponse:
    amount, now = service.claimable(account_id)
    return ClaimableResponse(account_id=account_id, claimable=amount, now=now)


@router.post("/{account_id}/claim", response_model=ClaimResponse)
async def claim(
    account_id: str,
    caller: CurrentAccountDep,
    service: VestingServiceDep,
) -> ClaimResponse:
    """Recognise vested credits for an account. Requires the minter role."""
    return ClaimResponse.model_validate(service.claim(caller, account_id))
