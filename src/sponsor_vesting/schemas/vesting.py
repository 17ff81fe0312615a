# src/sponsor_vesting/schemas/vesting.py
"""Vesting-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ActivateRequest(BaseModel):
    """Schema for activating purchased subscription units."""

    size: int = Field(..., description="Number of units to burn into a new batch")


class BatchResponse(BaseModel):
    """A single purchase batch."""

    model_config = ConfigDict(from_attributes=True)

    account_id: str
    seq: int
    purchased_at: int
    size: int


class BatchDetail(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    seq: int
    purchased_at: int
    size: int
    periods: int = Field(..., description="Started 30-day periods, capped at 72")
    produced: int


class AccountSummaryResponse(BaseModel):
    """Vesting position of an account at `now`."""

    model_config = ConfigDict(from_attributes=True)

    account_id: str
    now: int
    claimed: int
    total_produced: int
    claimable: int
    batches: list[BatchDetail]


class ClaimableResponse(BaseModel):
    account_id: str
    claimable: int
    now: int


class ClaimResponse(BaseModel):
    """Amount recognised by a claim; it still has to be minted."""

    model_config = ConfigDict(from_attributes=True)

    account_id: str
    amount: int
    claimed: int
    now: int


class ScheduleRow(BaseModel):
    period: int
    produced_per_unit: int


class ScheduleResponse(BaseModel):
    period_seconds: int
    max_periods: int
    rows: list[ScheduleRow]
