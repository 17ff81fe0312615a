# src/sponsor_vesting/schemas/token.py
"""Token ledger Pydantic schemas."""

from pydantic import BaseModel, Field


class MintRequest(BaseModel):
    """Schema for issuing units, usually the amount returned by a claim."""

    account_id: str = Field(..., min_length=1, max_length=128)
    amount: int


class TransferRequest(BaseModel):
    to: str = Field(..., min_length=1, max_length=128)
    amount: int


class BalanceResponse(BaseModel):
    account_id: str
    balance: int


class SupplyResponse(BaseModel):
    total_supply: int
