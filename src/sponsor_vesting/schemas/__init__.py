# src/sponsor_vesting/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .admin import PauseResponse, RoleChange, RoleChangeResponse, RolesResponse
from .token import BalanceResponse, MintRequest, SupplyResponse, TransferRequest
from .vesting import (
    AccountSummaryResponse,
    ActivateRequest,
    BatchDetail,
    BatchResponse,
    ClaimableResponse,
    ClaimResponse,
    ScheduleResponse,
    ScheduleRow,
)

__all__ = [
    "PauseResponse", "RoleChange", "RoleChangeResponse", "RolesResponse",
    "BalanceResponse", "MintRequest", "SupplyResponse", "TransferRequest",
    "AccountSummaryResponse", "ActivateRequest", "BatchDetail", "BatchResponse",
    "ClaimableResponse", "ClaimResponse", "ScheduleResponse", "ScheduleRow",
]
