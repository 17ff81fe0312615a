# src/sponsor_vesting/schemas/admin.py
"""Schemas for role management and the pause switch."""

from pydantic import BaseModel, Field


class RoleChange(BaseModel):
    """Grant or revoke a role for an account."""

    account_id: str = Field(..., min_length=1, max_length=128)
    role: str = Field(..., description="One of admin, minter, pauser")


class RoleChangeResponse(BaseModel):
    account_id: str
    role: str
    changed: bool


class RolesResponse(BaseModel):
    account_id: str
    roles: list[str]


class PauseResponse(BaseModel):
    paused: bool
