# src/sponsor_vesting/api/v1/endpoints/admin.py
"""Role management and pause switch endpoints."""

from fastapi import APIRouter

from sponsor_vesting.schemas.admin import (
    PauseResponse,
    RoleChange,
    RoleChangeResponse,
    RolesResponse,
)
from sponsor_vesting.services.pause import PauseSwitch

from ..dependencies import AccessControlDep, CurrentAccountDep, SessionDep

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/roles/{account_id}", response_model=RolesResponse)
async def get_roles(account_id: str, access: AccessControlDep) -> RolesResponse:
    return RolesResponse(account_id=account_id, roles=access.roles_of(account_id))


@router.post("/roles/grant", response_model=RoleChangeResponse)
async def grant_role(
    payload: RoleChange,
    caller: CurrentAccountDep,
    access: AccessControlDep,
    db: SessionDep,
) -> RoleChangeResponse:
    """Grant a role. Requires the admin role."""
    changed = access.grant_role(caller, payload.account_id, payload.role)
    db.commit()
    return RoleChangeResponse(account_id=payload.account_id, role=payload.role, changed=changed)


@router.post("/roles/revoke", response_model=RoleChangeResponse)
async def revoke_role(
    payload: RoleChange,
    caller: CurrentAccountDep,
    access: AccessControlDep,
    db: SessionDep,
) -> RoleChangeResponse:
    """Revoke a role. Requires the admin role."""
    changed = access.revoke_role(caller, payload.account_id, payload.role)
    db.commit()
    return RoleChangeResponse(account_id=payload.account_id, role=payload.role, changed=changed)


@router.get("/pause", response_model=PauseResponse)
async def get_pause_state(access: AccessControlDep, db: SessionDep) -> PauseResponse:
    return PauseResponse(paused=PauseSwitch(db, access).is_paused())


@router.post("/pause", response_model=PauseResponse)
async def pause(caller: CurrentAccountDep, access: AccessControlDep, db: SessionDep) -> PauseResponse:
    """Block activation, claims, minting and transfers. Requires the pauser role."""
    PauseSwitch(db, access).pause(caller)
    db.commit()
    return PauseResponse(paused=True)


@router.post("/unpause", response_model=PauseResponse)
async def unpause(caller: CurrentAccountDep, access: AccessControlDep, db: SessionDep) -> PauseResponse:
    PauseSwitch(db, access).unpause(caller)
    db.commit()
    return PauseResponse(paused=False)
