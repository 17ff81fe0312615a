# src/sponsor_vesting/api/v1/endpoints/tokens.py
"""Token ledger endpoints."""

from fastapi import APIRouter, status
from sqlalchemy.orm import Session

from sponsor_vesting.schemas.token import (
    BalanceResponse,
    MintRequest,
    SupplyResponse,
    TransferRequest,
)
from sponsor_vesting.services.token_ledger import TokenLedger

from ..dependencies import CurrentAccountDep, SessionDep, VestingServiceDep

router = APIRouter(prefix="/tokens", tags=["tokens"])


def _ledger(db: Session) -> TokenLedger:
    return TokenLedger(db)


@router.get("/supply", response_model=SupplyResponse)
async def get_supply(db: SessionDep) -> SupplyResponse:
    return SupplyResponse(total_supply=_ledger(db).total_supply())


@router.get("/{account_id}/balance", response_model=BalanceResponse)
async def get_balance(account_id: str, db: SessionDep) -> BalanceResponse:
    return BalanceResponse(account_id=account_id, balance=_ledger(db).balance_of(account_id))


@router.post("/mint", status_code=status.HTTP_201_CREATED, response_model=BalanceResponse)
async def mint(
    payload: MintRequest,
    caller: CurrentAccountDep,
    service: VestingServiceDep,
) -> BalanceResponse:
    """Issue units to an account. Requires the minter role."""
    balance = service.mint(caller, payload.account_id, payload.amount)
    return BalanceResponse(account_id=payload.account_id, balance=balance)


@router.post("/transfer", response_model=BalanceResponse)
async def transfer(
    payload: TransferRequest,
    caller: CurrentAccountDep,
    service: VestingServiceDep,
) -> BalanceResponse:
    """Move units from the caller to another account; returns the caller's balance."""
    service.transfer(caller, payload.to, payload.amount)
    return BalanceResponse(account_id=caller, balance=service.tokens.balance_of(caller))
