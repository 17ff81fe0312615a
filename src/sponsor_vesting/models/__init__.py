# src/sponsor_vesting/models/__init__.py
"""SQLAlchemy models for the vesting ledger."""

from .access import RoleGrant
from .account import PurchaseBatch, VestingAccount
from .event import LedgerEvent
from .system import PauseState
from .token import TokenBalance, TokenSupply

__all__ = [
    "LedgerEvent",
    "PauseState",
    "PurchaseBatch", "VestingAccount",
    "RoleGrant",
    "TokenBalance", "TokenSupply",
]
