"""Service layer for the vesting ledger."""

from .access_control import AccessControl
from .batch_ledger import BatchLedger, BatchRef
from .pause import PauseSwitch
from .token_ledger import TokenLedger
from .vesting_service import VestingService

__all__ = [
    "AccessControl",
    "BatchLedger",
    "BatchRef",
    "PauseSwitch",
    "TokenLedger",
    "VestingService",
]
