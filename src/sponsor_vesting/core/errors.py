"""Typed failures raised by the vesting ledger and its collaborators."""
from __future__ import annotations


class VestingError(Exception):
    """Base class for every refusal reported to callers."""

    code: str = "vesting_error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.__class__.__doc__ or self.code)

    @property
    def detail(self) -> str:
        return str(self.args[0])


class InvalidAmount(VestingError):
    """Amount must be a positive integer."""

    code = "invalid_amount"


class NothingToClaim(VestingError):
    """No vested production is waiting to be claimed."""

    code = "nothing_to_claim"


class Unauthorized(VestingError):
    """Caller lacks the capability required for this operation."""

    code = "unauthorized"


class ArithmeticOverflow(VestingError):
    """Amount exceeds the representable range."""

    code = "arithmetic_overflow"


class InsufficientBalance(VestingError):
    """Token balance is too low for this operation."""

    code = "insufficient_balance"


class LedgerPaused(VestingError):
    """Ledger operations are paused."""

    code = "ledger_paused"


class UnknownRole(VestingError):
    """Role name is not recognised."""

    code = "unknown_role"


class ScheduleError(AssertionError):
    """Internal invariant violated while computing vested production.

    Not a caller error: it means stored state contradicts the clock
    (a batch stamped in the future, or more claimed than produced).
    """
