"""Orchestration of activation, claim and mint across the ledger collaborators.

Each mutating operation reads the clock once, runs inside the mutual-exclusion
region of the accounts it touches and commits as a single transaction. A
refused operation rolls back, leaving batches, claimed counters and balances
exactly as they were.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from sponsor_vesting.core import schedule
from sponsor_vesting.core.errors import VestingError
from sponsor_vesting.db.time import Clock, epoch_seconds
from sponsor_vesting.models import LedgerEvent
from sponsor_vesting.models.access import ROLE_MINTER
from sponsor_vesting.models.event import EVENT_ACTIVATED, EVENT_CLAIMED, EVENT_MINTED
from sponsor_vesting.services.access_control import AccessControl
from sponsor_vesting.services.batch_ledger import BatchLedger, BatchRef
from sponsor_vesting.services.locks import SUPPLY_KEY, account_key, holding
from sponsor_vesting.services.pause import PauseSwitch
from sponsor_vesting.services.token_ledger import TokenLedger, require_positive

logger = logging.getLogger(__name__)

__all__ = ["AccountSummary", "BatchSummary", "ClaimResult", "VestingService"]


@dataclass(frozen=True)
class BatchSummary:
    seq: int
    purchased_at: int
    size: int
    periods: int
    produced: int


@dataclass(frozen=True)
class AccountSummary:
    account_id: str
    now: int
    claimed: int
    total_produced: int
    claimable: int
    batches: list[BatchSummary] = field(default_factory=list)


@dataclass(frozen=True)
class ClaimResult:
    account_id: str
    amount: int
    claimed: int
    now: int


class VestingService:
    """Entry point used by the API for every ledger operation."""

    def __init__(
        self,
        db: Session,
        clock: Clock = epoch_seconds,
        access: AccessControl | None = None,
    ) -> None:
        self.db = db
        self.clock = clock
        self.access = access or AccessControl(db)
        self.pause_switch = PauseSwitch(db, self.access)
        self.batches = BatchLedger(db)
        self.tokens = TokenLedger(db)

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        try:
            yield
            self.db.commit()
        except VestingError as exc:
            self.db.rollback()
            logger.warning("Refused ledger operation: %s", exc)
            raise
        except Exception:
            self.db.rollback()
            raise

    def _record(self, kind: str, account_id: str, amount: int, now: int) -> None:
        self.db.add(LedgerEvent(kind=kind, account_id=account_id, amount=amount, occurred_at=now))

    def activate(self, caller: str, size: int) -> BatchRef:
        """Burn ``size`` of the caller's units and open a vesting batch for them."""
        now = self.clock()
        with holding(account_key(caller), SUPPLY_KEY), self._transaction():
            self.pause_switch.ensure_active()
            require_positive(size)
            self.tokens.burn(caller, size)
            batch = self.batches.activate(caller, size, now)
            self._record(EVENT_ACTIVATED, caller, size, now)
        logger.info("Activated %d units for %s (batch %d)", size, caller, batch.seq)
        return batch

    def claim(self, caller: str, account_id: str) -> ClaimResult:
        """Recognise everything vested for ``account_id``; minting is a separate step."""
        now = self.clock()
        with holding(account_key(account_id)), self._transaction():
            self.pause_switch.ensure_active()
            self.access.require_role(caller, ROLE_MINTER)
            amount = self.batches.claim(account_id, now)
            claimed = self.batches.claimed(account_id)
            self._record(EVENT_CLAIMED, account_id, amount, now)
        logger.info("Claimed %d credits for %s", amount, account_id)
        return ClaimResult(account_id=account_id, amount=amount, claimed=claimed, now=now)

    def mint(self, caller: str, account_id: str, amount: int) -> int:
        """Issue ``amount`` units to ``account_id`` and return its new balance."""
        now = self.clock()
        with holding(account_key(account_id), SUPPLY_KEY), self._transaction():
            self.pause_switch.ensure_active()
            self.access.require_role(caller, ROLE_MINTER)
            balance = self.tokens.mint(account_id, amount)
            self._record(EVENT_MINTED, account_id, amount, now)
        logger.info("Minted %d units to %s", amount, account_id)
        return balance

    def transfer(self, caller: str, recipient: str, amount: int) -> None:
        """Move units between holders while the ledger is not paused."""
        with holding(account_key(caller), account_key(recipient)), self._transaction():
            self.pause_switch.ensure_active()
            self.tokens.transfer(caller, recipient, amount)

    def claimable(self, account_id: str) -> tuple[int, int]:
        """Return ``(claimable, now)`` for the account."""
        now = self.clock()
        return self.batches.claimable(account_id, now), now

    def summary(self, account_id: str) -> AccountSummary:
        now = self.clock()
        refs = self.batches.batches(account_id)
        batches = [
            BatchSummary(
                seq=ref.seq,
                purchased_at=ref.purchased_at,
                size=ref.size,
                periods=schedule.periods_elapsed(now - ref.purchased_at),
                produced=ref.produced(now),
            )
            for ref in refs
        ]
        total = schedule.total_produced(((ref.purchased_at, ref.size) for ref in refs), now)
        claimed = self.batches.claimed(account_id)
        return AccountSummary(
            account_id=account_id,
            now=now,
            claimed=claimed,
            total_produced=total,
            claimable=self.batches.claimable(account_id, now),
            batches=batches,
        )
