"""Per-account purchase batches and the claimed-to-date counter."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from sponsor_vesting.core import schedule
from sponsor_vesting.core.errors import NothingToClaim, ScheduleError
from sponsor_vesting.models import PurchaseBatch, VestingAccount
from sponsor_vesting.services.token_ledger import require_positive

logger = logging.getLogger(__name__)

__all__ = ["BatchLedger", "BatchRef"]


@dataclass(frozen=True)
class BatchRef:
    """Immutable view of one stored batch."""

    account_id: str
    seq: int
    purchased_at: int
    size: int

    @classmethod
    def from_model(cls, batch: PurchaseBatch) -> BatchRef:
        return cls(
            account_id=batch.account_id,
            seq=int(batch.seq),
            purchased_at=int(batch.purchased_at),
            size=int(batch.size),
        )

    def produced(self, now: int) -> int:
        """Credits this batch has produced by ``now``."""
        return schedule.batch_produced(self.purchased_at, self.size, now)


class BatchLedger:
    """Append-only batch bookkeeping over an explicit session.

    The ledger flushes but never commits; callers wrap each operation in their
    own transaction and mutual-exclusion region.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_account(self, account_id: str, *, for_update: bool = False) -> VestingAccount | None:
        """Return the stored account, reloading it from the database."""
        return self.db.get(
            VestingAccount,
            account_id,
            populate_existing=True,
            with_for_update=for_update or None,
        )

    def batches(self, account_id: str) -> list[BatchRef]:
        """Return the account's batches in activation order."""
        rows = (
            self.db.query(PurchaseBatch)
            .filter(PurchaseBatch.account_id == account_id)
            .order_by(PurchaseBatch.seq)
            .all()
        )
        return [BatchRef.from_model(row) for row in rows]

    def claimed(self, account_id: str) -> int:
        account = self.db.get(VestingAccount, account_id)
        return int(account.claimed) if account is not None else 0

    def activate(self, account_id: str, size: int, now: int) -> BatchRef:
        """Append a batch of ``size`` units purchased at ``now``.

        Raises:
            InvalidAmount: If ``size`` is not a positive integer.
            ArithmeticOverflow: If the account's lifetime production would
                no longer be representable.
            ScheduleError: If ``now`` precedes the account's latest batch.
        """
        require_positive(size)
        account = self.get_account(account_id, for_update=True)
        existing = self.batches(account_id) if account is not None else []

        if existing and now < existing[-1].purchased_at:
            raise ScheduleError(
                f"clock moved backwards for {account_id}: {now} < {existing[-1].purchased_at}"
            )

        # Every batch must be able to reach the cap without overflowing.
        lifetime_units = size
        for batch in existing:
            lifetime_units = schedule.checked_add(lifetime_units, batch.size)
        schedule.checked_mul(lifetime_units, schedule.MAX_PRODUCED_PER_UNIT)

        if account is None:
            account = VestingAccount(account_id=account_id, claimed=0)
            self.db.add(account)

        batch = PurchaseBatch(
            account_id=account_id,
            seq=len(existing),
            purchased_at=now,
            size=size,
        )
        self.db.add(batch)
        self.db.flush()
        return BatchRef.from_model(batch)

    def total_produced(self, account_id: str, now: int) -> int:
        """Cumulative credits produced by every batch of the account at ``now``."""
        return schedule.total_produced(
            ((batch.purchased_at, batch.size) for batch in self.batches(account_id)),
            now,
        )

    def claimable(self, account_id: str, now: int) -> int:
        """Produced credits not yet claimed; zero for unknown accounts."""
        account = self.get_account(account_id)
        if account is None:
            return 0
        owed = self.total_produced(account_id, now) - int(account.claimed)
        if owed < 0:
            raise ScheduleError(
                f"{account_id} claimed {account.claimed} but produced only {owed + account.claimed}"
            )
        return owed

    def claim(self, account_id: str, now: int) -> int:
        """Advance the claimed counter by everything claimable and return the delta.

        Raises:
            NothingToClaim: If nothing new has vested since the last claim.
        """
        account = self.get_account(account_id, for_update=True)
        amount = self.claimable(account_id, now) if account is not None else 0
        if amount == 0:
            raise NothingToClaim(f"nothing to claim for {account_id}")
        account.claimed = int(account.claimed) + amount
        self.db.flush()
        return amount
