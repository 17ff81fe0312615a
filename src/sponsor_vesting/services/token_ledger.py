"""Fungible token ledger holding balances and total supply."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from sponsor_vesting.core.errors import InsufficientBalance, InvalidAmount
from sponsor_vesting.core.schedule import MAX_AMOUNT, checked_add
from sponsor_vesting.models import TokenBalance, TokenSupply

logger = logging.getLogger(__name__)

__all__ = ["TokenLedger", "require_positive"]


def require_positive(amount: int) -> int:
    """Return ``amount`` if it is a positive integer, else raise ``InvalidAmount``."""
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidAmount(f"amount must be a positive integer, got {amount!r}")
    if amount > MAX_AMOUNT:
        raise InvalidAmount(f"amount exceeds {MAX_AMOUNT}")
    return amount


class TokenLedger:
    """Mint, burn and transfer token units stored in the session's database.

    Changes are flushed but never committed; the caller owns the transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _balance_row(self, account_id: str) -> TokenBalance:
        row = self.db.get(TokenBalance, account_id, populate_existing=True)
        if row is None:
            row = TokenBalance(account_id=account_id, balance=0)
            self.db.add(row)
        return row

    def _supply_row(self) -> TokenSupply:
        row = self.db.get(TokenSupply, 1, populate_existing=True)
        if row is None:
            row = TokenSupply(id=1, total=0)
            self.db.add(row)
        return row

    def balance_of(self, account_id: str) -> int:
        """Return the account's balance, zero for unknown accounts."""
        row = self.db.get(TokenBalance, account_id)
        return int(row.balance) if row is not None else 0

    def total_supply(self) -> int:
        """Return the number of units in circulation."""
        row = self.db.get(TokenSupply, 1)
        return int(row.total) if row is not None else 0

    def mint(self, account_id: str, amount: int) -> int:
        """Create ``amount`` units for ``account_id`` and return the new balance."""
        require_positive(amount)
        supply = self._supply_row()
        balance = self._balance_row(account_id)
        supply.total = checked_add(int(supply.total or 0), amount)
        balance.balance = checked_add(int(balance.balance or 0), amount)
        self.db.flush()
        logger.debug("Minted %d units to %s", amount, account_id)
        return int(balance.balance)

    def burn(self, account_id: str, amount: int) -> int:
        """Destroy ``amount`` units held by ``account_id`` and return the new balance."""
        require_positive(amount)
        balance = self._balance_row(account_id)
        held = int(balance.balance or 0)
        if held < amount:
            raise InsufficientBalance(f"{account_id} holds {held}, cannot burn {amount}")
        supply = self._supply_row()
        balance.balance = held - amount
        supply.total = int(supply.total) - amount
        self.db.flush()
        logger.debug("Burned %d units from %s", amount, account_id)
        return int(balance.balance)

    def transfer(self, sender: str, recipient: str, amount: int) -> None:
        """Move ``amount`` units from ``sender`` to ``recipient``."""
        require_positive(amount)
        source = self._balance_row(sender)
        held = int(source.balance or 0)
        if held < amount:
            raise InsufficientBalance(f"{sender} holds {held}, cannot transfer {amount}")
        if sender == recipient:
            return
        target = self._balance_row(recipient)
        target.balance = checked_add(int(target.balance or 0), amount)
        source.balance = held - amount
        self.db.flush()
