# src/sponsor_vesting/models/event.py
"""SQLAlchemy model for ledger notifications."""

from sqlalchemy import VARCHAR, BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sponsor_vesting.db.session import Base
from sponsor_vesting.models.account import ACCOUNT_ID_LENGTH

EVENT_ACTIVATED = "activated"
EVENT_CLAIMED = "claimed"
EVENT_MINTED = "minted"


class LedgerEvent(Base):
    """Append-only record of a committed ledger operation."""

    __tablename__ = "ledger_event"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[str] = mapped_column(VARCHAR(20), nullable=False)  # 'activated', 'claimed', 'minted'
    account_id: Mapped[str] = mapped_column(String(ACCOUNT_ID_LENGTH), nullable=False, index=True)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    occurred_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
