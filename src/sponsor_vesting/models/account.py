# src/sponsor_vesting/models/account.py
"""SQLAlchemy models for vesting accounts and their purchase batches."""

from __future__ import annotations

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sponsor_vesting.db.session import Base

ACCOUNT_ID_LENGTH = 128


class VestingAccount(Base):
    """Per-account claim counter, created on the first activation."""

    __tablename__ = "vesting_account"
    __table_args__ = (
        CheckConstraint("claimed >= 0", name="ck_vesting_account_claimed"),
    )

    account_id: Mapped[str] = mapped_column(String(ACCOUNT_ID_LENGTH), primary_key=True)

    # Cumulative credits already reported as claimable; never decreases.
    claimed: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    batches: Mapped[list[PurchaseBatch]] = relationship(
        "PurchaseBatch",
        back_populates="account",
        order_by="PurchaseBatch.seq",
        cascade="all",
    )


class PurchaseBatch(Base):
    """One activation's worth of subscription units. Immutable once written."""

    __tablename__ = "purchase_batch"
    __table_args__ = (
        CheckConstraint("size > 0", name="ck_purchase_batch_size"),
        UniqueConstraint("account_id", "seq", name="uq_purchase_batch_account_seq"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_id: Mapped[str] = mapped_column(
        String(ACCOUNT_ID_LENGTH),
        ForeignKey("vesting_account.account_id"),
        nullable=False,
        index=True,
    )

    # Activation order within the account, starting at 0.
    seq: Mapped[int] = mapped_column(Integer, nullable=False)

    # Seconds since the epoch, stamped from the trusted clock.
    purchased_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    size: Mapped[int] = mapped_column(BigInteger, nullable=False)

    account: Mapped[VestingAccount] = relationship("VestingAccount", back_populates="batches")
