# src/sponsor_vesting/models/token.py
"""Balances and supply of the fungible token ledger."""

from sqlalchemy import BigInteger, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sponsor_vesting.db.session import Base
from sponsor_vesting.models.account import ACCOUNT_ID_LENGTH


class TokenBalance(Base):
    """Token units held by one account."""

    __tablename__ = "token_balance"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_token_balance_balance"),
    )

    account_id: Mapped[str] = mapped_column(String(ACCOUNT_ID_LENGTH), primary_key=True)
    balance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)


class TokenSupply(Base):
    """Single-row total supply counter."""

    __tablename__ = "token_supply"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=1)
    total: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
