# src/sponsor_vesting/models/system.py
"""System-level switches."""

from sqlalchemy import Boolean, Integer
from sqlalchemy.orm import Mapped, mapped_column

from sponsor_vesting.db.session import Base


class PauseState(Base):
    """Single-row pause switch for ledger operations."""

    __tablename__ = "pause_state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=1)
    paused: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
