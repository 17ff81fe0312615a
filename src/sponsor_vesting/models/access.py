# src/sponsor_vesting/models/access.py
"""Role grants backing the access-control collaborator."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from sponsor_vesting.db.session import Base
from sponsor_vesting.models.account import ACCOUNT_ID_LENGTH

ROLE_ADMIN = "admin"
ROLE_MINTER = "minter"
ROLE_PAUSER = "pauser"
ROLES = frozenset({ROLE_ADMIN, ROLE_MINTER, ROLE_PAUSER})


class RoleGrant(Base):
    """Capability held by an account."""

    __tablename__ = "role_grant"

    # Composite primary key prevents duplicate grants.
    account_id: Mapped[str] = mapped_column(String(ACCOUNT_ID_LENGTH), primary_key=True)
    role: Mapped[str] = mapped_column(String(32), primary_key=True)
