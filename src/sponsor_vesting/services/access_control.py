"""Role-based capability checks."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from sponsor_vesting.core.errors import Unauthorized, UnknownRole
from sponsor_vesting.core.settings import settings
from sponsor_vesting.models import RoleGrant
from sponsor_vesting.models.access import ROLE_ADMIN, ROLES

logger = logging.getLogger(__name__)


class AccessControl:
    """Grant, revoke and check roles recorded in ``role_grant``.

    Accounts listed in ``bootstrap_admins`` hold the admin role implicitly so
    a fresh deployment can hand out its first grants.
    """

    def __init__(self, db: Session, bootstrap_admins: Iterable[str] | None = None) -> None:
        self.db = db
        admins = settings.bootstrap_admins if bootstrap_admins is None else bootstrap_admins
        self.bootstrap_admins = frozenset(admins)

    @staticmethod
    def _validate_role(role: str) -> str:
        if role not in ROLES:
            raise UnknownRole(f"unknown role: {role!r}")
        return role

    def has_role(self, account_id: str, role: str) -> bool:
        """Return True if ``account_id`` holds ``role``."""
        self._validate_role(role)
        if role == ROLE_ADMIN and account_id in self.bootstrap_admins:
            return True
        return self.db.get(RoleGrant, (account_id, role)) is not None

    def require_role(self, account_id: str, role: str) -> None:
        """Raise ``Unauthorized`` unless ``account_id`` holds ``role``."""
        if not self.has_role(account_id, role):
            logger.warning("Denied %s: missing role %s", account_id, role)
            raise Unauthorized(f"{account_id} lacks the {role} role")

    def roles_of(self, account_id: str) -> list[str]:
        """Return the sorted roles held by ``account_id``."""
        return sorted(role for role in ROLES if self.has_role(account_id, role))

    def grant_role(self, caller: str, account_id: str, role: str) -> bool:
        """Grant ``role`` to ``account_id``; returns False if already held."""
        self._validate_role(role)
        self.require_role(caller, ROLE_ADMIN)
        if self.db.get(RoleGrant, (account_id, role)) is not None:
            return False
        self.db.add(RoleGrant(account_id=account_id, role=role))
        self.db.flush()
        logger.info("%s granted %s to %s", caller, role, account_id)
        return True

    def revoke_role(self, caller: str, account_id: str, role: str) -> bool:
        """Revoke ``role`` from ``account_id``; returns False if it was not held."""
        self._validate_role(role)
        self.require_role(caller, ROLE_ADMIN)
        grant = self.db.get(RoleGrant, (account_id, role))
        if grant is None:
            return False
        self.db.delete(grant)
        self.db.flush()
        logger.info("%s revoked %s from %s", caller, role, account_id)
        return True
