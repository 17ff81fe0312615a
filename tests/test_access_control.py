"""Tests for roles and the pause switch."""

import pytest
from sqlalchemy.orm import Session

from sponsor_vesting.core.errors import LedgerPaused, Unauthorized, UnknownRole
from sponsor_vesting.models.access import ROLE_ADMIN, ROLE_MINTER, ROLE_PAUSER
from sponsor_vesting.services.access_control import AccessControl
from sponsor_vesting.services.pause import PauseSwitch


def test_bootstrap_admin_holds_admin_only(access: AccessControl) -> None:
    assert access.has_role("admin", ROLE_ADMIN)
    assert not access.has_role("admin", ROLE_MINTER)
    assert access.roles_of("admin") == [ROLE_ADMIN]


def test_grant_and_revoke(access: AccessControl) -> None:
    assert access.grant_role("admin", "alice", ROLE_MINTER) is True
    assert access.grant_role("admin", "alice", ROLE_MINTER) is False
    assert access.has_role("alice", ROLE_MINTER)
    assert access.revoke_role("admin", "alice", ROLE_MINTER) is True
    assert access.revoke_role("admin", "alice", ROLE_MINTER) is False
    assert not access.has_role("alice", ROLE_MINTER)


def test_granted_admin_can_grant(access: AccessControl) -> None:
    access.grant_role("admin", "carol", ROLE_ADMIN)
    assert access.grant_role("carol", "dave", ROLE_PAUSER)


def test_non_admin_cannot_grant(access: AccessControl) -> None:
    with pytest.raises(Unauthorized):
        access.grant_role("alice", "alice", ROLE_MINTER)
    assert not access.has_role("alice", ROLE_MINTER)


def test_require_role(access: AccessControl) -> None:
    with pytest.raises(Unauthorized):
        access.require_role("alice", ROLE_MINTER)
    access.grant_role("admin", "alice", ROLE_MINTER)
    access.require_role("alice", ROLE_MINTER)


def test_unknown_role_is_rejected(access: AccessControl) -> None:
    with pytest.raises(UnknownRole):
        access.has_role("alice", "superuser")
    with pytest.raises(UnknownRole):
        access.grant_role("admin", "alice", "superuser")


def test_pause_switch(db_session: Session, access: AccessControl) -> None:
    switch = PauseSwitch(db_session, access)
    assert not switch.is_paused()
    switch.ensure_active()

    with pytest.raises(Unauthorized):
        switch.pause("alice")

    access.grant_role("admin", "ops", ROLE_PAUSER)
    switch.pause("ops")
    assert switch.is_paused()
    with pytest.raises(LedgerPaused):
        switch.ensure_active()

    switch.unpause("ops")
    assert not switch.is_paused()
