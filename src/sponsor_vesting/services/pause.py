"""Pause switch blocking ledger mutations."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from sponsor_vesting.core.errors import LedgerPaused
from sponsor_vesting.models import PauseState
from sponsor_vesting.models.access import ROLE_PAUSER
from sponsor_vesting.services.access_control import AccessControl

logger = logging.getLogger(__name__)


class PauseSwitch:
    """Single global switch; only pausers may flip it."""

    def __init__(self, db: Session, access: AccessControl) -> None:
        self.db = db
        self.access = access

    def _state(self) -> PauseState:
        state = self.db.get(PauseState, 1, populate_existing=True)
        if state is None:
            state = PauseState(id=1, paused=False)
            self.db.add(state)
        return state

    def is_paused(self) -> bool:
        state = self.db.get(PauseState, 1, populate_existing=True)
        return bool(state.paused) if state is not None else False

    def ensure_active(self) -> None:
        """Raise ``LedgerPaused`` while the switch is on."""
        if self.is_paused():
            raise LedgerPaused()

    def _set(self, caller: str, paused: bool) -> None:
        self.access.require_role(caller, ROLE_PAUSER)
        state = self._state()
        state.paused = paused
        self.db.flush()
        logger.info("%s %s the ledger", caller, "paused" if paused else "unpaused")

    def pause(self, caller: str) -> None:
        self._set(caller, True)

    def unpause(self, caller: str) -> None:
        self._set(caller, False)
