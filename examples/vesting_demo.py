#!/usr/bin/env python3
"""Demonstration of the sponsorship vesting ledger.

This script shows how to:
1. Fund an account and activate a batch of subscription units
2. Watch sponsorship credits vest period by period
3. Claim the vested amount and mint it as a separate step

Usage:
    python examples/vesting_demo.py
"""

import os
import sys

# Add the src directory to the path so we can import sponsor_vesting modules
sys.path.insert(0, "src")
os.environ.setdefault("SECRET_KEY", "demo-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from sponsor_vesting.core.schedule import PERIOD_SECONDS
from sponsor_vesting.db.session import Base
from sponsor_vesting.models.access import ROLE_MINTER
from sponsor_vesting.services import AccessControl, TokenLedger, VestingService

START = 1_700_000_000


class DemoClock:
    def __init__(self) -> None:
        self.now = START

    def __call__(self) -> int:
        return self.now


def main() -> None:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    db = sessionmaker(bind=engine, expire_on_commit=False)()
    clock = DemoClock()

    access = AccessControl(db, bootstrap_admins=["admin"])
    access.grant_role("admin", "treasury", ROLE_MINTER)
    TokenLedger(db).mint("alice", 10)
    db.commit()

    service = VestingService(db, clock=clock, access=access)
    batch = service.activate("alice", 10)
    print(f"Activated batch {batch.seq} of {batch.size} units at {batch.purchased_at}")

    for period in (1, 2, 12, 13, 24, 72, 90):
        clock.now = START + (period - 1) * PERIOD_SECONDS
        claimable, _ = service.claimable("alice")
        print(f"period {period:>3}: claimable {claimable:>5}")

    result = service.claim("treasury", "alice")
    balance = service.mint("treasury", "alice", result.amount)
    print(f"Claimed {result.amount} credits; alice now holds {balance}")


if __name__ == "__main__":
    main()
