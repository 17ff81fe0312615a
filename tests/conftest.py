# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BOOTSTRAP_ADMINS", '["admin"]')

from sponsor_vesting.api.v1.dependencies import get_clock
from sponsor_vesting.core.security import create_access_token
from sponsor_vesting.db.session import Base
from sponsor_vesting.db.session import get_db as app_get_session
from sponsor_vesting.main import app as fastapi_app
from sponsor_vesting.models.access import ROLE_MINTER, ROLE_PAUSER
from sponsor_vesting.services.access_control import AccessControl
from sponsor_vesting.services.token_ledger import TokenLedger
from sponsor_vesting.services.vesting_service import VestingService

TEST_DB_URL = "sqlite://"
T0 = 1_700_000_000
DAY = 24 * 3600


class FakeClock:
    """Manually advanced clock counting how often it is read."""

    def __init__(self, now: int = T0) -> None:
        self.now = now
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.now

    def advance(self, seconds: int) -> int:
        self.now += seconds
        return self.now


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def access(db_session: Session) -> AccessControl:
    return AccessControl(db_session, bootstrap_admins=["admin"])


@pytest.fixture()
def service(db_session: Session, clock: FakeClock, access: AccessControl) -> VestingService:
    return VestingService(db_session, clock=clock, access=access)


@pytest.fixture()
def fund(db_session: Session) -> Callable[[str, int], None]:
    """Give an account token units outside the service's authorization checks."""

    def _fund(account_id: str, amount: int) -> None:
        TokenLedger(db_session).mint(account_id, amount)
        db_session.commit()

    return _fund


@pytest.fixture()
def minter(db_session: Session, access: AccessControl) -> str:
    """Grant the minter and pauser roles to the ``minter`` account."""
    access.grant_role("admin", "minter", ROLE_MINTER)
    access.grant_role("admin", "minter", ROLE_PAUSER)
    db_session.commit()
    return "minter"


@pytest.fixture()
def app(db_session: Session, clock: FakeClock) -> Iterator[FastAPI]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    fastapi_app.dependency_overrides[app_get_session] = _get_session_override
    fastapi_app.dependency_overrides[get_clock] = lambda: clock
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.pop(app_get_session, None)
        fastapi_app.dependency_overrides.pop(get_clock, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Return a factory building bearer headers for an account id."""

    def _headers(account_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(account_id)}"}

    return _headers
