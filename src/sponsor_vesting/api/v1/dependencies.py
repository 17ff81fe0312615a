"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from sponsor_vesting.core.security import JWTError, decode_subject
from sponsor_vesting.db.session import get_db
from sponsor_vesting.db.time import Clock, epoch_seconds
from sponsor_vesting.services.access_control import AccessControl
from sponsor_vesting.services.vesting_service import VestingService

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_clock() -> Clock:
    """Return the trusted clock used to stamp and evaluate batches."""
    return epoch_seconds


ClockDep = Annotated[Clock, Depends(get_clock)]


def get_current_account(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> str:
    """Return the account id named by the bearer token.

    Raises:
        HTTPException: If the token is invalid or has no subject
    """
    try:
        subject = decode_subject(credentials.credentials)
    except JWTError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err
    if subject is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    return subject


def get_access_control(db: SessionDep) -> AccessControl:
    return AccessControl(db)


def get_vesting_service(db: SessionDep, clock: ClockDep) -> VestingService:
    """Build the vesting service bound to the request's session and clock."""
    return VestingService(db, clock=clock)


# Type aliases for dependencies
CurrentAccountDep = Annotated[str, Depends(get_current_account)]
AccessControlDep = Annotated[AccessControl, Depends(get_access_control)]
VestingServiceDep = Annotated[VestingService, Depends(get_vesting_service)]
