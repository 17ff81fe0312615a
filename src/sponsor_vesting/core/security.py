"""Bearer token helpers identifying the calling account."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from sponsor_vesting.core.settings import settings

__all__ = ["JWTError", "create_access_token", "decode_subject"]


def create_access_token(account_id: str, extra_claims: dict[str, str] | None = None) -> str:
    """Create a JWT access token whose subject is ``account_id``."""
    to_encode: dict[str, object] = {"sub": account_id}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_subject(token: str) -> str | None:
    """Return the token subject, or None if the token carries none.

    Raises:
        JWTError: If the token is malformed, expired or badly signed.
    """
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    subject = payload.get("sub")
    return subject if isinstance(subject, str) and subject else None
