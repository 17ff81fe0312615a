# src/sponsor_vesting/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    admin_router,
    system_router,
    tokens_router,
    vesting_router,
)

__all__ = [
    "admin_router",
    "system_router",
    "tokens_router",
    "vesting_router",
]
