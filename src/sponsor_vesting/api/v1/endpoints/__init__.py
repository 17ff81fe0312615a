# src/sponsor_vesting/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .system import router as system_router
from .tokens import router as tokens_router
from .vesting import router as vesting_router

__all__ = [
    "admin_router",
    "system_router",
    "tokens_router",
    "vesting_router",
]
