# src/sponsor_vesting/main.py
"""Main entry point for the vesting ledger API."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from sponsor_vesting.api.v1 import admin_router, system_router, tokens_router, vesting_router
from sponsor_vesting.core.errors import (
    ArithmeticOverflow,
    InsufficientBalance,
    InvalidAmount,
    LedgerPaused,
    NothingToClaim,
    Unauthorized,
    UnknownRole,
    VestingError,
)
from sponsor_vesting.core.settings import settings
from sponsor_vesting.db.session import create_tables

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[VestingError], int] = {
    InvalidAmount: status.HTTP_400_BAD_REQUEST,
    UnknownRole: status.HTTP_400_BAD_REQUEST,
    NothingToClaim: status.HTTP_409_CONFLICT,
    InsufficientBalance: status.HTTP_409_CONFLICT,
    Unauthorized: status.HTTP_403_FORBIDDEN,
    ArithmeticOverflow: status.HTTP_422_UNPROCESSABLE_ENTITY,
    LedgerPaused: status.HTTP_423_LOCKED,
}

# Initialize FastAPI app
app = FastAPI(
    title="Sponsor Vesting API",
    description="Subscription batches vesting sponsorship credits on a 30-day schedule",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(vesting_router, prefix="/api/v1")
app.include_router(tokens_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


@app.exception_handler(VestingError)
async def vesting_error_handler(request: Request, exc: VestingError) -> JSONResponse:
    """Translate ledger refusals into JSON error responses."""
    return JSONResponse(
        status_code=ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST),
        content={"detail": exc.detail, "error": exc.code},
    )


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    create_tables()
    logger.info("%s %s ready", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("sponsor_vesting.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
