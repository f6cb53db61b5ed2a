"""Liveness endpoint: ``GET /health`` (no upstream calls)."""

from __future__ import annotations

from fastapi import APIRouter

from avagate import __version__
from avagate.gateway.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return gateway status."""
    return HealthResponse(status="ok", version=__version__)
