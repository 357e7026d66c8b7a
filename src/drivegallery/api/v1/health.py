# Health router.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import APIRouter

from drivegallery import __version__
from drivegallery.api.v1.schemas.health import HealthSummary
from drivegallery.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthSummary)
async def get_health_status():
    """Report whether the server can reach Drive (i.e. has an API key)."""
    configured = get_settings().api_key_configured
    return HealthSummary(
        status="ok" if configured else "degraded",
        api_key_configured=configured,
        version=__version__,
    )
