# Health schemas.
# Created: 2026-10-19

from __future__ import annotations

from drivegallery.api.v1.schemas.common import APIResponse


class HealthSummary(APIResponse):
    """Service health."""

    status: str = "ok"  # "ok" | "degraded"
    api_key_configured: bool = False
    version: str = ""
