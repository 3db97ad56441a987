"""
Health check endpoint.

GET /health — reports whether the HumanCode credentials are configured.
Rules:
- app_id and app_key present → "healthy" (200).
- Either missing → "degraded" (200) — the process is up but every proxy
  call will be rejected by the remote API.

The remote API is never contacted from here.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from config import AppSettings
from dependencies import get_settings
from schemas.dto.responses.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings = Depends(get_settings)) -> HealthResponse:
    checks: dict[str, str] = {}
    overall = "healthy"

    if settings.humancode.is_configured:
        checks["humancode"] = "configured"
    else:
        checks["humancode"] = "not_configured"
        overall = "degraded"

    return HealthResponse(status=overall, checks=checks)
