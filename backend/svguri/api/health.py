"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svguri import __version__
from svguri.config import Settings
from svguri.dependencies import get_settings
from svguri.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, env=settings.svguri_env)
