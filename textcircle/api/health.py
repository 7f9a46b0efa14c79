"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from textcircle.config import Settings
from textcircle.dependencies import get_settings
from textcircle.engine.registry import get_registry
from textcircle.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        environment=settings.textcircle_env,
        transforms_registered=get_registry().count,
    )
