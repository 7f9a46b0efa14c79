"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"
    transforms_registered: int = 0


class ValidateResponse(BaseModel):
    report: str = Field(..., description="Human-readable report with <br> line breaks")
    outcome: str
    valid: bool = False
    radius: int | None = None
    background: str | None = None
    misplaced: list[tuple[int, int]] = Field(
        default_factory=list,
        description="(x, y) cells that should hold the background character",
    )
    path: list[tuple[int, int]] = Field(
        default_factory=list,
        description="Escape path (x, y) from the border cell back to the centre",
    )
    diagram: str = ""
    processing_time_ms: float = 0.0
