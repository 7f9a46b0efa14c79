"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    text: str = Field(..., description="Raw text circle, rows separated by newlines")
