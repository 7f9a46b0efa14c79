"""POST /api/validate — run the validation pipeline on a submitted text circle."""

from __future__ import annotations

import time

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import PlainTextResponse

from textcircle.engine.report import context_to_report
from textcircle.engine.validator import validate as run_validation
from textcircle.engine.validator import validate_text_circle
from textcircle.models.requests import ValidateRequest
from textcircle.models.responses import ValidateResponse

router = APIRouter()


@router.post("/validate", response_model=ValidateResponse)
def validate(req: ValidateRequest) -> ValidateResponse:
    start = time.perf_counter()

    ctx = run_validation(req.text)

    elapsed = (time.perf_counter() - start) * 1000

    return ValidateResponse(
        report=context_to_report(ctx),
        outcome=ctx.outcome.value,
        valid=ctx.is_valid,
        radius=ctx.radius,
        background=ctx.background,
        misplaced=[loc.as_tuple() for loc in ctx.misplaced],
        path=[loc.as_tuple() for loc in ctx.escape_path],
        diagram=ctx.path_diagram,
        processing_time_ms=round(elapsed, 3),
    )


@router.post("/validate/text", response_class=PlainTextResponse)
def validate_text(body: bytes = Body(b"", media_type="text/plain")) -> str:
    """Plain-text variant: request body is the raw grid, response is the report."""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail="Request body is not valid UTF-8") from e
    return validate_text_circle(text)
