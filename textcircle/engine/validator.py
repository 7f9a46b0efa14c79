"""Entry points: raw text in, validated context or report string out."""

from __future__ import annotations

from textcircle.engine.config import PipelineConfig
from textcircle.engine.context import CircleContext
from textcircle.engine.pipeline import create_pipeline
from textcircle.engine.report import context_to_report


def validate(text: str, config: PipelineConfig | None = None) -> CircleContext:
    """Run a fresh context through the full pipeline."""
    ctx = CircleContext(raw_text=text)
    return create_pipeline(config).run(ctx)


def validate_text_circle(text: str) -> str:
    """Validate a text circle and describe the result.

    Never raises for bad input: every rejection comes back as a report.
    """
    return context_to_report(validate(text))
