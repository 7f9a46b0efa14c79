"""Text circle validation engine."""

from textcircle.engine.registry import transform, Layer, get_registry, load_transforms
from textcircle.engine.context import CircleContext
from textcircle.engine.errors import CircleRejected, Outcome
from textcircle.engine.pipeline import Pipeline, create_pipeline
from textcircle.engine.validator import validate, validate_text_circle

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "load_transforms",
    "CircleContext",
    "CircleRejected",
    "Outcome",
    "Pipeline",
    "create_pipeline",
    "validate",
    "validate_text_circle",
]
