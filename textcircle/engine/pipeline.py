"""Pipeline orchestrator — runs checks in dependency order, stopping at the first rejection."""

from __future__ import annotations

import logging
import time

from textcircle.engine.config import PipelineConfig
from textcircle.engine.context import CircleContext
from textcircle.engine.errors import CircleRejected, Outcome
from textcircle.engine.registry import Layer, TransformRegistry, get_registry, load_transforms

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the check pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: CircleContext, transform_ids: set[str] | None = None) -> CircleContext:
        """Run the pipeline on the given context.

        ``transform_ids`` limits the run to those checks plus their
        dependencies. The outcome is VALID only if every queued check passed.
        """
        start = time.perf_counter()
        ctx.config = self.config

        ordered = self.registry.resolve_order(transform_ids)
        logger.info("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except CircleRejected as e:
                ctx.outcome = e.outcome
                ctx.rejection_detail = e.detail
                logger.info("  %s rejected input: %s (%s)", spec.id, e.outcome.value, e)
                break
            ctx.completed_transforms.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)
        else:
            ctx.outcome = Outcome.VALID

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.1fms → %s",
            len(ctx.completed_transforms),
            len(ordered),
            total,
            ctx.outcome.value,
        )
        return ctx

    def run_layer(self, ctx: CircleContext, layer: Layer) -> CircleContext:
        """Run only transforms in a specific layer. Rejections propagate."""
        for spec in self.registry.get_layer(layer):
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
        return ctx


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline over the fully loaded registry."""
    return Pipeline(registry=load_transforms(), config=config)
