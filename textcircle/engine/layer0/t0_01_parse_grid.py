"""T0.01 — Parse Grid.

Split the submission into rows. Zero-length input is rejected here.
"""

from __future__ import annotations

from textcircle.engine.context import CircleContext
from textcircle.engine.registry import Layer, transform
from textcircle.grid.parser import parse_grid


@transform(
    id="T0.01",
    layer=Layer.PARSING,
    description="Parse raw text into grid rows",
)
def parse(ctx: CircleContext) -> None:
    ctx.grid = parse_grid(ctx.raw_text)
