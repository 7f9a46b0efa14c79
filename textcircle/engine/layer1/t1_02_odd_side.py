"""T1.02 — Odd Side Length.

An odd side gives a unique centre cell (r, r) with r = h // 2.
"""

from __future__ import annotations

from textcircle.engine.context import CircleContext
from textcircle.engine.errors import EvenSideLength
from textcircle.engine.registry import Layer, transform


@transform(
    id="T1.02",
    layer=Layer.STRUCTURE,
    dependencies=["T1.01"],
    description="Check that the side length is odd",
)
def odd_side(ctx: CircleContext) -> None:
    grid = ctx.require_grid()
    if grid.height % 2 == 0:
        raise EvenSideLength(f"side length {grid.height}")

    ctx.radius = grid.radius
    ctx.background = grid.background
