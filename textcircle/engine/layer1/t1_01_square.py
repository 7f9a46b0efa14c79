"""T1.01 — Square.

Every row must be as wide as the grid is tall.
"""

from __future__ import annotations

from textcircle.engine.context import CircleContext
from textcircle.engine.errors import NotSquare
from textcircle.engine.registry import Layer, transform


@transform(
    id="T1.01",
    layer=Layer.STRUCTURE,
    dependencies=["T0.01"],
    description="Check that all rows are as wide as the row count",
)
def square(ctx: CircleContext) -> None:
    grid = ctx.require_grid()
    widths = grid.widths
    if min(widths) != max(widths) or max(widths) != grid.height:
        raise NotSquare(f"{grid.height} rows, widths {min(widths)}..{max(widths)}")
