"""T1.03 — Symbol Count.

Exactly two distinct characters: background and ring.
"""

from __future__ import annotations

from textcircle.engine.context import CircleContext
from textcircle.engine.errors import WrongSymbolCount
from textcircle.engine.registry import Layer, transform


@transform(
    id="T1.03",
    layer=Layer.STRUCTURE,
    dependencies=["T1.02"],
    description="Check for exactly two distinct characters",
)
def symbol_count(ctx: CircleContext) -> None:
    symbols = ctx.require_grid().distinct_symbols()
    if len(symbols) != 2:
        raise WrongSymbolCount(f"found {len(symbols)}: {''.join(symbols)!r}")
