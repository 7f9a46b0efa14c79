"""T2.01 — Background Band. ★★

Cells with d <= r-1 or d >= r+1 from the centre must hold the background
character. Collect every offender row-major, not just the first.
"""

from __future__ import annotations

import numpy as np

from textcircle.engine.context import CircleContext
from textcircle.engine.errors import MisplacedBackground
from textcircle.engine.registry import Layer, transform
from textcircle.grid.primitives import Location
from textcircle.utils.geometry import required_background_mask


@transform(
    id="T2.01",
    layer=Layer.GEOMETRY,
    dependencies=["T1.03"],
    description="Find cells outside the ring band that are not background",
)
def background_band(ctx: CircleContext) -> None:
    grid = ctx.require_grid()
    background = grid.background
    mask = required_background_mask(grid.height, grid.radius)

    # argwhere yields [y, x] pairs in row-major order
    offenders = np.argwhere(mask & (grid.as_array() != background))
    ctx.misplaced = [Location(int(x), int(y)) for y, x in offenders]

    if ctx.misplaced:
        raise MisplacedBackground(f"{len(ctx.misplaced)} cells should be {background!r}")
