"""T3.01 — Escape Search. ★★★

Breadth-first from the centre over background cells. Reaching any border
cell means the ring leaks.
"""

from __future__ import annotations

import logging

from textcircle.engine.context import CircleContext
from textcircle.engine.registry import Layer, transform
from textcircle.utils.search import find_escape_path

logger = logging.getLogger(__name__)


@transform(
    id="T3.01",
    layer=Layer.CONNECTIVITY,
    dependencies=["T2.01"],
    description="Search for a path from the centre to the border",
)
def escape_search(ctx: CircleContext) -> None:
    route = find_escape_path(ctx.require_grid())
    if route is None:
        return

    ctx.escape_terminal = route.terminal
    ctx.checked_steps = route.checked
    logger.debug(
        "Escape reached border at %s after %d steps (%d expanded)",
        route.terminal.location.as_tuple(),
        route.length,
        len(route.checked),
    )
