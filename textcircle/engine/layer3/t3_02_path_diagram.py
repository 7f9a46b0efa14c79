"""T3.02 — Path Diagram.

Redraw the grid with the escape path paved in a glyph that neither
original symbol uses.
"""

from __future__ import annotations

from textcircle.engine.context import CircleContext
from textcircle.engine.errors import EscapePathExists
from textcircle.engine.registry import Layer, transform
from textcircle.utils.diagram import choose_paving, render_path_diagram, trace_path


@transform(
    id="T3.02",
    layer=Layer.CONNECTIVITY,
    dependencies=["T3.01"],
    description="Render the escape path over the grid",
)
def path_diagram(ctx: CircleContext) -> None:
    if ctx.escape_terminal is None:
        return

    grid = ctx.require_grid()
    ctx.escape_path = trace_path(ctx.escape_terminal, ctx.checked_steps)
    ctx.paving = choose_paving(grid.distinct_symbols(), ctx.config.paving_candidates)
    ctx.path_diagram = render_path_diagram(
        grid, ctx.escape_path, ctx.paving, line_break=ctx.config.line_break
    )
    raise EscapePathExists(f"path of length {ctx.escape_terminal.distance}")
