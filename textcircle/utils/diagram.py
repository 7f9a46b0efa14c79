"""Diagram utilities — path reconstruction, paving glyph choice, grid to text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from textcircle.grid.primitives import Location, PathStep, TextGrid


def trace_path(terminal: PathStep, checked: dict[Location, PathStep]) -> list[Location]:
    """Walk parent links from ``terminal`` back to the start.

    Returns locations terminal-first, start last.
    """
    path: list[Location] = []
    step = terminal
    while True:
        path.append(step.location)
        if step.parent is None:
            break
        step = checked[step.parent]
    return path


def choose_paving(used: Iterable[str], candidates: Sequence[str]) -> str:
    """First candidate glyph not already used in the grid."""
    taken = set(used)
    for glyph in candidates:
        if glyph not in taken:
            return glyph
    raise ValueError(f"No paving glyph available: all of {list(candidates)} are in use")


def render_path_diagram(
    grid: TextGrid,
    path: Iterable[Location],
    paving: str,
    line_break: str = "\n",
) -> str:
    """Render the grid row-major with path cells replaced by ``paving``."""
    on_path = set(path)
    rows = []
    for y, row in enumerate(grid.rows):
        rows.append(
            "".join(paving if Location(x, y) in on_path else ch for x, ch in enumerate(row))
        )
    return line_break.join(rows)
