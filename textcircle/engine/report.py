"""CircleContext → report text.

The report strings are a fixed wire format: consumers match on them, so the
wording here must not drift.
"""

from __future__ import annotations

from textcircle.engine.context import CircleContext
from textcircle.engine.errors import Outcome
from textcircle.grid.primitives import Location

_FIXED_MESSAGES: dict[Outcome, str] = {
    Outcome.EMPTY_INPUT: "Invalid. The input is empty.",
    Outcome.NOT_SQUARE: "Invalid. The input is not square.",
    Outcome.EVEN_SIDE_LENGTH: "Invalid. The side length of the square is not odd.",
    Outcome.WRONG_SYMBOL_COUNT: "Invalid. The input does not contain 2 distinct characters.",
}


def format_positions(locations: list[Location], line_break: str) -> str:
    return line_break.join(f"({loc.x}, {loc.y})" for loc in locations)


def context_to_report(ctx: CircleContext) -> str:
    """Build the single human-readable report for a finished run."""
    br = ctx.config.line_break
    outcome = ctx.outcome

    if outcome is None:
        raise ValueError("Pipeline has not run on this context")

    if outcome in _FIXED_MESSAGES:
        return _FIXED_MESSAGES[outcome]

    if outcome is Outcome.MISPLACED_BACKGROUND:
        positions = format_positions(ctx.misplaced, br)
        return (
            "Invalid. The following positions (x, y) from (0, 0) at left top "
            f'should be background character "{ctx.background}":{br}{positions}'
        )

    if outcome is Outcome.ESCAPE_PATH_EXISTS:
        return (
            "Invalid. There should not be a path from inside the circle to outside:"
            f"{br}{br}<code>{ctx.path_diagram}</code>"
        )

    return f"This is a valid text circle of radius {ctx.radius}."
