"""Text parser: raw submission → TextGrid."""

from __future__ import annotations

import logging

from textcircle.engine.errors import EmptyInput
from textcircle.grid.primitives import TextGrid

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split on newlines, dropping one trailing CR per line.

    A trailing line terminator does not produce an extra empty row.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_grid(text: str) -> TextGrid:
    """Parse raw text into a TextGrid. Raises EmptyInput on zero-length input."""
    if len(text) == 0:
        raise EmptyInput("input has zero length")

    grid = TextGrid(rows=tuple(split_lines(text)))
    logger.debug("Parsed grid: %d rows, widths %s", grid.height, grid.widths)
    return grid
