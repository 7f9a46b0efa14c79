"""Grid primitives: cell locations, search steps and the parsed text grid.

Coordinates are (x, y) with the origin at the top-left cell, x growing to the
right (column) and y growing downwards (row).
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

# 4-connected neighbourhood: up, down, left, right
_NEIGHBOUR_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class Location:
    x: int
    y: int

    def manhattan_distance(self, other: Location) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def neighbours(self) -> list[Location]:
        """4-adjacent locations. May fall outside the grid; callers filter."""
        return [Location(self.x + dx, self.y + dy) for dx, dy in _NEIGHBOUR_OFFSETS]

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class PathStep:
    """Node in the escape search tree.

    ``parent`` is the Location of the step that discovered this one (None for
    the start). Parents are looked up by key in the checked arena rather than
    held as references.
    """

    location: Location
    parent: Location | None = None
    distance: int = 0


@dataclass(frozen=True)
class TextGrid:
    """Rows of characters as submitted. Immutable after parse."""

    rows: tuple[str, ...]
    _symbols: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # dict preserves first-appearance order
        symbols = dict.fromkeys(ch for row in self.rows for ch in row if ch != "\n")
        object.__setattr__(self, "_symbols", tuple(symbols))

    @property
    def height(self) -> int:
        return len(self.rows)

    def width(self, y: int) -> int:
        return len(self.rows[y])

    @property
    def widths(self) -> list[int]:
        return [len(row) for row in self.rows]

    def cell(self, x: int, y: int) -> str:
        return self.rows[y][x]

    def distinct_symbols(self) -> tuple[str, ...]:
        return self._symbols

    # ── Derived values, meaningful once the grid is square with odd side ──

    @property
    def radius(self) -> int:
        return self.height // 2

    @property
    def centre(self) -> Location:
        r = self.radius
        return Location(r, r)

    @property
    def background(self) -> str:
        r = self.radius
        return self.cell(r, r)

    def on_border(self, location: Location) -> bool:
        last = self.height - 1
        return location.x in (0, last) or location.y in (0, last)

    def locations_of(self, symbol: str) -> list[Location]:
        """Every location holding ``symbol``, row-major."""
        return [
            Location(x, y)
            for y, row in enumerate(self.rows)
            for x, ch in enumerate(row)
            if ch == symbol
        ]

    def as_array(self) -> NDArray[np.str_]:
        """Character array indexed [y, x]. Only valid for a square grid."""
        return np.array([list(row) for row in self.rows], dtype="<U1")
