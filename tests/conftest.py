"""Shared test fixtures."""

from __future__ import annotations

import pytest

from textcircle.utils.geometry import ring_band_mask


# Sample grids. Background is whatever sits at the centre cell.

# Diamond at Manhattan distance 2 around (2, 2): closed ring of radius 2
DIAMOND_5 = "\n".join([
    "..#..",
    ".#.#.",
    "#...#",
    ".#.#.",
    "..#..",
])

# Same diamond with the top cell (2, 0) knocked out
DIAMOND_5_GAP = "\n".join([
    ".....",
    ".#.#.",
    "#...#",
    ".#.#.",
    "..#..",
])

DIAMOND_5_GAP_DIAGRAM = "<br>".join([
    "..X..",
    ".#X#.",
    "#.X.#",
    ".#.#.",
    "..#..",
])

# Every band cell drawn for r = 3
RING_7 = "\n".join([
    ".#####.",
    "###.###",
    "##...##",
    "#.....#",
    "##...##",
    "###.###",
    ".#####.",
])

SMALLEST_RING = "###\n#.#\n###"

# Centre is '#', so the '.' cells of the inner plus are all misplaced
INVERTED_CENTRE_5 = "\n".join([
    ".....",
    ".....",
    "..#..",
    ".....",
    ".....",
])

EVEN_4 = "....\n....\n....\n...."


def draw_ring(h: int, ring: str = "#", background: str = ".") -> str:
    """Perfect ring: every band cell is ring, every other cell background."""
    band = ring_band_mask(h, h // 2)
    return "\n".join(
        "".join(ring if band[y, x] else background for x in range(h)) for y in range(h)
    )


def punch_top_gap(text: str, background: str = ".") -> str:
    """Set the single band cell above the centre, (r, 0), to background."""
    rows = text.split("\n")
    r = len(rows) // 2
    rows[0] = rows[0][:r] + background + rows[0][r + 1 :]
    return "\n".join(rows)


@pytest.fixture
def diamond_5() -> str:
    return DIAMOND_5


@pytest.fixture
def diamond_5_gap() -> str:
    return DIAMOND_5_GAP


@pytest.fixture
def ring_7() -> str:
    return RING_7
