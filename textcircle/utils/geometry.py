"""Leaf-node geometry helpers. No engine imports.

A text circle of radius r is a ring band r-1 < d < r+1 around the centre
cell (r, r), where d is the Euclidean distance of a cell from the centre.
Cells outside the band, inside or out, must hold the background character.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def centre_distance(x: int, y: int, r: int) -> float:
    """Euclidean distance of cell (x, y) from the centre cell (r, r)."""
    dx = x - r
    dy = y - r
    return math.sqrt(dx * dx + dy * dy)


def required_background(x: int, y: int, r: int) -> bool:
    """True if (x, y) lies outside the ring band and must be background.

    Both band edges belong to the enforced zone: d <= r-1 or d >= r+1.
    """
    d = centre_distance(x, y, r)
    return d <= r - 1 or d >= r + 1


def required_background_mask(h: int, r: int) -> NDArray[np.bool_]:
    """Vectorised required_background over an h×h grid, indexed [y, x]."""
    ys, xs = np.indices((h, h))
    d = np.sqrt((xs - r) ** 2 + (ys - r) ** 2)
    return (d <= r - 1) | (d >= r + 1)


def ring_band_mask(h: int, r: int) -> NDArray[np.bool_]:
    """Cells where either symbol is permitted (the open band)."""
    return ~required_background_mask(h, r)
