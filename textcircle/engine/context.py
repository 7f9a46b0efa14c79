"""CircleContext — the single mutable state object flowing through all transforms.

One context per validation call. Transforms fill it in layer order; the first
rejection stops the run and leaves ``outcome`` set.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from textcircle.engine.config import PipelineConfig
from textcircle.engine.errors import Outcome
from textcircle.grid.primitives import Location, PathStep, TextGrid


@dataclass
class CircleContext:
    """Shared state for one validation run."""

    # Raw submitted text
    raw_text: str = ""
    # Parsed grid (Layer 0)
    grid: TextGrid | None = None

    # --- Geometry (populated once the grid is square and odd) ---
    radius: int | None = None
    background: str | None = None
    # Cells that must be background but are not, row-major
    misplaced: list[Location] = field(default_factory=list)

    # --- Escape search (Layer 3) ---
    # Border step the search reached, or None when the ring is closed
    escape_terminal: PathStep | None = None
    # Expanded steps keyed by location, for parent lookups
    checked_steps: dict[Location, PathStep] = field(default_factory=dict)
    # Reconstructed path, terminal cell first
    escape_path: list[Location] = field(default_factory=list)
    paving: str | None = None
    path_diagram: str = ""

    # --- Pipeline metadata ---
    outcome: Outcome | None = None
    rejection_detail: str = ""
    completed_transforms: set[str] = field(default_factory=set)
    config: PipelineConfig = field(default_factory=PipelineConfig)

    @property
    def is_valid(self) -> bool:
        return self.outcome is Outcome.VALID

    @property
    def has_escape_path(self) -> bool:
        return self.escape_terminal is not None

    def require_grid(self) -> TextGrid:
        if self.grid is None:
            raise RuntimeError("grid not parsed; T0.01 must run first")
        return self.grid
