"""Pipeline configuration — report wire format and diagram glyphs."""

from __future__ import annotations

from dataclasses import dataclass

# Paving glyphs in order of preference. At most two can collide with the
# grid's symbols, so one is always free after the two-symbol check.
PAVING_CANDIDATES: tuple[str, ...] = ("#", "X", ".")

LINE_BREAK = "<br>"


@dataclass
class PipelineConfig:
    """Controls how reports and diagrams are rendered."""

    # Line-break marker used between report lines and diagram rows
    line_break: str = LINE_BREAK

    # Escape-path diagram
    paving_candidates: tuple[str, ...] = PAVING_CANDIDATES
