"""Escape-path search: shortest 4-connected route from the centre to the border.

Breadth-first over background cells. Every edge weighs 1, so taking the
frontier in FIFO order always expands a smallest-distance step first.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from textcircle.grid.primitives import Location, PathStep, TextGrid


@dataclass
class EscapeRoute:
    """A border step reached from the centre, with the arena of expanded steps."""

    terminal: PathStep
    checked: dict[Location, PathStep] = field(default_factory=dict)

    @property
    def length(self) -> int:
        return self.terminal.distance


def find_escape_path(grid: TextGrid) -> EscapeRoute | None:
    """Search from the centre over background cells. None if the ring is closed.

    The grid must already be square with an odd side length.
    """
    centre = grid.centre
    start = PathStep(centre, None, 0)

    unfound = set(grid.locations_of(grid.background))
    unfound.discard(centre)

    frontier: deque[PathStep] = deque([start])
    checked: dict[Location, PathStep] = {}

    while frontier:
        candidate = frontier.popleft()

        if grid.on_border(candidate.location):
            return EscapeRoute(terminal=candidate, checked=checked)

        for neighbour in candidate.location.neighbours():
            if neighbour in unfound:
                unfound.remove(neighbour)
                frontier.append(PathStep(neighbour, candidate.location, candidate.distance + 1))

        checked[candidate.location] = candidate

    return None
