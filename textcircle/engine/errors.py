"""Validation outcomes and the rejection taxonomy.

Checks raise a CircleRejected subclass; the pipeline catches it and records
the outcome on the context. Rejections are results, not faults: the caller
always gets a report string back.
"""

from __future__ import annotations

import enum


class Outcome(str, enum.Enum):
    EMPTY_INPUT = "empty_input"
    NOT_SQUARE = "not_square"
    EVEN_SIDE_LENGTH = "even_side_length"
    WRONG_SYMBOL_COUNT = "wrong_symbol_count"
    MISPLACED_BACKGROUND = "misplaced_background"
    ESCAPE_PATH_EXISTS = "escape_path_exists"
    VALID = "valid"


class CircleRejected(Exception):
    """Base class: the input is not a valid text circle."""

    outcome: Outcome

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.outcome.value)
        self.detail = detail


class EmptyInput(CircleRejected):
    outcome = Outcome.EMPTY_INPUT


class NotSquare(CircleRejected):
    outcome = Outcome.NOT_SQUARE


class EvenSideLength(CircleRejected):
    outcome = Outcome.EVEN_SIDE_LENGTH


class WrongSymbolCount(CircleRejected):
    outcome = Outcome.WRONG_SYMBOL_COUNT


class MisplacedBackground(CircleRejected):
    outcome = Outcome.MISPLACED_BACKGROUND


class EscapePathExists(CircleRejected):
    outcome = Outcome.ESCAPE_PATH_EXISTS
