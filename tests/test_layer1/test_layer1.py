"""Tests for Layer 1 — structural checks."""

import pytest

from textcircle.engine.context import CircleContext
from textcircle.engine.errors import EvenSideLength, NotSquare, WrongSymbolCount
from textcircle.engine.pipeline import create_pipeline
from textcircle.engine.registry import Layer, get_registry
from tests.conftest import DIAMOND_5, EVEN_4


def _run_structure(text: str) -> CircleContext:
    pipeline = create_pipeline()
    ctx = CircleContext(raw_text=text)
    pipeline.run_layer(ctx, Layer.PARSING)
    pipeline.run_layer(ctx, Layer.STRUCTURE)
    return ctx


def test_layer1_registers_3_transforms():
    create_pipeline()
    assert [s.id for s in get_registry().get_layer(Layer.STRUCTURE)] == ["T1.01", "T1.02", "T1.03"]


@pytest.mark.parametrize("text", ["ab", "aaa\naaa", "ab\nab\nab", "abc\nab\nabc"])
def test_not_square(text):
    with pytest.raises(NotSquare):
        _run_structure(text)


def test_even_side():
    with pytest.raises(EvenSideLength):
        _run_structure(EVEN_4)


def test_square_checked_before_symbols():
    # Three symbols but also ragged: squareness wins
    with pytest.raises(NotSquare):
        _run_structure("abc\nab")


def test_wrong_symbol_count():
    with pytest.raises(WrongSymbolCount):
        _run_structure("...\n...\n...")


def test_structure_sets_radius_and_background():
    ctx = _run_structure(DIAMOND_5)
    assert ctx.radius == 2
    assert ctx.background == "."
    assert {"T1.01", "T1.02", "T1.03"} <= ctx.completed_transforms
