"""Tests for Layer 3 — escape search and path diagram."""

import pytest

from textcircle.engine.context import CircleContext
from textcircle.engine.errors import EscapePathExists
from textcircle.engine.pipeline import create_pipeline
from textcircle.engine.registry import Layer
from textcircle.grid.primitives import Location
from tests.conftest import DIAMOND_5, DIAMOND_5_GAP, DIAMOND_5_GAP_DIAGRAM


def _run_all_layers(ctx: CircleContext) -> None:
    pipeline = create_pipeline()
    for layer in Layer:
        pipeline.run_layer(ctx, layer)


def test_closed_ring_leaves_no_path():
    ctx = CircleContext(raw_text=DIAMOND_5)
    _run_all_layers(ctx)
    assert not ctx.has_escape_path
    assert ctx.escape_path == []
    assert ctx.path_diagram == ""
    assert {"T3.01", "T3.02"} <= ctx.completed_transforms


def test_gap_produces_path_and_diagram():
    ctx = CircleContext(raw_text=DIAMOND_5_GAP)
    with pytest.raises(EscapePathExists):
        _run_all_layers(ctx)
    assert ctx.escape_terminal.location == Location(2, 0)
    assert ctx.escape_terminal.distance == 2
    assert ctx.escape_path == [Location(2, 0), Location(2, 1), Location(2, 2)]
    assert ctx.paving == "X"
    assert ctx.path_diagram == DIAMOND_5_GAP_DIAGRAM
    assert "T3.01" in ctx.completed_transforms
    assert "T3.02" not in ctx.completed_transforms
