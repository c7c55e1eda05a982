"""
Tests for imgcat.layout.policy

Test Coverage:
- cell_position(): every layout mode, with and without wrap
- cell_positions(): ordering, empty input
"""

import pytest

from imgcat.layout import (
    CellPosition,
    LayoutConfig,
    LayoutMode,
    cell_position,
    cell_positions,
)


def test_vertical_no_wrap_stacks_downward():
    """Single column: (0, i)."""
    config = LayoutConfig(LayoutMode.VERTICAL, 10, 10)

    positions = cell_positions(4, config)

    assert positions == [CellPosition(0, i) for i in range(4)]


@pytest.mark.parametrize("wrap", [1, 2, 3, 7])
def test_vertical_wrap_fills_columns(wrap):
    """Index i maps to (i // k, i % k)."""
    config = LayoutConfig(LayoutMode.VERTICAL, 10, 10, wrap=wrap)

    for i in range(20):
        assert cell_position(i, config) == CellPosition(i // wrap, i % wrap)


def test_horizontal_no_wrap_lines_up_right():
    """Single row: (i, 0)."""
    config = LayoutConfig(LayoutMode.HORIZONTAL, 10, 10)

    positions = cell_positions(4, config)

    assert positions == [CellPosition(i, 0) for i in range(4)]


@pytest.mark.parametrize("wrap", [1, 2, 3, 7])
def test_horizontal_wrap_is_vertical_mirror(wrap):
    """Horizontal wrap swaps the row and column of vertical wrap."""
    vertical = LayoutConfig(LayoutMode.VERTICAL, 10, 10, wrap=wrap)
    horizontal = LayoutConfig(LayoutMode.HORIZONTAL, 10, 10, wrap=wrap)

    for i in range(20):
        v = cell_position(i, vertical)
        h = cell_position(i, horizontal)
        assert (h.col, h.row) == (v.row, v.col)


def test_tiling_wraps_after_column_count():
    """Scenario B cells: 5 images on 2 columns."""
    config = LayoutConfig(LayoutMode.TILING, 4, 4, columns=2)

    positions = cell_positions(5, config)

    assert positions == [
        CellPosition(0, 0),
        CellPosition(1, 0),
        CellPosition(0, 1),
        CellPosition(1, 1),
        CellPosition(0, 2),
    ]


def test_tiling_single_column_stacks():
    """columns=1 is a single column."""
    config = LayoutConfig(LayoutMode.TILING, 4, 4, columns=1)

    assert cell_positions(3, config) == [CellPosition(0, 0), CellPosition(0, 1), CellPosition(0, 2)]


def test_cell_positions_when_empty_then_empty_list():
    config = LayoutConfig(LayoutMode.TILING, 4, 4, columns=3)

    assert cell_positions(0, config) == []


def test_cell_position_when_negative_index_then_raises():
    config = LayoutConfig(LayoutMode.VERTICAL, 4, 4)

    with pytest.raises(ValueError, match="index"):
        cell_position(-1, config)
