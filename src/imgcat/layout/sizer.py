"""
Module: imgcat.layout.sizer

Purpose:
    Derive the canvas size for a layout, either analytically from the
    layout formulas (gapless mode) or from the placement accumulator
    (spacing mode).

Key Functions:
    - formula_canvas_size(): Size from count, cell size and wrap count
    - accumulated_canvas_size(): Size from a BoundsAccumulator

Used By:
    - imgcat.layout.engine: Canvas sizing
"""

from __future__ import annotations

from .config import LayoutConfig, LayoutMode
from .models import CanvasSize
from .placement import BoundsAccumulator


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def formula_canvas_size(count: int, config: LayoutConfig) -> CanvasSize:
    """
    Compute the canvas size of a gapless layout without iterating cells.

    Along the wrapping axis the canvas spans ``min(count, wrap)`` cells;
    across it, ``ceil(count / wrap)`` cells. An empty input gives 0x0.

    Args:
        count: Number of images
        config: Layout configuration

    Returns:
        Smallest CanvasSize containing every gapless cell

    Example:
        >>> formula_canvas_size(5, LayoutConfig(LayoutMode.TILING, 4, 4, columns=2))
        CanvasSize(width=8, height=12)
    """
    if count < 0:
        raise ValueError(f"count must be non-negative: {count}")
    if count == 0:
        return CanvasSize(0, 0)

    w, h = config.cell_width, config.cell_height
    wrap = config.wrap_count

    if config.mode is LayoutMode.VERTICAL:
        if wrap is None:
            return CanvasSize(w, h * count)
        return CanvasSize(w * _ceil_div(count, wrap), h * min(count, wrap))

    if wrap is None:
        return CanvasSize(w * count, h)
    return CanvasSize(w * min(count, wrap), h * _ceil_div(count, wrap))


def accumulated_canvas_size(accumulator: BoundsAccumulator) -> CanvasSize:
    """Canvas size tracked while placing rectangles in spacing mode."""
    return accumulator.canvas
