"""
Module: imgcat.layout.placement

Purpose:
    Convert cell positions into absolute pixel rectangles and track the
    bounding box used as canvas size in spacing mode.

Key Functions:
    - placement_for(): Rectangle for one cell

Key Classes:
    - BoundsAccumulator: Running (x1 + margin, y1 + margin) maxima

Used By:
    - imgcat.layout.engine: Placement loop
    - imgcat.layout.sizer: Accumulator-based canvas size
"""

from __future__ import annotations

from typing import Optional

from .config import LayoutConfig, SpacingConfig
from .models import CanvasSize, CellPosition, Rect


def placement_for(
    position: CellPosition,
    config: LayoutConfig,
    spacing: Optional[SpacingConfig] = None,
) -> Rect:
    """
    Compute the destination rectangle of a cell.

    Gapless (no spacing): cells are exactly adjacent,
    ``x0 = col * cell_width``.

    Spacing: cells advance by ``cell + gap`` and the whole grid is offset
    by ``margin``, ``x0 = margin + col * (cell_width + gap)``.

    Args:
        position: Grid cell
        config: Layout configuration (cell size)
        spacing: Gap/margin settings, or None for gapless mode

    Returns:
        Rect of exactly cell_width x cell_height pixels

    Example:
        >>> placement_for(CellPosition(1, 1), config, SpacingConfig(gap=2, margin=1))
        Rect(x0=8, y0=8, x1=13, y1=13)  # 5x5 cells
    """
    if spacing is None:
        x0 = position.col * config.cell_width
        y0 = position.row * config.cell_height
    else:
        x0 = spacing.margin + position.col * spacing.unit_width(config.cell_width)
        y0 = spacing.margin + position.row * spacing.unit_height(config.cell_height)

    return Rect(x0, y0, x0 + config.cell_width, y0 + config.cell_height)


class BoundsAccumulator:
    """
    Running bounding box of placed rectangles plus the trailing margin.

    Every rectangle must be added exactly once, in index order, before
    ``canvas`` is read.

    Example:
        >>> acc = BoundsAccumulator(margin=1)
        >>> acc.add(Rect(1, 1, 6, 6))
        >>> acc.canvas
        CanvasSize(width=7, height=7)
    """

    def __init__(self, margin: int = 0) -> None:
        if margin < 0:
            raise ValueError(f"margin must be non-negative: {margin}")
        self._margin = margin
        self._max_x = 0
        self._max_y = 0
        self._count = 0

    def add(self, rect: Rect) -> None:
        """Fold one rectangle into the running maxima."""
        self._max_x = max(self._max_x, rect.x1 + self._margin)
        self._max_y = max(self._max_y, rect.y1 + self._margin)
        self._count += 1

    @property
    def count(self) -> int:
        """Number of rectangles added so far."""
        return self._count

    @property
    def canvas(self) -> CanvasSize:
        """Canvas size covering every added rectangle (0x0 when empty)."""
        return CanvasSize(self._max_x, self._max_y)
