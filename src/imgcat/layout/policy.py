"""
Module: imgcat.layout.policy

Purpose:
    Map an image index to its (col, row) cell for each layout mode.

Key Functions:
    - cell_position(): Cell of a single index
    - cell_positions(): Cells for indexes 0..count-1

Used By:
    - imgcat.layout.engine: Placement loop
"""

from __future__ import annotations

from typing import List

from .config import LayoutConfig, LayoutMode
from .models import CellPosition


def cell_position(index: int, config: LayoutConfig) -> CellPosition:
    """
    Get the grid cell of the image at ``index``.

    Vertical fills a column of ``wrap`` cells before moving right;
    Horizontal and Tiling fill a row of ``wrap``/``columns`` cells before
    moving down. Without a wrap count everything stays in one column
    (Vertical) or one row (Horizontal).

    Args:
        index: Zero-based position in the input list
        config: Layout configuration

    Returns:
        CellPosition for the index

    Raises:
        ValueError: If index is negative

    Example:
        >>> cell_position(5, LayoutConfig(LayoutMode.VERTICAL, 10, 10, wrap=2))
        CellPosition(col=2, row=1)
    """
    if index < 0:
        raise ValueError(f"index must be non-negative: {index}")

    wrap = config.wrap_count

    if config.mode is LayoutMode.VERTICAL:
        if wrap is None:
            return CellPosition(col=0, row=index)
        return CellPosition(col=index // wrap, row=index % wrap)

    if wrap is None:
        return CellPosition(col=index, row=0)
    return CellPosition(col=index % wrap, row=index // wrap)


def cell_positions(count: int, config: LayoutConfig) -> List[CellPosition]:
    """Cells for every index in ``range(count)``, in order."""
    if count < 0:
        raise ValueError(f"count must be non-negative: {count}")
    return [cell_position(i, config) for i in range(count)]
