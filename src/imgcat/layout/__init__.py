"""
Module: imgcat.layout

Purpose:
    Pure layout engine. Converts an image count, cell size and layout
    parameters into placement rectangles and the minimal canvas that
    contains them.

Key Functions:
    - compute_layout(): Main entry point for layout
    - cell_position(): Index to (col, row)
    - placement_for(): Cell to pixel rectangle
    - formula_canvas_size(): Gapless canvas size

Key Classes:
    - LayoutConfig: Cell size and wrap settings
    - SpacingConfig: Gap and margin settings
    - Placement: Source crop origin + destination rectangle
    - LayoutResult: Placements and canvas size

Used By:
    - imgcat.controller: Main pipeline
"""

from .config import (
    CompositePolicy,
    ConfigurationError,
    LayoutConfig,
    LayoutMode,
    SpacingConfig,
    SpacingPolicy,
)
from .models import CanvasSize, CellPosition, LayoutResult, Placement, Rect
from .policy import cell_position, cell_positions
from .placement import BoundsAccumulator, placement_for
from .sizer import accumulated_canvas_size, formula_canvas_size
from .engine import compute_layout

__all__ = [
    # Config
    "CompositePolicy",
    "ConfigurationError",
    "LayoutConfig",
    "LayoutMode",
    "SpacingConfig",
    "SpacingPolicy",
    # Models
    "CanvasSize",
    "CellPosition",
    "LayoutResult",
    "Placement",
    "Rect",
    # Functions
    "cell_position",
    "cell_positions",
    "placement_for",
    "BoundsAccumulator",
    "accumulated_canvas_size",
    "formula_canvas_size",
    "compute_layout",
]
