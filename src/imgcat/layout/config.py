"""
Module: imgcat.layout.config

Purpose:
    Configuration for the layout engine. Defines the layout family,
    spacing policy and compositing policy selectors plus the immutable
    cell/spacing settings they operate on.

Key Classes:
    - LayoutMode: Vertical / Horizontal / Tiling selector
    - SpacingPolicy: Gapless or gap+margin placement
    - CompositePolicy: Opaque overwrite or source-over overlay
    - LayoutConfig: Immutable cell size and wrap settings
    - SpacingConfig: Immutable gap and margin settings
    - ConfigurationError: Invalid configuration value

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - imgcat.layout.policy: Cell positions
    - imgcat.layout.placement: Rectangles
    - imgcat.layout.sizer: Canvas size
    - imgcat.config: Run configuration
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConfigurationError(ValueError):
    """Invalid or missing configuration value."""
    pass


class LayoutMode(Enum):
    """
    Layout family used to turn an image index into a cell position.

    Attributes:
        VERTICAL: Stack downward; with a wrap count, fill a column of
                  ``wrap`` cells before starting the next column.
        HORIZONTAL: Line up to the right; with a wrap count, fill a row
                    of ``wrap`` cells before starting the next row.
        TILING: Fixed column count, always wraps after ``columns`` cells.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    TILING = "tiling"


class SpacingPolicy(Enum):
    """How cell positions are converted to pixel rectangles."""

    NONE = "none"              # Cells exactly adjacent, canvas from formula
    GAP_MARGIN = "gap-margin"  # Gap between cells, margin around the composite


class CompositePolicy(Enum):
    """How a source cell is written into the canvas."""

    OVERWRITE = "overwrite"  # Opaque copy of the source pixels
    OVERLAY = "overlay"      # Source-over alpha blend


@dataclass(frozen=True)
class LayoutConfig:
    """
    Layout configuration (immutable).

    Attributes:
        mode: Layout family
        cell_width: Width of every cell in pixels
        cell_height: Height of every cell in pixels
        wrap: Cells per column (Vertical) or row (Horizontal) before
              wrapping. None means no wrapping.
        columns: Column count for Tiling. Ignored by other modes.

    Example:
        >>> config = LayoutConfig(LayoutMode.TILING, 4, 4, columns=2)
        >>> config.wrap_count
        2
    """

    mode: LayoutMode
    cell_width: int
    cell_height: int
    wrap: Optional[int] = None
    columns: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.cell_width <= 0:
            raise ConfigurationError(f"cell_width must be positive: {self.cell_width}")
        if self.cell_height <= 0:
            raise ConfigurationError(f"cell_height must be positive: {self.cell_height}")
        if self.wrap is not None and self.wrap < 1:
            raise ConfigurationError(f"wrap must be >= 1 or unset: {self.wrap}")
        if self.mode is LayoutMode.TILING:
            if self.columns is None:
                raise ConfigurationError("Tiling layout requires a column count")
            if self.columns < 1:
                raise ConfigurationError(f"columns must be >= 1: {self.columns}")

    @property
    def wrap_count(self) -> Optional[int]:
        """Cells along the primary axis before wrapping (None = never)."""
        if self.mode is LayoutMode.TILING:
            return self.columns
        return self.wrap


@dataclass(frozen=True)
class SpacingConfig:
    """
    Gap and margin settings for spacing mode (immutable).

    Attributes:
        gap: Pixels inserted between adjacent cells
        margin: Pixels around the whole composite
    """

    gap: int = 0
    margin: int = 0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.gap < 0:
            raise ConfigurationError(f"gap must be non-negative: {self.gap}")
        if self.margin < 0:
            raise ConfigurationError(f"margin must be non-negative: {self.margin}")

    def unit_width(self, cell_width: int) -> int:
        """Horizontal step between neighbouring cells."""
        return cell_width + self.gap

    def unit_height(self, cell_height: int) -> int:
        """Vertical step between neighbouring cells."""
        return cell_height + self.gap
