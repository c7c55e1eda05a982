"""
Module: imgcat.layout.models

Purpose:
    Data models for the layout engine.
    Immutable dataclasses representing cells, rectangles, placements
    and the final layout.

Key Classes:
    - CellPosition: (col, row) grid coordinate of one image
    - Rect: Half-open pixel rectangle on the canvas
    - Placement: Source crop origin + destination rectangle
    - CanvasSize: Output buffer dimensions
    - LayoutResult: Placements plus canvas size

Dependencies:
    - dataclasses (std)

Used By:
    - imgcat.layout.engine: Creates LayoutResults
    - imgcat.images.compositor: Draws Placements
    - imgcat.controller: Pipeline orchestration
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .config import SpacingPolicy


@dataclass(frozen=True, slots=True)
class CellPosition:
    """Grid coordinate of a cell (column, row), both zero-based."""

    col: int
    row: int


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Pixel rectangle on the canvas.

    The region is [x0, x1) x [y0, y1): the top-left corner is inclusive,
    the bottom-right corner exclusive.

    Example:
        >>> rect = Rect(0, 0, 10, 10)
        >>> rect.overlaps(Rect(10, 0, 20, 10))  # edges touch, no shared pixel
        False
    """

    x0: int
    y0: int
    x1: int
    y1: int

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        if self.x1 < self.x0:
            raise ValueError(f"x1 must be >= x0: {self.x1} < {self.x0}")
        if self.y1 < self.y0:
            raise ValueError(f"y1 must be >= y0: {self.y1} < {self.y0}")

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def origin(self) -> Tuple[int, int]:
        """Top-left corner as (x, y)."""
        return (self.x0, self.y0)

    def overlaps(self, other: Rect) -> bool:
        """True if both rectangles share at least one pixel."""
        return not (
            self.x1 <= other.x0
            or other.x1 <= self.x0
            or self.y1 <= other.y0
            or other.y1 <= self.y0
        )

    def as_box(self) -> Tuple[int, int, int, int]:
        """Get as (left, top, right, bottom) tuple for PIL."""
        return (self.x0, self.y0, self.x1, self.y1)


@dataclass(frozen=True)
class Placement:
    """
    Resolved position of one input image (immutable).

    Attributes:
        index: Position of the image in the input list
        source: Input path (or label) the image is read from
        source_origin: (x, y) of the crop taken from the source image;
                       identical for every placement of a run
        rect: Destination rectangle on the canvas

    Example:
        >>> p = Placement(0, "a.png", (0, 0), Rect(0, 0, 10, 10))
        >>> p.crop_box
        (0, 0, 10, 10)
    """

    index: int
    source: str
    source_origin: Tuple[int, int]
    rect: Rect

    @property
    def crop_box(self) -> Tuple[int, int, int, int]:
        """Region of the source image copied into the cell."""
        sx, sy = self.source_origin
        return (sx, sy, sx + self.rect.width, sy + self.rect.height)


@dataclass(frozen=True, slots=True)
class CanvasSize:
    """Output buffer dimensions in pixels."""

    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate size on construction."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"canvas size must be non-negative: {self.width}x{self.height}")

    def contains(self, rect: Rect) -> bool:
        """True if rect lies within [0, width) x [0, height)."""
        return (
            rect.x0 >= 0
            and rect.y0 >= 0
            and rect.x1 <= self.width
            and rect.y1 <= self.height
        )

    def as_tuple(self) -> Tuple[int, int]:
        """Get as (width, height) tuple for PIL."""
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output.

    Attributes:
        placements: Placements in input order
        canvas: Canvas size containing every placement
        spacing_policy: Policy the rectangles were computed with

    Example:
        >>> result.placement_count
        3
        >>> str(result.canvas)
        '10x30'
    """

    placements: tuple[Placement, ...]
    canvas: CanvasSize
    spacing_policy: SpacingPolicy = SpacingPolicy.NONE

    @property
    def placement_count(self) -> int:
        """Number of placements in the layout."""
        return len(self.placements)
