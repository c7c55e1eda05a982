"""
Module: imgcat.layout.engine

Purpose:
    Single entry point of the layout engine. Turns an ordered list of
    sources plus configuration into placements and a canvas size.

Key Functions:
    - compute_layout(): Placements + canvas for a list of sources

Dependencies:
    - imgcat.layout.policy: Cell positions
    - imgcat.layout.placement: Rectangles and bounds accumulation
    - imgcat.layout.sizer: Canvas size

Used By:
    - imgcat.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Sequence, Tuple, Union

from .config import LayoutConfig, SpacingConfig, SpacingPolicy
from .models import LayoutResult, Placement
from .placement import BoundsAccumulator, placement_for
from .policy import cell_position
from .sizer import accumulated_canvas_size, formula_canvas_size

logger = logging.getLogger(__name__)

SourceLike = Union[str, "os.PathLike[str]"]


def compute_layout(
    sources: Sequence[SourceLike],
    layout: LayoutConfig,
    spacing: Optional[SpacingConfig] = None,
    source_origin: Tuple[int, int] = (0, 0),
) -> LayoutResult:
    """
    Lay out ``sources`` on a canvas.

    With ``spacing`` set, rectangles include gap and margin and the canvas
    is the accumulated extent of every rectangle plus margin. Without it,
    cells are adjacent and the canvas comes from the layout formulas.

    Args:
        sources: Input paths (or labels) in composite order
        layout: Layout configuration
        spacing: Gap/margin settings, or None for gapless mode
        source_origin: (x, y) crop origin applied to every source

    Returns:
        LayoutResult with one Placement per source, in order

    Raises:
        ValueError: If source_origin is negative
        RuntimeError: If a placement falls outside the computed canvas or
            was not folded into the spacing-mode bounds

    Example:
        >>> result = compute_layout(["a.png", "b.png", "c.png"],
        ...                         LayoutConfig(LayoutMode.VERTICAL, 10, 10))
        >>> str(result.canvas)
        '10x30'
    """
    sx, sy = source_origin
    if sx < 0 or sy < 0:
        raise ValueError(f"source_origin must be non-negative: {source_origin}")

    policy = SpacingPolicy.NONE if spacing is None else SpacingPolicy.GAP_MARGIN
    accumulator = BoundsAccumulator(spacing.margin) if spacing is not None else None

    placements: List[Placement] = []
    for index, source in enumerate(sources):
        rect = placement_for(cell_position(index, layout), layout, spacing)
        if accumulator is not None:
            accumulator.add(rect)
        placements.append(
            Placement(
                index=index,
                source=os.fspath(source),
                source_origin=(sx, sy),
                rect=rect,
            )
        )

    if accumulator is not None:
        if accumulator.count != len(placements):
            raise RuntimeError(
                f"Accumulated {accumulator.count} rectangles for {len(placements)} placements"
            )
        canvas = accumulated_canvas_size(accumulator)
    else:
        canvas = formula_canvas_size(len(placements), layout)

    for placement in placements:
        if not canvas.contains(placement.rect):
            raise RuntimeError(
                f"Placement {placement.index} {placement.rect} outside canvas {canvas}"
            )

    logger.debug(
        f"Layout {layout.mode.value}/{policy.value}: "
        f"{len(placements)} cells on {canvas} canvas"
    )

    return LayoutResult(
        placements=tuple(placements),
        canvas=canvas,
        spacing_policy=policy,
    )
