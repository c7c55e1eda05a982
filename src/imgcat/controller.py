"""
Module: imgcat.controller

Purpose:
    Orchestrate a complete concatenation run.
    Layout → Allocate canvas → Decode + draw each input → Encode

Key Functions:
    - concat_images(): Main entry point for one run

Key Classes:
    - ConcatResult: Outcome of a successful run

Dependencies:
    - imgcat.layout: Placements and canvas size
    - imgcat.images: Decoding and compositing
    - imgcat.output: Encoding

Used By:
    - imgcat.cli: Command-line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from .config import ConcatConfig
from .images import draw, new_canvas, open_source_image
from .layout import CanvasSize, compute_layout
from .output import write_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConcatResult:
    """
    Result of a concatenation run (immutable).

    Attributes:
        output: Path of the written composite
        canvas: Size of the composite
        placement_count: Number of images placed
        elapsed_s: Wall time of the run in seconds
    """

    output: Path
    canvas: CanvasSize
    placement_count: int
    elapsed_s: float


def concat_images(config: ConcatConfig) -> ConcatResult:
    """
    Concatenate the configured inputs into one image file.

    Pipeline:
    1. Compute placements and canvas size
    2. Allocate the background-filled canvas
    3. For each placement, in input order: decode, draw, close
    4. Encode the canvas to the output path

    Inputs are processed one at a time; later images are drawn over
    earlier ones where rectangles overlap. The first failure aborts the
    run and nothing is written.

    Args:
        config: Run configuration

    Returns:
        ConcatResult describing the written file

    Raises:
        DecodeError: If an input cannot be opened or decoded
        EncodeError: If the output cannot be written

    Example:
        >>> result = concat_images(config)
        >>> print(f"Wrote {result.canvas} to {result.output}")
    """
    start_time = time.perf_counter()

    layout = compute_layout(
        config.inputs,
        config.layout,
        config.spacing,
        source_origin=config.source_origin,
    )
    policy = config.composite_policy

    logger.info(
        f"Laying out {layout.placement_count} images "
        f"({config.layout.mode.value}, {config.layout.cell_width}x{config.layout.cell_height} cells) "
        f"on a {layout.canvas} canvas"
    )

    canvas = new_canvas(layout.canvas, config.background)

    for placement in layout.placements:
        with open_source_image(placement.source) as image:
            draw(canvas, placement, image, policy)
        logger.debug(f"Drew {placement.source} at {placement.rect.as_box()}")

    output = write_image(canvas, config.output)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Wrote {layout.canvas} composite to {output} in {elapsed:.2f}s")

    return ConcatResult(
        output=output,
        canvas=layout.canvas,
        placement_count=layout.placement_count,
        elapsed_s=elapsed,
    )
