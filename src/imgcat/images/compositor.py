"""
Module: imgcat.images.compositor

Purpose:
    Allocate the output canvas and copy each placement's source region
    into it.

Key Functions:
    - new_canvas(): Background-filled RGBA canvas
    - draw(): Copy one placement into the canvas

Dependencies:
    - PIL: Image manipulation
    - imgcat.layout.models: Placement, CanvasSize

Used By:
    - imgcat.controller: Draw loop
"""

from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image

from imgcat.layout.config import CompositePolicy
from imgcat.layout.models import CanvasSize, Placement

logger = logging.getLogger(__name__)

# Opaque white, the fill used before any image is drawn
DEFAULT_BACKGROUND: Tuple[int, int, int, int] = (255, 255, 255, 255)


def new_canvas(
    size: CanvasSize,
    background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND,
) -> Image.Image:
    """Allocate an RGBA canvas of ``size`` filled with ``background``."""
    return Image.new("RGBA", size.as_tuple(), background)


def draw(
    canvas: Image.Image,
    placement: Placement,
    image: Image.Image,
    policy: CompositePolicy = CompositePolicy.OVERWRITE,
) -> bool:
    """
    Copy the placement's source region of ``image`` into ``canvas``.

    The region starts at ``placement.source_origin`` and has the cell's
    size. It is clipped to the source bounds: parts of the cell the
    source does not cover keep whatever the canvas already holds.

    Args:
        canvas: RGBA destination (modified in place)
        placement: Source origin and destination rectangle
        image: Decoded source image
        policy: OVERWRITE replaces destination pixels, OVERLAY blends
                source-over

    Returns:
        True if any pixel was copied, False if the source region lies
        entirely outside the image

    Raises:
        ValueError: If the placement rectangle lies outside the canvas
    """
    rect = placement.rect
    if rect.x0 < 0 or rect.y0 < 0 or rect.x1 > canvas.width or rect.y1 > canvas.height:
        raise ValueError(
            f"Placement {placement.index} {rect.as_box()} exceeds canvas "
            f"{canvas.width}x{canvas.height}"
        )

    left, top, right, bottom = placement.crop_box
    right = min(right, image.width)
    bottom = min(bottom, image.height)
    if right <= left or bottom <= top:
        logger.warning(
            f"{placement.source}: crop origin ({left}, {top}) outside "
            f"{image.width}x{image.height} image, nothing drawn"
        )
        return False

    region = image.crop((left, top, right, bottom))
    if region.mode != "RGBA":
        region = region.convert("RGBA")

    if policy is CompositePolicy.OVERLAY:
        canvas.alpha_composite(region, dest=rect.origin)
    else:
        canvas.paste(region, rect.origin)

    return True
