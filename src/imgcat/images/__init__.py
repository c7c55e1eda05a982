"""
Module: imgcat.images

Purpose:
    Image access and compositing. Decodes input images and copies
    their cell regions into the output canvas.

Key Classes:
    - DecodeError: Input cannot be decoded

Key Functions:
    - open_source_image(): Decode one input
    - new_canvas(): Allocate the output canvas
    - draw(): Copy one placement into the canvas

Dependencies:
    - PIL: Image decoding and manipulation

Used By:
    - imgcat.controller: Draw loop
"""

from .provider import DecodeError, open_source_image
from .compositor import DEFAULT_BACKGROUND, draw, new_canvas

__all__ = [
    "DecodeError",
    "open_source_image",
    "DEFAULT_BACKGROUND",
    "draw",
    "new_canvas",
]
