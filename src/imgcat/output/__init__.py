"""
Module: imgcat.output

Purpose:
    Output encoding for the finished canvas (PNG, JPEG).

Key Functions:
    - encoder_for(): Resolve encoder from the output extension
    - write_image(): Atomic encode to disk

Used By:
    - imgcat.controller: Final output step
"""

from .writer import ENCODERS, EncodeError, ImageEncoder, encoder_for, write_image

__all__ = [
    "ENCODERS",
    "EncodeError",
    "ImageEncoder",
    "encoder_for",
    "write_image",
]
