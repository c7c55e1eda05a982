"""
Module: imgcat.images.provider

Purpose:
    Open and decode input images for compositing.

Key Functions:
    - open_source_image(): Decode one input file to an RGBA image

Key Classes:
    - DecodeError: Input missing, unreadable or not a decodable image

Dependencies:
    - PIL: Image decoding

Used By:
    - imgcat.controller: Per-placement image loading
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from PIL import Image

logger = logging.getLogger(__name__)


class DecodeError(Exception):
    """Input image cannot be opened or decoded."""

    def __init__(self, path: Union[str, os.PathLike], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot decode {self.path}: {reason}")


def open_source_image(path: Union[str, os.PathLike]) -> Image.Image:
    """
    Open and fully decode an input image.

    Pixel data is loaded eagerly so that truncated or corrupt files fail
    here rather than during drawing. The result is converted to RGBA so
    that both compositing policies see an alpha channel.

    Args:
        path: Input image file

    Returns:
        Decoded RGBA image (caller closes it)

    Raises:
        DecodeError: If the file is missing, unreadable or not an image

    Example:
        >>> with open_source_image("a.png") as img:
        ...     img.mode
        'RGBA'
    """
    path = Path(path)
    if not path.is_file():
        raise DecodeError(path, "file not found")

    try:
        with Image.open(path) as img:
            img.load()
            logger.debug(f"Decoded {path.name}: {img.format} {img.mode} {img.width}x{img.height}")
            if img.mode == "RGBA":
                return img.copy()
            return img.convert("RGBA")
    except Image.DecompressionBombError as e:
        raise DecodeError(path, str(e)) from e
    except OSError as e:
        raise DecodeError(path, str(e) or type(e).__name__) from e
