"""
Module: imgcat.output.writer

Purpose:
    Encode the finished canvas to disk. The format is chosen purely
    from the output path's extension.

Key Functions:
    - encoder_for(): Resolve the encoder for an output path
    - write_image(): Atomically encode an image to a file

Key Classes:
    - ImageEncoder: Pillow format name and save options
    - EncodeError: Output cannot be created or encoded

Dependencies:
    - PIL.Image: Image saving

Used By:
    - imgcat.config: Output extension validation
    - imgcat.controller: Final output step
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from PIL import Image

from imgcat.layout.config import ConfigurationError

logger = logging.getLogger(__name__)

JPEG_QUALITY = 90
PNG_COMPRESS_LEVEL = 6


class EncodeError(Exception):
    """Output file cannot be created or encoded."""

    def __init__(self, path: Union[str, os.PathLike], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write {self.path}: {reason}")


@dataclass(frozen=True)
class ImageEncoder:
    """
    Pillow encoder settings for one output format.

    Attributes:
        format: Pillow format name ("PNG", "JPEG")
        mode: Image mode the canvas is converted to before saving
        options: Extra keyword arguments for Image.save()
    """

    format: str
    mode: str
    options: Dict[str, Any] = field(default_factory=dict)

    def encode(self, image: Image.Image, fp) -> None:
        """Write ``image`` to the open binary file ``fp``."""
        if image.mode != self.mode:
            image = image.convert(self.mode)
        image.save(fp, format=self.format, **self.options)


ENCODERS: Dict[str, ImageEncoder] = {
    ".png": ImageEncoder("PNG", "RGBA", {"compress_level": PNG_COMPRESS_LEVEL}),
    ".jpg": ImageEncoder("JPEG", "RGB", {"quality": JPEG_QUALITY}),
    ".jpeg": ImageEncoder("JPEG", "RGB", {"quality": JPEG_QUALITY}),
}


def encoder_for(path: Union[str, os.PathLike]) -> ImageEncoder:
    """
    Get the encoder selected by the extension of ``path``.

    Raises:
        ConfigurationError: If the extension is not a supported format

    Example:
        >>> encoder_for("out.JPG").format
        'JPEG'
    """
    suffix = Path(path).suffix.lower()
    encoder = ENCODERS.get(suffix)
    if encoder is None:
        supported = ", ".join(sorted(ENCODERS))
        raise ConfigurationError(
            f"Unknown output extension {suffix or '(none)'!r} for {path}; use one of {supported}"
        )
    return encoder


def _output_mode(path: Path) -> int:
    """Permission bits for the output: keep an existing file's, else 0666 minus umask."""
    if path.is_file():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_image(image: Image.Image, path: Union[str, os.PathLike]) -> Path:
    """
    Encode ``image`` to ``path`` atomically.

    The image is encoded into a temp file next to the destination, then
    moved over it, so a failed run never leaves a partial output file.

    Args:
        image: Canvas to save
        path: Destination file; extension selects the format

    Returns:
        Path of the written file

    Raises:
        ConfigurationError: If the extension is not supported
        EncodeError: If the file cannot be created or encoding fails
    """
    path = Path(path)
    encoder = encoder_for(path)

    temp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            suffix=path.suffix,
            dir=path.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            encoder.encode(image, f)
        # Temp files are created 0600; give the output normal file permissions
        temp_path.chmod(_output_mode(path))
        # Use replace() instead of rename() for Windows compatibility
        temp_path.replace(path)
    except (OSError, ValueError) as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise EncodeError(path, str(e) or type(e).__name__) from e

    logger.debug(f"Wrote {encoder.format} {image.width}x{image.height} to {path}")
    return path
