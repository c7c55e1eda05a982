"""
Module: imgcat.config

Purpose:
    Configuration dataclass for one concatenation run. Immutable
    configuration with validation on construction, built once from the
    command line and passed explicitly through the pipeline.

Key Classes:
    - ConcatConfig: Inputs, output and layout settings for a run
    - ConfigurationError: Invalid configuration value

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - imgcat.controller: Main pipeline
    - imgcat.cli: Argument parsing
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from imgcat.images.compositor import DEFAULT_BACKGROUND
from imgcat.layout.config import (
    CompositePolicy,
    ConfigurationError,
    LayoutConfig,
    LayoutMode,
    SpacingConfig,
)
from imgcat.output.writer import encoder_for

__all__ = ["ConcatConfig", "ConfigurationError"]


@dataclass(frozen=True)
class ConcatConfig:
    """
    Configuration for one concatenation run (immutable).

    Attributes:
        inputs: Input image paths in composite order
        output: Output file path; its extension selects the encoding
        layout: Layout mode, cell size and wrap settings
        spacing: Gap/margin settings, or None for gapless cells
        source_origin: (x, y) crop origin applied to every input
        composite: Compositing policy, or None for the layout default
        background: RGBA fill of the canvas before drawing

    Example:
        >>> config = ConcatConfig(
        ...     inputs=(Path("a.png"), Path("b.png")),
        ...     output=Path("out.png"),
        ...     layout=LayoutConfig(LayoutMode.HORIZONTAL, 64, 64),
        ... )
        >>> config.composite_policy
        <CompositePolicy.OVERWRITE: 'overwrite'>
    """

    # Required
    inputs: Tuple[Path, ...]
    output: Path
    layout: LayoutConfig

    # Placement
    spacing: Optional[SpacingConfig] = None
    source_origin: Tuple[int, int] = (0, 0)

    # Rendering
    composite: Optional[CompositePolicy] = None
    background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.inputs:
            raise ConfigurationError("At least one input image is required")
        if not Path(self.output).name:
            raise ConfigurationError("An output file is required")
        # Raises ConfigurationError for unsupported extensions
        encoder_for(self.output)
        x, y = self.source_origin
        if x < 0 or y < 0:
            raise ConfigurationError(f"source origin must be non-negative: ({x}, {y})")
        if len(self.background) != 4 or any(not 0 <= c <= 255 for c in self.background):
            raise ConfigurationError(f"background must be an RGBA tuple: {self.background}")

    @property
    def composite_policy(self) -> CompositePolicy:
        """Effective compositing policy (overlay for Tiling, else overwrite)."""
        if self.composite is not None:
            return self.composite
        if self.layout.mode is LayoutMode.TILING:
            return CompositePolicy.OVERLAY
        return CompositePolicy.OVERWRITE
