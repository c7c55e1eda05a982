"""
Module: imgcat.cli

Purpose:
    Command-line front end. Parses arguments into a ConcatConfig,
    configures logging and runs the pipeline.

Key Functions:
    - build_parser(): argparse parser for the tool
    - build_config(): Parsed arguments to ConcatConfig
    - main(): Entry point, returns the process exit status

Used By:
    - imgcat.__main__: ``python -m imgcat``
    - ``imgcat`` console script
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import ImageColor

from . import __version__
from .config import ConcatConfig, ConfigurationError
from .controller import concat_images
from .images import DEFAULT_BACKGROUND, DecodeError
from .layout import CompositePolicy, LayoutConfig, LayoutMode, SpacingConfig
from .output import EncodeError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imgcat",
        usage="%(prog)s [OPTIONS] IMAGE [IMAGE ...]",
        description="Concatenate images into one composite (vertical, horizontal or tiled).",
        add_help=False,
    )
    parser.add_argument("inputs", nargs="*", type=Path, metavar="IMAGE", help="Input image files, in order")

    crop = parser.add_argument_group("source crop")
    crop.add_argument("-x", type=int, default=0, help="X of the crop origin in every input (default 0: left edge)")
    crop.add_argument("-y", type=int, default=0, help="Y of the crop origin in every input (default 0: top edge)")
    crop.add_argument("--width", type=int, help="Cell width in pixels (required)")
    crop.add_argument("--height", type=int, help="Cell height in pixels (required)")

    layout = parser.add_argument_group("layout")
    layout.add_argument(
        "--layout",
        type=str.lower,
        choices=[m.value for m in LayoutMode],
        default=LayoutMode.VERTICAL.value,
        help="Layout mode (default: vertical)",
    )
    layout.add_argument("--wrap", type=int, default=0, help="Images per column/row before wrapping (default 0: no wrap)")
    layout.add_argument("--column", type=int, help="Column count for the tiling layout (required for tiling)")
    layout.add_argument("--gap", type=int, help="Gap between images in pixels (enables spacing mode)")
    layout.add_argument("--margin", type=int, help="Margin around the composite in pixels (enables spacing mode)")

    render = parser.add_argument_group("rendering")
    render.add_argument(
        "--composite",
        type=str.lower,
        choices=[p.value for p in CompositePolicy],
        help="overwrite or overlay (default: overlay for tiling, overwrite otherwise)",
    )
    render.add_argument("--background", default=None, help="Canvas colour, e.g. white, #00000000 (default: white)")
    render.add_argument("-o", "--output", type=Path, help="Output file, .png/.jpg/.jpeg (required)")

    misc = parser.add_argument_group("misc")
    misc.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    misc.add_argument("-h", "--help", action="store_true", help="Show this help and exit")
    misc.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _parse_background(value: Optional[str]) -> Tuple[int, int, int, int]:
    if value is None:
        return DEFAULT_BACKGROUND
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError as e:
        raise ConfigurationError(f"Unknown background colour: {value!r}") from e
    if len(rgb) == 3:
        return (*rgb, 255)
    return rgb


def build_config(args: argparse.Namespace) -> ConcatConfig:
    """
    Turn parsed arguments into a validated ConcatConfig.

    Raises:
        ConfigurationError: If a required argument is missing or invalid
    """
    if not args.inputs:
        raise ConfigurationError("At least one input image is required")
    if args.output is None:
        raise ConfigurationError("required '--output' arg")
    if args.width is None or args.height is None:
        raise ConfigurationError("required '--width' and '--height'")
    if args.wrap < 0:
        raise ConfigurationError("'--wrap' must be 0 or greater")

    mode = LayoutMode(args.layout)
    if mode is LayoutMode.TILING:
        if args.column is None:
            raise ConfigurationError("required '--column' for the tiling layout")
        if args.wrap:
            raise ConfigurationError("'--wrap' has no effect with the tiling layout; use '--column'")
    elif args.column is not None:
        raise ConfigurationError(f"'--column' only applies to the tiling layout, not {mode.value}")

    layout = LayoutConfig(
        mode=mode,
        cell_width=args.width,
        cell_height=args.height,
        wrap=args.wrap or None,
        columns=args.column,
    )

    spacing = None
    if args.gap is not None or args.margin is not None:
        spacing = SpacingConfig(gap=args.gap or 0, margin=args.margin or 0)

    composite = CompositePolicy(args.composite) if args.composite else None

    return ConcatConfig(
        inputs=tuple(args.inputs),
        output=args.output,
        layout=layout,
        spacing=spacing,
        source_origin=(args.x, args.y),
        composite=composite,
        background=_parse_background(args.background),
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the tool.

    Returns:
        0 on success, 2 for usage/configuration errors (and help),
        1 if an input cannot be decoded or the output cannot be written
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(f"{parser.prog}: {e}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    _configure_logging(args.verbose)

    try:
        concat_images(config)
    except DecodeError as e:
        logger.error(f"failed to draw: {e}")
        return EXIT_FAILURE
    except EncodeError as e:
        logger.error(f"failed: {e}")
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
