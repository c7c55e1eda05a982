"""Top-level package for imgcat.

Concatenates a list of images onto one canvas (stacked, wrapped grid or
fixed-column tiling) and writes the composite to a PNG or JPEG file.

Provides subpackages:
- imgcat.layout – pure layout engine (cell positions, rectangles, canvas size)
- imgcat.images – decoding and compositing
- imgcat.output – output encoding
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.is_file():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("imgcat")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .config import ConcatConfig, ConfigurationError
from .controller import ConcatResult, concat_images

__all__: list[str] = [
    "__version__",
    "ConcatConfig",
    "ConfigurationError",
    "ConcatResult",
    "concat_images",
]
