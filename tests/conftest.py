import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import imgcat
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def make_image(tmp_path: Path):
    """Factory writing a solid-colour image and returning its path."""
    def _make(name: str, size=(10, 10), color=(255, 0, 0, 255), mode="RGBA"):
        img = Image.new(mode, size, color=color)
        img_path = tmp_path / name
        img.save(img_path)
        return img_path
    return _make


@pytest.fixture
def sample_images(make_image):
    """Three 10x10 PNGs: red, green, blue."""
    return [
        make_image("red.png", color=(255, 0, 0, 255)),
        make_image("green.png", color=(0, 255, 0, 255)),
        make_image("blue.png", color=(0, 0, 255, 255)),
    ]
