"""
Tests for imgcat.images.compositor

Test Coverage:
- new_canvas(): size and background fill
- draw(): crop origin, clipping to source bounds, overwrite vs overlay
"""

import pytest
from PIL import Image

from imgcat.images import DEFAULT_BACKGROUND, draw, new_canvas
from imgcat.layout import CanvasSize, CompositePolicy, Placement, Rect


def _placement(rect, origin=(0, 0)):
    return Placement(index=0, source="src.png", source_origin=origin, rect=rect)


@pytest.fixture
def canvas():
    """20x10 white canvas."""
    return new_canvas(CanvasSize(20, 10))


def test_new_canvas_is_background_filled(canvas):
    assert canvas.mode == "RGBA"
    assert canvas.size == (20, 10)
    assert canvas.getpixel((19, 9)) == DEFAULT_BACKGROUND


def test_new_canvas_custom_background():
    canvas = new_canvas(CanvasSize(2, 2), (0, 0, 0, 0))

    assert canvas.getpixel((1, 1)) == (0, 0, 0, 0)


def test_draw_copies_into_rect(canvas):
    """Source pixels land at the destination rectangle only."""
    # Arrange
    src = Image.new("RGBA", (10, 10), (255, 0, 0, 255))

    # Act
    drawn = draw(canvas, _placement(Rect(10, 0, 20, 10)), src)

    # Assert
    assert drawn is True
    assert canvas.getpixel((10, 0)) == (255, 0, 0, 255)
    assert canvas.getpixel((19, 9)) == (255, 0, 0, 255)
    assert canvas.getpixel((9, 0)) == DEFAULT_BACKGROUND


def test_draw_uses_source_origin(canvas):
    """Crop starts at the placement's source origin."""
    src = Image.new("RGBA", (20, 20), (0, 0, 255, 255))
    src.putpixel((5, 5), (0, 255, 0, 255))

    draw(canvas, _placement(Rect(0, 0, 10, 10), origin=(5, 5)), src)

    assert canvas.getpixel((0, 0)) == (0, 255, 0, 255)
    assert canvas.getpixel((1, 1)) == (0, 0, 255, 255)


def test_draw_clips_to_source_bounds(canvas):
    """Cell area not covered by the source keeps the background."""
    src = Image.new("RGBA", (4, 3), (255, 0, 0, 255))

    draw(canvas, _placement(Rect(0, 0, 10, 10)), src)

    assert canvas.getpixel((3, 2)) == (255, 0, 0, 255)
    assert canvas.getpixel((4, 2)) == DEFAULT_BACKGROUND
    assert canvas.getpixel((3, 3)) == DEFAULT_BACKGROUND


def test_draw_origin_outside_source_draws_nothing(canvas):
    src = Image.new("RGBA", (4, 4), (255, 0, 0, 255))

    drawn = draw(canvas, _placement(Rect(0, 0, 10, 10), origin=(8, 0)), src)

    assert drawn is False
    assert canvas.getpixel((0, 0)) == DEFAULT_BACKGROUND


def test_overwrite_replaces_with_translucent_pixels(canvas):
    """OVERWRITE copies alpha as-is instead of blending."""
    src = Image.new("RGBA", (10, 10), (255, 0, 0, 0))

    draw(canvas, _placement(Rect(0, 0, 10, 10)), src, CompositePolicy.OVERWRITE)

    assert canvas.getpixel((0, 0)) == (255, 0, 0, 0)


def test_overlay_blends_source_over(canvas):
    """OVERLAY leaves the destination visible through transparent pixels."""
    src = Image.new("RGBA", (10, 10), (255, 0, 0, 0))
    src.putpixel((1, 1), (0, 0, 0, 255))

    draw(canvas, _placement(Rect(0, 0, 10, 10)), src, CompositePolicy.OVERLAY)

    assert canvas.getpixel((0, 0)) == DEFAULT_BACKGROUND
    assert canvas.getpixel((1, 1)) == (0, 0, 0, 255)


def test_later_draw_wins_on_overlap(canvas):
    """Overlapping placements are applied in order."""
    first = Image.new("RGBA", (10, 10), (255, 0, 0, 255))
    second = Image.new("RGBA", (10, 10), (0, 255, 0, 255))

    draw(canvas, _placement(Rect(0, 0, 10, 10)), first)
    draw(canvas, _placement(Rect(5, 0, 15, 10)), second)

    assert canvas.getpixel((4, 0)) == (255, 0, 0, 255)
    assert canvas.getpixel((5, 0)) == (0, 255, 0, 255)


def test_draw_converts_non_rgba_source(canvas):
    src = Image.new("L", (10, 10), 0)

    draw(canvas, _placement(Rect(0, 0, 10, 10)), src)

    assert canvas.getpixel((0, 0)) == (0, 0, 0, 255)


def test_draw_outside_canvas_raises(canvas):
    src = Image.new("RGBA", (10, 10))

    with pytest.raises(ValueError, match="exceeds canvas"):
        draw(canvas, _placement(Rect(15, 0, 25, 10)), src)
