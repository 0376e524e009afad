"""Unit tests for Isla's pixel canvas."""

from unittest.mock import patch

import pytest

from services.canvas import PixelCanvas, round_half_up, stroke_thickness
from services.palette import Color


WHITE = Color(r=255, g=255, b=255, a=255)
BLACK = Color(r=0, g=0, b=0, a=255)
RED = Color(r=200, g=10, b=20, a=255)


def _written_coordinates(canvas, draw):
    """Run `draw` and return every (x, y) handed to blend_pixel."""
    with patch.object(canvas, 'blend_pixel', wraps=canvas.blend_pixel) as spy:
        draw()
    return [(c.args[0], c.args[1]) for c in spy.call_args_list]


class TestRounding:
    """Test layout rounding helpers."""

    def test_round_half_up(self):
        """Test .5 always rounds up, unlike round()."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2

    @pytest.mark.parametrize('size,expected', [(10, 1), (152, 3), (180, 4), (192, 4), (512, 10)])
    def test_stroke_thickness(self, size, expected):
        """Test thickness is 2% of the size, at least one pixel."""
        assert stroke_thickness(size) == expected


class TestPixelCanvas:
    """Test canvas construction and access."""

    def test_new_canvas_is_transparent(self):
        """Test a fresh buffer is size*size*4 zero bytes."""
        canvas = PixelCanvas(3)
        assert canvas.to_bytes() == bytes(36)

    @pytest.mark.parametrize('size', [0, -4, 2.5])
    def test_invalid_size(self, size):
        """Test non-positive or non-integer sizes are rejected."""
        with pytest.raises(ValueError):
            PixelCanvas(size)

    def test_pixel_layout(self):
        """Test (x, y) maps to (y*size + x)*4."""
        canvas = PixelCanvas(4)
        canvas.blend_pixel(1, 2, RED)
        idx = (2 * 4 + 1) * 4
        assert canvas.to_bytes()[idx:idx + 4] == bytes([200, 10, 20, 255])
        assert canvas.get_pixel(1, 2) == (200, 10, 20, 255)

    def test_to_bytes_is_a_snapshot(self):
        """Test later drawing does not change an earlier snapshot."""
        canvas = PixelCanvas(2)
        snapshot = canvas.to_bytes()
        canvas.fill_rect(0, 0, 2, 2, RED)
        assert snapshot == bytes(16)


class TestBlendPixel:
    """Test the source-over blend."""

    @pytest.mark.parametrize('prior', [(0, 0, 0, 0), (12, 34, 56, 78), (255, 255, 255, 255)])
    def test_opaque_source_replaces_destination(self, prior):
        """Test full opacity replaces whatever was there."""
        canvas = PixelCanvas(1)
        canvas.pixels[0:4] = bytes(prior)

        canvas.blend_pixel(0, 0, RED, 1.0)
        assert canvas.get_pixel(0, 0) == (200, 10, 20, 255)

        canvas.pixels[0:4] = bytes(prior)
        canvas.blend_pixel(0, 0, RED)
        assert canvas.get_pixel(0, 0) == (200, 10, 20, 255)

    def test_half_alpha_over_transparent(self):
        """Test color keeps its value and alpha rounds half up."""
        canvas = PixelCanvas(1)
        canvas.blend_pixel(0, 0, RED, 0.5)
        assert canvas.get_pixel(0, 0) == (200, 10, 20, 128)

    def test_color_alpha_used_without_override(self):
        """Test the color's own alpha applies when no override is given."""
        canvas = PixelCanvas(1)
        canvas.fill_rect(0, 0, 1, 1, BLACK)
        canvas.blend_pixel(0, 0, WHITE.with_alpha(51))
        assert canvas.get_pixel(0, 0) == (51, 51, 51, 255)

    def test_partial_alpha_over_opaque(self):
        """Test a quarter-opacity white over black."""
        canvas = PixelCanvas(1)
        canvas.fill_rect(0, 0, 1, 1, BLACK)
        canvas.blend_pixel(0, 0, WHITE, 0.25)
        assert canvas.get_pixel(0, 0) == (64, 64, 64, 255)

    def test_zero_alpha_over_transparent(self):
        """Test nothing over nothing stays fully transparent."""
        canvas = PixelCanvas(1)
        canvas.blend_pixel(0, 0, RED, 0.0)
        assert canvas.get_pixel(0, 0) == (0, 0, 0, 0)

    def test_zero_alpha_keeps_destination(self):
        """Test a fully transparent source leaves an opaque pixel alone."""
        canvas = PixelCanvas(1)
        canvas.fill_rect(0, 0, 1, 1, RED)
        canvas.blend_pixel(0, 0, WHITE, 0.0)
        assert canvas.get_pixel(0, 0) == (200, 10, 20, 255)


class TestFillRect:
    """Test filled rectangles."""

    def test_clamps_to_canvas(self):
        """Test out-of-range corners are clamped and fractional edges widen."""
        canvas = PixelCanvas(4)
        coords = _written_coordinates(canvas, lambda: canvas.fill_rect(-2, -2, 2.5, 10, RED))

        assert set(coords) == {(x, y) for x in range(3) for y in range(4)}
        assert canvas.get_pixel(3, 0) == (0, 0, 0, 0)

    def test_empty_rect(self):
        """Test a rectangle entirely off-canvas writes nothing."""
        canvas = PixelCanvas(4)
        assert _written_coordinates(canvas, lambda: canvas.fill_rect(5, 5, 9, 9, RED)) == []


class TestDrawCircle:
    """Test hard-edged circles."""

    def test_samples_pixel_centers(self):
        """Test a unit circle centered on a grid point covers four pixels."""
        canvas = PixelCanvas(10)
        coords = _written_coordinates(canvas, lambda: canvas.draw_circle(5, 5, 1, RED))
        assert set(coords) == {(4, 4), (5, 4), (4, 5), (5, 5)}

    @pytest.mark.parametrize('cx,cy', [(0, 0), (8, 8), (4, 4), (-3, 9)])
    def test_never_writes_out_of_bounds(self, cx, cy):
        """Test circles larger than the canvas stay inside it."""
        canvas = PixelCanvas(8)
        coords = _written_coordinates(canvas, lambda: canvas.draw_circle(cx, cy, 20, RED))

        assert coords
        assert all(0 <= x < 8 and 0 <= y < 8 for x, y in coords)

    def test_covering_circle_paints_every_pixel(self):
        """Test a circle reaching past all corners fills the canvas."""
        canvas = PixelCanvas(8)
        canvas.draw_circle(4, 4, 20, RED)
        assert canvas.to_bytes() == bytes([200, 10, 20, 255]) * 64


class TestRoundedRectStroke:
    """Test rounded rectangle outlines (size 100 -> thickness 2)."""

    @pytest.fixture
    def stroked(self):
        canvas = PixelCanvas(100)
        canvas.draw_rounded_rect_stroke(10, 10, 80, 80, 16, RED)
        return canvas

    def test_straight_edges(self, stroked):
        """Test each straight side is two pixels thick."""
        painted = (200, 10, 20, 255)
        assert stroked.get_pixel(50, 10) == painted
        assert stroked.get_pixel(50, 11) == painted
        assert stroked.get_pixel(50, 12)[3] == 0
        assert stroked.get_pixel(50, 89) == painted
        assert stroked.get_pixel(50, 87)[3] == 0
        assert stroked.get_pixel(10, 50) == painted
        assert stroked.get_pixel(89, 50) == painted
        assert stroked.get_pixel(87, 50)[3] == 0

    def test_interior_untouched(self, stroked):
        """Test only the outline is drawn."""
        assert stroked.get_pixel(50, 50) == (0, 0, 0, 0)

    def test_corners_are_rounded(self, stroked):
        """Test the square corner is skipped and the arc is drawn."""
        assert stroked.get_pixel(10, 10) == (0, 0, 0, 0)
        assert stroked.get_pixel(15, 15) == (200, 10, 20, 255)

    def test_alpha_override(self):
        """Test the stroke opacity override."""
        canvas = PixelCanvas(100)
        canvas.draw_rounded_rect_stroke(10, 10, 80, 80, 16, RED, 0.5)
        assert canvas.get_pixel(50, 10) == (200, 10, 20, 128)

    def test_never_writes_out_of_bounds(self):
        """Test a rectangle hanging off the canvas is clipped."""
        canvas = PixelCanvas(10)
        coords = _written_coordinates(
            canvas, lambda: canvas.draw_rounded_rect_stroke(-3, -3, 10, 30, 4, RED)
        )
        assert coords
        assert all(0 <= x < 10 and 0 <= y < 10 for x, y in coords)
