"""
RGBA8 pixel canvas with the compositing primitives the icon artwork needs.

Every drawing operation reduces to repeated `blend_pixel` calls, which apply
the source-over operator. Alpha overrides are opacities in [0, 1]; when no
override is given the color's own alpha (a / 255) is used.
"""

import math
from typing import Optional, Tuple

from services.palette import Color


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def stroke_thickness(size: int) -> int:
    """Outline thickness used for strokes and the edge soften band."""
    return max(1, round_half_up(size * 0.02))


class PixelCanvas:
    """
    Square RGBA8 buffer, stored row-major as a flat bytearray.

    The pixel at (x, y) lives at `(y * size + x) * 4`, channels R, G, B, A.
    A fresh canvas is fully transparent black.
    """

    def __init__(self, size: int):
        if not isinstance(size, int) or size <= 0:
            raise ValueError(f"Canvas size must be a positive integer, got {size!r}")
        self.size = size
        self.pixels = bytearray(size * size * 4)

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        idx = (y * self.size + x) * 4
        return tuple(self.pixels[idx:idx + 4])

    def to_bytes(self) -> bytes:
        """Immutable snapshot of the buffer, ready for the encoder."""
        return bytes(self.pixels)

    def blend_pixel(self, x: int, y: int, color: Color, alpha: Optional[float] = None) -> None:
        """
        Composite `color` over the pixel at (x, y).

        Coordinates must already be inside the canvas; the shape primitives
        clamp their scan ranges before calling this.
        """
        pixels = self.pixels
        idx = (y * self.size + x) * 4
        dest_a = pixels[idx + 3] / 255
        src_a = color.a / 255 if alpha is None else alpha
        out_a = src_a + dest_a * (1 - src_a)

        if out_a > 0:
            keep = dest_a * (1 - src_a)
            pixels[idx] = _channel(color.r * src_a + pixels[idx] * keep, out_a)
            pixels[idx + 1] = _channel(color.g * src_a + pixels[idx + 1] * keep, out_a)
            pixels[idx + 2] = _channel(color.b * src_a + pixels[idx + 2] * keep, out_a)
        else:
            pixels[idx] = pixels[idx + 1] = pixels[idx + 2] = 0
        pixels[idx + 3] = min(255, round_half_up(out_a * 255))

    def fill_rect(self, x0: float, y0: float, x1: float, y1: float,
                  color: Color, alpha: Optional[float] = None) -> None:
        """Blend `color` into every pixel of [x0, x1) x [y0, y1), clamped to the canvas."""
        min_x = max(0, math.floor(x0))
        min_y = max(0, math.floor(y0))
        max_x = min(self.size, math.ceil(x1))
        max_y = min(self.size, math.ceil(y1))
        for y in range(min_y, max_y):
            for x in range(min_x, max_x):
                self.blend_pixel(x, y, color, alpha)

    def draw_circle(self, cx: float, cy: float, radius: float, color: Color) -> None:
        """Hard-edged filled circle, sampled at pixel centers, boundary inclusive."""
        r2 = radius * radius
        min_x = max(0, math.floor(cx - radius))
        max_x = min(self.size - 1, math.ceil(cx + radius))
        min_y = max(0, math.floor(cy - radius))
        max_y = min(self.size - 1, math.ceil(cy + radius))
        for y in range(min_y, max_y + 1):
            dy = y + 0.5 - cy
            for x in range(min_x, max_x + 1):
                dx = x + 0.5 - cx
                if dx * dx + dy * dy <= r2:
                    self.blend_pixel(x, y, color)

    def draw_rounded_rect_stroke(self, x: float, y: float, width: float, height: float,
                                 radius: float, color: Color, alpha: float = 1.0) -> None:
        """
        Outline of a rounded rectangle; the interior is left untouched.

        Straight runs cover rows/columns closer than `thickness` to the
        rectangle's outer edge. In the corners a pixel is on the stroke when
        its center lies between `radius - thickness` and `radius` from the
        corner arc's center.
        """
        r = max(0, radius)
        x_end = x + width
        y_end = y + height
        thickness = stroke_thickness(self.size)

        for yy in range(max(0, math.floor(y)), min(self.size, math.ceil(y_end))):
            in_y = y + r <= yy < y_end - r
            for xx in range(max(0, math.floor(x)), min(self.size, math.ceil(x_end))):
                in_x = x + r <= xx < x_end - r
                if in_x:
                    on_edge = abs(yy - y) < thickness or abs(yy - y_end + 1) < thickness
                elif in_y:
                    on_edge = abs(xx - x) < thickness or abs(xx - x_end + 1) < thickness
                else:
                    corner_x = x + r if xx < x + r else x_end - r - 1
                    corner_y = y + r if yy < y + r else y_end - r - 1
                    distance = math.hypot(xx + 0.5 - corner_x, yy + 0.5 - corner_y)
                    on_edge = r - thickness <= distance <= r
                if on_edge:
                    self.blend_pixel(xx, yy, color, alpha)


def _channel(weighted: float, out_a: float) -> int:
    return min(255, max(0, round_half_up(weighted / out_a)))
