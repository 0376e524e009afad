"""
Badge artwork for the wallet icons.

Layers are painted in a fixed order and each one composites over the result
of the previous ones, so the order below is part of the artwork.
"""

from services.canvas import PixelCanvas, round_half_up, stroke_thickness
from services.palette import BRAND, Color
from services.registry import IconSpec


HIGHLIGHT_ALPHA = 180
MASKABLE_BAR_ALPHA = 230 / 255
APPLE_STROKE_ALPHA = 120 / 255
DEFAULT_STROKE_ALPHA = 80 / 255
MASKABLE_SOFTEN_ALPHA = 0.18
DEFAULT_SOFTEN_ALPHA = 0.12


def accent_radius(spec: IconSpec) -> float:
    """Radius of the centered accent disc (wider on maskable icons to fill the safe zone)."""
    return spec.size * (0.44 if spec.maskable else 0.38)


def bar_height(size: int) -> int:
    return max(6, round_half_up(size * 0.17))


def paint_pixels(spec: IconSpec) -> PixelCanvas:
    """Paint the badge for `spec` onto a new canvas and return it."""
    size = spec.size
    canvas = PixelCanvas(size)

    # 1. Base field
    base = BRAND['background'] if spec.apple else BRAND['primary']
    canvas.fill_rect(0, 0, size, size, base)

    # 2. Accent disc
    radius = accent_radius(spec)
    canvas.draw_circle(size / 2, size / 2, radius, BRAND['accent'])

    # 3. Highlight, pulled toward the upper-left
    highlight = BRAND['background'].with_alpha(HIGHLIGHT_ALPHA)
    canvas.draw_circle(size / 2.9, size / 2.9, radius * 0.82, highlight)

    # 4. Status dot
    canvas.draw_circle(size * 0.72, size * 0.7, size * 0.19, BRAND['success'])

    # 5. Bottom bar
    height = bar_height(size)
    if spec.maskable:
        canvas.fill_rect(0, size - height, size, size, BRAND['accent'], MASKABLE_BAR_ALPHA)
    else:
        canvas.fill_rect(0, size - height, size, size, BRAND['cta'], 1.0)

    # 6. Inset border
    padding = max(4, round_half_up(size * 0.08))
    corner = max(8, round_half_up(size * 0.16))
    if spec.apple:
        stroke_color, stroke_alpha = BRAND['primary'], APPLE_STROKE_ALPHA
    else:
        stroke_color, stroke_alpha = BRAND['background'], DEFAULT_STROKE_ALPHA
    canvas.draw_rounded_rect_stroke(
        padding, padding, size - padding * 2, size - padding * 2,
        corner, stroke_color, stroke_alpha
    )

    # 7. Edge soften
    soften_edges(canvas, BRAND['primary'] if spec.apple else BRAND['background'], spec.maskable)

    return canvas


def soften_edges(canvas: PixelCanvas, edge_color: Color, maskable: bool) -> None:
    """Wash a thin band along all four borders with `edge_color`."""
    size = canvas.size
    inset = stroke_thickness(size)
    alpha = MASKABLE_SOFTEN_ALPHA if maskable else DEFAULT_SOFTEN_ALPHA
    for y in range(size):
        on_band_row = y < inset or y >= size - inset
        for x in range(size):
            if on_band_row or x < inset or x >= size - inset:
                canvas.blend_pixel(x, y, edge_color, alpha)
