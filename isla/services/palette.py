"""Brand colors used by the icon artwork."""

import re
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


_NON_HEX = re.compile(r'[^0-9a-fA-F]')


class Color(BaseModel):
    """An RGBA8 color. Every channel is an integer in [0, 255]."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: int = Field(ge=0, le=255)

    def with_alpha(self, a: int) -> 'Color':
        """Copy of this color with the alpha channel replaced."""
        return Color(r=self.r, g=self.g, b=self.b, a=a)

    def to_hex(self) -> str:
        """Format as '#RRGGBB' (alpha is dropped)."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


def hex_to_color(hex_str: str, alpha: int = 255) -> Color:
    """
    Parse a CSS-style hex color.

    Accepts '#RRGGBB', 'RRGGBB' and the '#RGB' shorthand. Anything that is
    not a hex digit is ignored.

    Raises:
        ValueError: If the string does not hold 3 or 6 hex digits
    """
    clean = _NON_HEX.sub('', hex_str)
    if len(clean) == 3:
        clean = ''.join(ch * 2 for ch in clean)
    if len(clean) != 6:
        raise ValueError(f"Invalid hex color: {hex_str!r}")
    return Color(
        r=int(clean[0:2], 16),
        g=int(clean[2:4], 16),
        b=int(clean[4:6], 16),
        a=alpha,
    )


# `text` is not painted yet but stays part of the brand set.
BRAND = MappingProxyType({
    'primary': hex_to_color('#2D2A6A'),
    'accent': hex_to_color('#7C4DFF'),
    'success': hex_to_color('#10B981'),
    'cta': hex_to_color('#2563EB'),
    'background': hex_to_color('#FAFAFA'),
    'text': hex_to_color('#0F172A'),
})
