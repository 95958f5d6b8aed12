"""Colour model — hex parsing, WCAG relative luminance and auto-contrast.

Luminance and contrast follow WCAG 2.x:
    L = 0.2126 R_lin + 0.7152 G_lin + 0.0722 B_lin
    contrast = (L_light + 0.05) / (L_dark + 0.05)
Alpha never takes part in luminance.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from placard.engine.errors import InvalidColor
from placard.utils.math_helpers import round_half_up

_HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]+$")

# sRGB transfer function breakpoint (IEC 61966-2-1).
_SRGB_LINEAR_CUTOFF = 0.04045


@dataclass(frozen=True)
class Color:
    """Immutable RGBA colour: 8-bit channels, alpha in [0, 1]."""

    r: int
    g: int
    b: int
    alpha: float = 1.0

    def to_hex(self) -> str:
        """Lower-case ``#rrggbb``, or ``#rrggbbaa`` when not fully opaque."""
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.alpha >= 1.0:
            return base
        return base + f"{round_half_up(self.alpha * 255):02x}"

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
WHITE_HEX = "#ffffff"
BLACK_HEX = "#000000"


def parse_hex(value: str) -> Color:
    """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional)."""
    if not isinstance(value, str):
        raise InvalidColor(f'Invalid hex color: "{value}"')
    raw = value.strip()
    digits = raw[1:] if raw.startswith("#") else raw

    if len(digits) not in (3, 6, 8):
        raise InvalidColor(
            f'Invalid hex color: "{value}"',
            ["Supported formats: #RGB, #RRGGBB, #RRGGBBAA"],
        )
    if not _HEX_DIGITS_RE.match(digits):
        raise InvalidColor(f'Invalid hex color: "{value}"')

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0

    if any(ch < 0 or ch > 255 for ch in (r, g, b)):
        raise InvalidColor(f'Invalid hex color: "{value}"')
    return Color(r, g, b, alpha)


def srgb_to_linear(value: float) -> float:
    """Convert one 0-255 sRGB channel to linear light in [0, 1]."""
    c = value / 255
    if c <= _SRGB_LINEAR_CUTOFF:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    return (
        0.2126 * srgb_to_linear(color.r)
        + 0.7152 * srgb_to_linear(color.g)
        + 0.0722 * srgb_to_linear(color.b)
    )


def contrast_ratio(l1: float, l2: float) -> float:
    """WCAG contrast ratio between two luminances; symmetric, in [1, 21]."""
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


_WHITE_LUM = relative_luminance(WHITE)
_BLACK_LUM = relative_luminance(BLACK)


def pick_contrast_hex(white_contrast: float, black_contrast: float) -> str:
    """White wins ties."""
    return WHITE_HEX if white_contrast >= black_contrast else BLACK_HEX


def auto_text_color(bg: Color) -> str:
    """Black or white, whichever contrasts more with ``bg``."""
    lum = relative_luminance(bg)
    return pick_contrast_hex(contrast_ratio(_WHITE_LUM, lum), contrast_ratio(_BLACK_LUM, lum))


def worst_case_text_color(samples: list[Color]) -> str:
    """Pick black or white by the minimum contrast over every sample.

    A single light corner on an otherwise dark gradient must not be hidden
    by a favourable average, so each candidate is scored by its weakest sample.
    """
    if not samples:
        raise ValueError("worst_case_text_color needs at least one sample")
    lums = [relative_luminance(c) for c in samples]
    white_min = min(contrast_ratio(_WHITE_LUM, lum) for lum in lums)
    black_min = min(contrast_ratio(_BLACK_LUM, lum) for lum in lums)
    return pick_contrast_hex(white_min, black_min)


def opposite_contrast_hex(hex_color: str) -> str:
    """Flip between ``#ffffff`` and ``#000000``."""
    return BLACK_HEX if hex_color.lower() == WHITE_HEX else WHITE_HEX


def lerp_color(start: Color, end: Color, t: float) -> Color:
    """Linear interpolation of r, g, b and alpha; exact stop colours at t=0 and t=1."""
    if t <= 0.0:
        return start
    if t >= 1.0:
        return end
    return Color(
        r=round_half_up(start.r + (end.r - start.r) * t),
        g=round_half_up(start.g + (end.g - start.g) * t),
        b=round_half_up(start.b + (end.b - start.b) * t),
        alpha=start.alpha + (end.alpha - start.alpha) * t,
    )
