"""Background resolver — solid fills and linear / radial gradients.

Spec strings:
    solid   "#111827"
    linear  "hex1,hex2,angleDeg"
    radial  "innerHex,outerHex[,cx,cy,r]"   cx/cy/r in px or "%"

Sampling works on normalized canvas points (x, y) in [0, 1]^2 with y pointing
down. Both gradient kinds map a point to an interpolation parameter t in
[0, 1] and blend the two stop colours linearly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from placard.engine.color import (
    Color,
    auto_text_color,
    lerp_color,
    parse_hex,
    worst_case_text_color,
)
from placard.engine.config import DEFAULT_CONFIG, EngineConfig
from placard.engine.errors import InvalidBackgroundSpec
from placard.utils.math_helpers import clamp01


@dataclass(frozen=True)
class Length:
    """A pixel length or a percentage of some reference length."""

    value: float
    percent: bool = False

    def resolve(self, reference: float) -> float:
        if self.percent:
            return self.value * reference / 100.0
        return self.value

    def __str__(self) -> str:
        text = f"{self.value:g}"
        return f"{text}%" if self.percent else text


def parse_length(token: str, error_cls: type[Exception] = InvalidBackgroundSpec) -> Length:
    """Parse ``"120"`` (px) or ``"50%"``. Raises ``error_cls`` on anything else."""
    raw = token.strip()
    percent = raw.endswith("%")
    number = raw[:-1].strip() if percent else raw
    try:
        value = float(number)
    except ValueError:
        raise error_cls(f'Invalid length: "{token}"', ["Use pixels (e.g. 120) or a percentage (e.g. 50%)"])
    if not math.isfinite(value):
        raise error_cls(f'Invalid length: "{token}"')
    return Length(value, percent)


def normalize_angle(degrees: float) -> float:
    """Wrap any angle into [0, 360)."""
    return ((degrees % 360.0) + 360.0) % 360.0


@dataclass(frozen=True)
class SolidBackground:
    color: Color
    source: str

    kind = "solid"


@dataclass(frozen=True)
class LinearGradient:
    color_start: Color
    color_end: Color
    angle_deg: float
    sources: tuple[str, str]

    kind = "linear"

    @property
    def direction(self) -> tuple[float, float]:
        theta = math.radians(self.angle_deg)
        return (math.cos(theta), math.sin(theta))


@dataclass(frozen=True)
class RadialGradient:
    color_inner: Color
    color_outer: Color
    cx: float
    cy: float
    radius: float
    sources: tuple[str, str]
    # Unresolved lengths in canonical form, e.g. ("50%", "40%") and "85%"
    raw_center: tuple[str, str]
    raw_radius: str

    kind = "radial"


Background = Union[SolidBackground, LinearGradient, RadialGradient]


def _split_fields(value: str) -> list[str]:
    return [part.strip() for part in value.split(",")]


def parse_solid(value: str) -> SolidBackground:
    return SolidBackground(color=parse_hex(value), source=value.strip())


def parse_linear(value: str) -> LinearGradient:
    """Parse ``"hex1,hex2,angleDeg"``; the angle is wrapped into [0, 360)."""
    fields = _split_fields(value)
    if len(fields) != 3:
        raise InvalidBackgroundSpec(
            f'Invalid linear gradient: "{value}"',
            ["Expected: <hex1>,<hex2>,<angleDeg> (e.g. #111827,#0ea5e9,135)"],
        )
    start_hex, end_hex, angle_str = fields
    try:
        angle = float(angle_str)
    except ValueError:
        raise InvalidBackgroundSpec(f'Invalid gradient angle: "{angle_str}"')
    if not math.isfinite(angle):
        raise InvalidBackgroundSpec(f'Invalid gradient angle: "{angle_str}"')

    return LinearGradient(
        color_start=parse_hex(start_hex),
        color_end=parse_hex(end_hex),
        angle_deg=normalize_angle(angle),
        sources=(start_hex, end_hex),
    )


def parse_radial(
    value: str,
    width: int,
    height: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> RadialGradient:
    """Parse ``"inner,outer[,cx,cy,r]"`` and resolve lengths against the canvas.

    cx/cy percentages resolve against width/height; r against min(width, height).
    """
    fields = _split_fields(value)
    if not 2 <= len(fields) <= 5:
        raise InvalidBackgroundSpec(
            f'Invalid radial gradient: "{value}"',
            ["Expected: <innerHex>,<outerHex>[,cx,cy,r] (e.g. #111827,#000,50%,40%,85%)"],
        )
    defaults = [config.radial_cx, config.radial_cy, config.radial_r]
    raw_cx, raw_cy, raw_r = fields[2:] + defaults[len(fields) - 2:]

    cx = parse_length(raw_cx)
    cy = parse_length(raw_cy)
    r = parse_length(raw_r)
    if r.value < 0:
        raise InvalidBackgroundSpec(f'Invalid radial gradient radius: "{raw_r}" (must be non-negative)')

    return RadialGradient(
        color_inner=parse_hex(fields[0]),
        color_outer=parse_hex(fields[1]),
        cx=cx.resolve(width),
        cy=cy.resolve(height),
        radius=r.resolve(min(width, height)),
        sources=(fields[0], fields[1]),
        raw_center=(str(cx), str(cy)),
        raw_radius=str(r),
    )


def linear_gradient_t(gradient: LinearGradient, x: float, y: float) -> float:
    """Project the recentred point onto the gradient direction."""
    dx, dy = gradient.direction
    return clamp01((x - 0.5) * dx + (y - 0.5) * dy + 0.5)


def radial_gradient_t(gradient: RadialGradient, x: float, y: float, width: int, height: int) -> float:
    """Pixel distance from the centre over the radius; radius <= 0 is all outer colour."""
    if gradient.radius <= 0:
        return 1.0
    dist = math.hypot(x * width - gradient.cx, y * height - gradient.cy)
    return clamp01(dist / gradient.radius)


def sample_linear_gradient(gradient: LinearGradient, x: float, y: float) -> Color:
    return lerp_color(gradient.color_start, gradient.color_end, linear_gradient_t(gradient, x, y))


def sample_radial_gradient(gradient: RadialGradient, x: float, y: float, width: int, height: int) -> Color:
    t = radial_gradient_t(gradient, x, y, width, height)
    return lerp_color(gradient.color_inner, gradient.color_outer, t)


def sample_background(background: Background, x: float, y: float, width: int, height: int) -> Color:
    """Colour of the background at normalized point (x, y)."""
    if isinstance(background, SolidBackground):
        return background.color
    if isinstance(background, LinearGradient):
        return sample_linear_gradient(background, x, y)
    return sample_radial_gradient(background, x, y, width, height)


def contrast_probe_points(config: EngineConfig = DEFAULT_CONFIG) -> list[tuple[float, float]]:
    """Centre plus the four corners inset from the edges."""
    lo = config.gradient_inset
    hi = 1.0 - config.gradient_inset
    return [(0.5, 0.5), (lo, lo), (hi, lo), (lo, hi), (hi, hi)]


def auto_text_color_for_background(
    background: Background,
    width: int,
    height: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> str:
    """Auto-contrast text colour; gradients are judged by their worst probe."""
    if isinstance(background, SolidBackground):
        return auto_text_color(background.color)
    samples = [
        sample_background(background, x, y, width, height)
        for x, y in contrast_probe_points(config)
    ]
    return worst_case_text_color(samples)
