"""Geometry builder — clip-mask shapes for the placeholder canvas.

Mask spec strings: "none", "circle", "rounded[:R]", "squircle[:R]" where R
is pixels or a percentage of min(width, height). Every radius is clamped to
half the shorter canvas side.

The squircle is a superellipse |x|^n + |y|^n = 1 (n = 5) stitched into the
four corners of the canvas with straight edges between them, traced
clockwise from the top edge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import LineString, Point, Polygon, box

from placard.engine.background import Length, parse_length
from placard.engine.config import DEFAULT_CONFIG, EngineConfig
from placard.engine.errors import InvalidMaskSpec
from placard.utils.geometry import ensure_clockwise, format_number, snap_small

_MASK_KINDS = ("none", "circle", "rounded", "squircle")


# ---------------------------------------------------------------------------
# Typed mask specs (input side)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NoMask:
    kind = "none"


@dataclass(frozen=True)
class CircleMask:
    kind = "circle"


@dataclass(frozen=True)
class RoundedMask:
    radius: Length

    kind = "rounded"


@dataclass(frozen=True)
class SquircleMask:
    radius: Length

    kind = "squircle"


MaskSpec = Union[NoMask, CircleMask, RoundedMask, SquircleMask]


def parse_mask(value: str | None, config: EngineConfig = DEFAULT_CONFIG) -> MaskSpec:
    """Parse a mask keyword with an optional ``:radius`` suffix."""
    if value is None or not value.strip():
        return NoMask()
    keyword, _, radius_str = value.strip().partition(":")
    keyword = keyword.strip().lower()

    if keyword not in _MASK_KINDS:
        raise InvalidMaskSpec(
            f'Invalid mask: "{value}"',
            ["Supported masks: none, circle, rounded[:radius], squircle[:radius]"],
        )
    if keyword in ("none", "circle"):
        if radius_str.strip():
            raise InvalidMaskSpec(f'Mask "{keyword}" does not take a radius: "{value}"')
        return NoMask() if keyword == "none" else CircleMask()

    radius = parse_length(radius_str or config.default_mask_radius, InvalidMaskSpec)
    if radius.value < 0:
        raise InvalidMaskSpec(f'Invalid mask radius: "{radius_str}" (must be non-negative)')
    if keyword == "rounded":
        return RoundedMask(radius)
    return SquircleMask(radius)


# ---------------------------------------------------------------------------
# Resolved clip geometry (output side)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CircleClip:
    """Inscribed circle."""

    cx: float
    cy: float
    radius: float

    kind = "circle"

    def to_svg_path(self) -> str:
        r = format_number(self.radius)
        left = format_number(self.cx - self.radius)
        right = format_number(self.cx + self.radius)
        cy = format_number(self.cy)
        return f"M {left},{cy} A {r},{r} 0 1 1 {right},{cy} A {r},{r} 0 1 1 {left},{cy} Z"

    def to_polygon(self) -> Polygon:
        return Point(self.cx, self.cy).buffer(self.radius)


@dataclass(frozen=True)
class RoundedClip:
    """Canvas-sized rectangle with circular corners."""

    width: float
    height: float
    radius: float

    kind = "rounded"

    def to_svg_path(self) -> str:
        w, h, r = self.width, self.height, self.radius
        f = format_number
        if r <= 0:
            return f"M 0,0 H {f(w)} V {f(h)} H 0 Z"
        arc = f"A {f(r)},{f(r)} 0 0 1"
        return (
            f"M {f(r)},0 H {f(w - r)} {arc} {f(w)},{f(r)} "
            f"V {f(h - r)} {arc} {f(w - r)},{f(h)} "
            f"H {f(r)} {arc} 0,{f(h - r)} "
            f"V {f(r)} {arc} {f(r)},0 Z"
        )

    def to_polygon(self) -> Polygon:
        w, h, r = self.width, self.height, self.radius
        if r <= 0:
            return box(0, 0, w, h)
        inner_w = w - 2 * r
        inner_h = h - 2 * r
        if inner_w > 0 and inner_h > 0:
            core = box(r, r, w - r, h - r)
        elif inner_w > 0 or inner_h > 0:
            core = LineString([(r, r), (w - r, h - r)])
        else:
            core = Point(r, r)
        return core.buffer(r)


@dataclass(frozen=True)
class SquircleClip:
    """Superellipse-cornered rectangle as a closed clockwise polygon."""

    width: float
    height: float
    radius: float
    points: tuple[tuple[float, float], ...]

    kind = "squircle"

    def as_array(self) -> NDArray[np.float64]:
        return np.array(self.points, dtype=np.float64)

    def to_svg_path(self) -> str:
        coords = [f"{format_number(x)},{format_number(y)}" for x, y in self.points]
        return "M " + coords[0] + " L " + " ".join(coords[1:]) + " Z"

    def to_polygon(self) -> Polygon:
        return Polygon(self.points)


ClipMask = Union[CircleClip, RoundedClip, SquircleClip]


def clamp_radius(radius: float, width: float, height: float) -> float:
    return max(0.0, min(radius, width / 2, height / 2))


def superellipse_arc(
    t0: float,
    t1: float,
    steps: int,
    exponent: float,
) -> NDArray[np.float64]:
    """Unit superellipse points for t in (t0, t1], ``steps`` samples.

    x = sign(cos t) |cos t|^(2/n),  y = sign(sin t) |sin t|^(2/n)
    """
    t = t0 + (t1 - t0) * np.arange(1, steps + 1) / steps
    c = snap_small(np.cos(t))
    s = snap_small(np.sin(t))
    power = 2.0 / exponent
    x = np.sign(c) * np.abs(c) ** power
    y = np.sign(s) * np.abs(s) ** power
    return np.column_stack([x, y])


def squircle_points(
    width: float,
    height: float,
    radius: float,
    exponent: float = 5.0,
    steps: int = 32,
) -> NDArray[np.float64]:
    """Closed clockwise ring of ``4 * (steps + 1) + 1`` points.

    Starts at (r, 0) on the top edge; each corner contributes the straight
    edge endpoint leading into it plus ``steps`` arc samples. The final point
    coincides with the start.
    """
    r = clamp_radius(radius, width, height)
    half_pi = math.pi / 2
    # (corner centre x, corner centre y, start angle); each sweeps a quarter turn
    corners = [
        (width - r, r, -half_pi),        # top-right
        (width - r, height - r, 0.0),    # bottom-right
        (r, height - r, half_pi),        # bottom-left
        (r, r, math.pi),                 # top-left
    ]
    # Straight edge endpoint leading into each corner
    edge_ends = [(width - r, 0.0), (width, height - r), (r, height), (0.0, r)]

    parts = [np.array([[r, 0.0]])]
    for (cx, cy, t0), edge_end in zip(corners, edge_ends):
        arc = superellipse_arc(t0, t0 + half_pi, steps, exponent)
        parts.append(np.array([edge_end]))
        parts.append(np.column_stack([cx + r * arc[:, 0], cy + r * arc[:, 1]]))
    return ensure_clockwise(np.vstack(parts))


def build_clip(
    mask: MaskSpec,
    width: int,
    height: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ClipMask | None:
    """Resolve a mask spec against the canvas. ``NoMask`` yields ``None``."""
    if isinstance(mask, NoMask):
        return None
    if isinstance(mask, CircleMask):
        return CircleClip(cx=width / 2, cy=height / 2, radius=min(width, height) / 2)

    radius = clamp_radius(mask.radius.resolve(min(width, height)), width, height)
    if isinstance(mask, RoundedMask):
        return RoundedClip(width=width, height=height, radius=radius)

    pts = squircle_points(
        width,
        height,
        radius,
        exponent=config.squircle_exponent,
        steps=config.squircle_steps,
    )
    return SquircleClip(
        width=width,
        height=height,
        radius=radius,
        points=tuple((float(x), float(y)) for x, y in pts),
    )
