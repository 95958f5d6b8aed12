"""Leaf-node polygon helpers. No engine imports.

Coordinates are canvas pixels with y pointing down, so a positive signed
area means the ring is traced clockwise on screen.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace area of a ring; a repeated closing point adds nothing."""
    if len(points) < 3:
        return 0.0
    nxt = np.roll(points, -1, axis=0)
    cross = points[:, 0] * nxt[:, 1] - nxt[:, 0] * points[:, 1]
    return float(cross.sum() / 2.0)


def ensure_clockwise(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return the ring traced clockwise on screen.

    Reversing a closed ring (last point repeats the first) keeps its start point.
    """
    if signed_area(points) >= 0.0:
        return points
    return points[::-1].copy()


def snap_small(values: NDArray[np.float64], eps: float = 1e-12) -> NDArray[np.float64]:
    """Zero out floating-point residue such as cos(pi/2) ~ 6e-17."""
    return np.where(np.abs(values) < eps, 0.0, values)


def format_number(value: float, places: int = 3) -> str:
    """Compact fixed-point text for path data: 12.5, 60, 0."""
    text = f"{value:.{places}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text
