"""Engine configuration — every numeric heuristic used to build a Scene."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Heuristic constants for layout, geometry and effect defaults."""

    # Text fitting
    min_font_size: int = 8
    line_height: float = 1.2
    char_width: float = 0.6  # average glyph advance as a fraction of font size
    shrink_factor: float = 0.9
    baseline_ratio: float = 0.85  # first baseline sits this far below the line top
    default_font_divisor: int = 6  # initial size = min(w, h) // divisor

    # Squircle (superellipse) mask
    squircle_exponent: float = 5.0
    squircle_steps: int = 32
    default_mask_radius: str = "10%"

    # Outline / shadow defaults, scaled from the final font size
    outline_ratio: float = 0.08
    shadow_blur_ratio: float = 0.12
    shadow_dx: float = 0.0
    shadow_dy: float = 2.0
    shadow_opacity: float = 0.35

    # Gradient auto-contrast probes: centre plus corners inset by this fraction
    gradient_inset: float = 0.05

    # Radial gradient defaults when trailing fields are omitted
    radial_cx: str = "50%"
    radial_cy: str = "50%"
    radial_r: str = "75%"


DEFAULT_CONFIG = EngineConfig()
