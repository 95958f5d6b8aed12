"""Effects resolver — outline and drop-shadow parameters for the text.

All implicit defaults live here and are a pure function of
(font size, auto-contrast colour, chosen text colour):
    outline width  max(1, round(size * 0.08))
    shadow blur    max(1, round(size * 0.12)), offset (0, 2), opacity 0.35
    effect colour  the auto-contrast colour, flipped when it equals the text colour
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from placard.engine.color import Color, opposite_contrast_hex, parse_hex
from placard.engine.config import DEFAULT_CONFIG, EngineConfig
from placard.engine.errors import InvalidDimension
from placard.utils.math_helpers import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineOptions:
    enabled: bool = False
    color: Color | None = None
    width: float | None = None


@dataclass(frozen=True)
class ShadowOptions:
    enabled: bool = False
    color: Color | None = None
    dx: float | None = None
    dy: float | None = None
    blur: float | None = None
    opacity: float | None = None


@dataclass(frozen=True)
class TextEffectsConfig:
    outline: OutlineOptions = field(default_factory=OutlineOptions)
    shadow: ShadowOptions = field(default_factory=ShadowOptions)


@dataclass(frozen=True)
class Outline:
    enabled: bool
    color: Color
    width: float


@dataclass(frozen=True)
class Shadow:
    enabled: bool
    color: Color
    dx: float
    dy: float
    blur: float
    opacity: float


@dataclass(frozen=True)
class TextEffects:
    outline: Outline
    shadow: Shadow


def default_outline_width(font_size: int, config: EngineConfig = DEFAULT_CONFIG) -> int:
    return max(1, round_half_up(font_size * config.outline_ratio))


def default_shadow_blur(font_size: int, config: EngineConfig = DEFAULT_CONFIG) -> int:
    return max(1, round_half_up(font_size * config.shadow_blur_ratio))


def default_effect_color(auto_hex: str, text_hex: str) -> Color:
    """Auto-contrast colour, unless that is already the text fill."""
    if auto_hex.lower() == text_hex.lower():
        return parse_hex(opposite_contrast_hex(auto_hex))
    return parse_hex(auto_hex)


def validate_effects(effects: TextEffectsConfig) -> None:
    outline = effects.outline
    shadow = effects.shadow
    if outline.width is not None and (not math.isfinite(outline.width) or outline.width <= 0):
        raise InvalidDimension(f'Invalid outline width: "{outline.width}" (expected positive number)')
    if shadow.blur is not None and (not math.isfinite(shadow.blur) or shadow.blur < 0):
        raise InvalidDimension(f'Invalid shadow blur: "{shadow.blur}" (expected non-negative number)')
    for name, value in (("dx", shadow.dx), ("dy", shadow.dy)):
        if value is not None and not math.isfinite(value):
            raise InvalidDimension(f'Invalid shadow {name}: "{value}"')
    if shadow.opacity is not None and not 0.0 <= shadow.opacity <= 1.0:
        raise InvalidDimension(f'Invalid shadow opacity: "{shadow.opacity}" (expected 0..1)')


def resolve_effects(
    effects: TextEffectsConfig,
    font_size: int,
    auto_hex: str,
    text_hex: str,
    config: EngineConfig = DEFAULT_CONFIG,
) -> TextEffects:
    """Fill every unset outline/shadow field from the defaults."""
    effect_color = default_effect_color(auto_hex, text_hex)
    outline_in = effects.outline
    shadow_in = effects.shadow

    outline = Outline(
        enabled=outline_in.enabled,
        color=outline_in.color or effect_color,
        width=outline_in.width if outline_in.width is not None else default_outline_width(font_size, config),
    )
    shadow = Shadow(
        enabled=shadow_in.enabled,
        color=shadow_in.color or effect_color,
        dx=shadow_in.dx if shadow_in.dx is not None else config.shadow_dx,
        dy=shadow_in.dy if shadow_in.dy is not None else config.shadow_dy,
        blur=shadow_in.blur if shadow_in.blur is not None else default_shadow_blur(font_size, config),
        opacity=shadow_in.opacity if shadow_in.opacity is not None else config.shadow_opacity,
    )
    logger.debug(
        "Effects at %dpx: outline=%s/%s shadow=%s/(%s,%s) blur %s",
        font_size,
        outline.enabled,
        outline.width,
        shadow.enabled,
        shadow.dx,
        shadow.dy,
        shadow.blur,
    )
    return TextEffects(outline=outline, shadow=shadow)
