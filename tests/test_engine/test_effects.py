"""Tests for default outline / shadow resolution."""

from __future__ import annotations

import pytest

from placard.engine.color import parse_hex
from placard.engine.effects import (
    OutlineOptions,
    ShadowOptions,
    TextEffectsConfig,
    default_effect_color,
    default_outline_width,
    default_shadow_blur,
    resolve_effects,
    validate_effects,
)
from placard.engine.errors import InvalidDimension


def test_default_outline_width():
    assert default_outline_width(50) == 4
    assert default_outline_width(100) == 8
    assert default_outline_width(8) == 1
    assert default_outline_width(6) == 1  # round(0.48) would be 0


def test_default_shadow_blur():
    assert default_shadow_blur(50) == 6
    assert default_shadow_blur(100) == 12
    assert default_shadow_blur(4) == 1


def test_effect_color_flips_when_equal_to_text():
    assert default_effect_color("#ffffff", "#ffffff") == parse_hex("#000000")
    assert default_effect_color("#000000", "#000000") == parse_hex("#ffffff")


def test_effect_color_kept_when_distinct():
    assert default_effect_color("#ffffff", "#ff0000") == parse_hex("#ffffff")


def test_resolve_defaults():
    effects = resolve_effects(TextEffectsConfig(), 50, "#ffffff", "#ffffff")
    assert effects.outline.enabled is False
    assert effects.outline.width == 4
    assert effects.outline.color == parse_hex("#000000")
    assert (effects.shadow.dx, effects.shadow.dy) == (0, 2)
    assert effects.shadow.blur == 6
    assert effects.shadow.opacity == pytest.approx(0.35)
    assert effects.shadow.color == parse_hex("#000000")


def test_resolve_keeps_explicit_values():
    cfg = TextEffectsConfig(
        outline=OutlineOptions(enabled=True, color=parse_hex("#ff0000"), width=3),
        shadow=ShadowOptions(enabled=True, dx=-4, dy=5, blur=0, opacity=0.8),
    )
    effects = resolve_effects(cfg, 50, "#000000", "#ffffff")
    assert effects.outline.enabled is True
    assert effects.outline.color == parse_hex("#ff0000")
    assert effects.outline.width == 3
    assert (effects.shadow.dx, effects.shadow.dy, effects.shadow.blur) == (-4, 5, 0)
    assert effects.shadow.opacity == 0.8
    assert effects.shadow.color == parse_hex("#000000")


def test_defaults_scale_with_font_size():
    small = resolve_effects(TextEffectsConfig(), 10, "#ffffff", "#000000")
    large = resolve_effects(TextEffectsConfig(), 200, "#ffffff", "#000000")
    assert small.outline.width < large.outline.width
    assert small.shadow.blur < large.shadow.blur


@pytest.mark.parametrize(
    "cfg",
    [
        TextEffectsConfig(outline=OutlineOptions(enabled=True, width=-1)),
        TextEffectsConfig(outline=OutlineOptions(enabled=True, width=0)),
        TextEffectsConfig(shadow=ShadowOptions(enabled=True, blur=-2)),
        TextEffectsConfig(shadow=ShadowOptions(enabled=True, opacity=1.5)),
        TextEffectsConfig(shadow=ShadowOptions(enabled=True, dx=float("inf"))),
    ],
)
def test_validate_rejects(cfg):
    with pytest.raises(InvalidDimension):
        validate_effects(cfg)


def test_validate_accepts_defaults():
    validate_effects(TextEffectsConfig())
