"""Scene pipeline — validates a placeholder spec and assembles the Scene.

Single pass, no retained state: every call builds fresh values from its
input, so identical specs always produce identical Scenes. Validation
failures raise before any Scene is constructed.
"""

from __future__ import annotations

import logging
import math

from placard.config import Settings, settings as default_settings
from placard.engine.background import (
    auto_text_color_for_background,
    parse_linear,
    parse_radial,
    parse_solid,
)
from placard.engine.color import parse_hex
from placard.engine.config import DEFAULT_CONFIG, EngineConfig
from placard.engine.effects import (
    OutlineOptions,
    ShadowOptions,
    TextEffects,
    TextEffectsConfig,
    resolve_effects,
    validate_effects,
)
from placard.engine.errors import ConflictingOptions, InvalidDimension, InvalidFontSpec
from placard.engine.geometry import build_clip, parse_mask
from placard.engine.scene import VALID_FONT_WEIGHTS, Fitting, FontConfig, PlaceholderSpec, Scene
from placard.engine.text_layout import (
    default_font_size,
    effective_padding,
    fit_font_size,
    layout_lines,
    split_lines,
)
from placard.models.requests import PlaceholderRequest
from placard.utils.math_helpers import parse_int_strict

logger = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _effects_padding(padding: int, effects: TextEffects) -> int:
    outline = effects.outline
    shadow = effects.shadow
    return effective_padding(
        padding,
        outline_width=outline.width if outline.enabled else None,
        shadow_offset=(shadow.dx, shadow.dy) if shadow.enabled else None,
        shadow_blur=shadow.blur if shadow.enabled else None,
    )


class ScenePipeline:
    """Turns a ``PlaceholderSpec`` into a ``Scene``."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def validate(self, spec: PlaceholderSpec) -> None:
        if not _is_int(spec.width) or spec.width <= 0:
            raise InvalidDimension(f'Invalid width: "{spec.width}" (expected positive integer)')
        if not _is_int(spec.height) or spec.height <= 0:
            raise InvalidDimension(f'Invalid height: "{spec.height}" (expected positive integer)')
        if not _is_int(spec.padding) or spec.padding < 0:
            raise InvalidDimension(f'Invalid padding: "{spec.padding}" (expected non-negative integer)')
        if spec.font_size is not None and (not _is_int(spec.font_size) or spec.font_size <= 0):
            raise InvalidDimension(f'Invalid font size: "{spec.font_size}" (expected positive integer)')
        if spec.font_weight not in VALID_FONT_WEIGHTS:
            raise InvalidFontSpec(
                f'Invalid font weight: "{spec.font_weight}"',
                ["Valid values: normal, bold, 100-900"],
            )
        validate_effects(spec.effects)

    def run(self, spec: PlaceholderSpec) -> Scene:
        self.validate(spec)
        cfg = self.config
        width, height = spec.width, spec.height

        auto_hex = auto_text_color_for_background(spec.background, width, height, cfg)
        text_color = spec.text_color or parse_hex(auto_hex)
        text_hex = text_color.to_hex()

        initial_size = spec.font_size if spec.font_size is not None else default_font_size(width, height, cfg)

        # Effect footprint is sized from the starting font so the fit is conservative.
        start_effects = resolve_effects(
            spec.effects, max(cfg.min_font_size, initial_size), auto_hex, text_hex, cfg
        )
        padding = _effects_padding(spec.padding, start_effects)

        lines = split_lines(spec.text)
        fit = fit_font_size(lines, initial_size, width, height, padding, cfg)
        effects = resolve_effects(spec.effects, fit.final_size, auto_hex, text_hex, cfg)
        layout = layout_lines(lines, fit.final_size, height, cfg)

        scene = Scene(
            width=width,
            height=height,
            background=spec.background,
            mask=build_clip(spec.mask, width, height, cfg),
            text=spec.text,
            layout=layout,
            font=FontConfig(family=spec.font_family, weight=spec.font_weight, size_px=fit.final_size),
            text_color=text_color,
            effects=effects,
            fitting=Fitting(
                padding=spec.padding,
                effective_padding=padding,
                min_font_size=cfg.min_font_size,
                initial_font_size=initial_size,
                final_font_size=fit.final_size,
                iterations=fit.iterations,
            ),
        )
        logger.info(
            "Scene %dx%d: %s background, %d line(s) at %dpx (%d shrink steps), text %s",
            width,
            height,
            spec.background.kind,
            len(lines),
            fit.final_size,
            fit.iterations,
            text_hex,
        )
        return scene


def create_pipeline(config: EngineConfig | None = None) -> ScenePipeline:
    return ScenePipeline(config)


def build_scene(spec: PlaceholderSpec, config: EngineConfig | None = None) -> Scene:
    return ScenePipeline(config).run(spec)


# ---------------------------------------------------------------------------
# Option bag -> typed spec
# ---------------------------------------------------------------------------


def _blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _resolve_dimension(primary: int | str | None, alias: int | str | None, name: str, short: str) -> int:
    if not _blank(primary) and not _blank(alias) and str(primary).strip() != str(alias).strip():
        raise ConflictingOptions(f"Conflicting values for {name} and {short}")
    raw = alias if _blank(primary) else primary
    if _blank(raw):
        raise InvalidDimension(f"Missing required option: {name} (or {short})")
    value = parse_int_strict(raw)
    if value is None or value <= 0:
        raise InvalidDimension(f'Invalid {name}: "{raw}" (expected positive integer)')
    return value


def _optional_int(raw: int | str | None, name: str, minimum: int) -> int | None:
    if _blank(raw):
        return None
    value = parse_int_strict(raw)
    if value is None or value < minimum:
        qualifier = "positive" if minimum > 0 else "non-negative"
        raise InvalidDimension(f'Invalid {name}: "{raw}" (expected {qualifier} integer)')
    return value


def _optional_float(raw: float | None, name: str) -> float | None:
    if raw is None:
        return None
    if not math.isfinite(raw):
        raise InvalidDimension(f'Invalid {name}: "{raw}"')
    return float(raw)


def spec_from_request(
    req: PlaceholderRequest,
    settings: Settings | None = None,
    config: EngineConfig | None = None,
) -> PlaceholderSpec:
    """Convert the loosely typed option bag into a ``PlaceholderSpec``.

    This is the only place option strings are interpreted; the pipeline
    itself never sees optional or stringly typed fields.
    """
    s = settings or default_settings
    cfg = config or DEFAULT_CONFIG

    width = _resolve_dimension(req.width, req.w, "width", "w")
    height = _resolve_dimension(req.height, req.h, "height", "h")

    backgrounds = {
        "bg_color": req.bg_color,
        "bg_linear": req.bg_linear,
        "bg_radial": req.bg_radial,
    }
    supplied = [name for name, value in backgrounds.items() if not _blank(value)]
    if not supplied:
        raise ConflictingOptions(
            "Provide one of bg_color, bg_linear, bg_radial",
            ["Solid: #111827; linear: #111827,#0ea5e9,135; radial: #111827,#000[,cx,cy,r]"],
        )
    if len(supplied) > 1:
        raise ConflictingOptions(
            f"Choose only one of bg_color, bg_linear, bg_radial (got {', '.join(supplied)})"
        )
    kind = supplied[0]
    if kind == "bg_color":
        background = parse_solid(req.bg_color)
    elif kind == "bg_linear":
        background = parse_linear(req.bg_linear)
    else:
        background = parse_radial(req.bg_radial, width, height, cfg)

    padding = _optional_int(req.padding, "padding", 0)
    effects = TextEffectsConfig(
        outline=OutlineOptions(
            enabled=req.outline,
            color=parse_hex(req.outline_color) if not _blank(req.outline_color) else None,
            width=_optional_float(req.outline_width, "outline width"),
        ),
        shadow=ShadowOptions(
            enabled=req.shadow,
            color=parse_hex(req.shadow_color) if not _blank(req.shadow_color) else None,
            dx=_optional_float(req.shadow_dx, "shadow dx"),
            dy=_optional_float(req.shadow_dy, "shadow dy"),
            blur=_optional_float(req.shadow_blur, "shadow blur"),
            opacity=_optional_float(req.shadow_opacity, "shadow opacity"),
        ),
    )

    return PlaceholderSpec(
        width=width,
        height=height,
        background=background,
        text=req.text if req.text is not None else f"{width}x{height}",
        text_color=parse_hex(req.text_color) if not _blank(req.text_color) else None,
        font_family=req.font_family or s.default_font_family,
        font_weight=str(req.font_weight or s.default_font_weight),
        font_size=_optional_int(req.font_size, "font size", 1),
        padding=padding if padding is not None else s.default_padding,
        mask=parse_mask(req.mask, cfg),
        effects=effects,
    )


def build_scene_from_request(
    req: PlaceholderRequest,
    settings: Settings | None = None,
    config: EngineConfig | None = None,
) -> Scene:
    return ScenePipeline(config).run(spec_from_request(req, settings, config))
