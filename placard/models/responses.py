"""API response models — JSON summary of a resolved Scene."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from placard.engine.background import LinearGradient, RadialGradient, SolidBackground
from placard.engine.scene import Scene


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class FontSummary(BaseModel):
    family: str
    weight: str
    size: int


class OutlineSummary(BaseModel):
    enabled: bool
    color: str
    width: float


class ShadowSummary(BaseModel):
    enabled: bool
    color: str
    dx: float
    dy: float
    blur: float
    opacity: float


class TextEffectsSummary(BaseModel):
    outline: OutlineSummary
    shadow: ShadowSummary


class MaskSummary(BaseModel):
    type: str = "none"
    radius: float | None = None
    path: str | None = None


class FittingSummary(BaseModel):
    padding: int
    effective_padding: int
    min_font_size: int
    initial_font_size: int
    final_font_size: int
    iterations: int


class PlaceholderResponse(BaseModel):
    ok: bool = True
    width: int
    height: int
    bgcolor: str | None = None
    background: dict[str, Any] = Field(default_factory=dict)
    text: str
    lines: list[str] = Field(default_factory=list)
    baselines: list[float] = Field(default_factory=list)
    text_color: str
    font: FontSummary
    text_effects: TextEffectsSummary
    mask: MaskSummary = Field(default_factory=MaskSummary)
    fitting: FittingSummary
    svg: str | None = None

    @classmethod
    def from_scene(cls, scene: Scene, svg: str | None = None) -> PlaceholderResponse:
        bg = scene.background
        effects = scene.effects
        mask = scene.mask
        return cls(
            width=scene.width,
            height=scene.height,
            bgcolor=bg.source if isinstance(bg, SolidBackground) else None,
            background=background_summary(scene),
            text=scene.text,
            lines=list(scene.text_lines),
            baselines=[round(y, 3) for y in scene.layout.baselines],
            text_color=scene.text_color.to_hex(),
            font=FontSummary(
                family=scene.font.family,
                weight=scene.font.weight,
                size=scene.font.size_px,
            ),
            text_effects=TextEffectsSummary(
                outline=OutlineSummary(
                    enabled=effects.outline.enabled,
                    color=effects.outline.color.to_hex(),
                    width=effects.outline.width,
                ),
                shadow=ShadowSummary(
                    enabled=effects.shadow.enabled,
                    color=effects.shadow.color.to_hex(),
                    dx=effects.shadow.dx,
                    dy=effects.shadow.dy,
                    blur=effects.shadow.blur,
                    opacity=effects.shadow.opacity,
                ),
            ),
            mask=MaskSummary(
                type=mask.kind,
                radius=mask.radius,
                path=mask.to_svg_path(),
            )
            if mask is not None
            else MaskSummary(),
            fitting=FittingSummary(
                padding=scene.fitting.padding,
                effective_padding=scene.fitting.effective_padding,
                min_font_size=scene.fitting.min_font_size,
                initial_font_size=scene.fitting.initial_font_size,
                final_font_size=scene.fitting.final_font_size,
                iterations=scene.fitting.iterations,
            ),
            svg=svg,
        )


def background_summary(scene: Scene) -> dict[str, Any]:
    """Background as reported to clients; radial lengths keep their raw form."""
    bg = scene.background
    if isinstance(bg, SolidBackground):
        return {"type": "solid", "color": bg.source}
    if isinstance(bg, LinearGradient):
        return {"type": "linear", "colors": list(bg.sources), "angle_deg": bg.angle_deg}
    if isinstance(bg, RadialGradient):
        return {
            "type": "radial",
            "colors": list(bg.sources),
            "cx": bg.raw_center[0],
            "cy": bg.raw_center[1],
            "r": bg.raw_radius,
        }
    raise TypeError(f"Unknown background type: {type(bg).__name__}")
