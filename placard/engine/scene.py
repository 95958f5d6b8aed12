"""Scene — the fully resolved, rasterizer-agnostic description of one image.

``PlaceholderSpec`` is the strongly typed input the orchestrator consumes;
``Scene`` is its only output. Both are frozen and rebuilt per invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from placard.engine.background import Background
from placard.engine.color import Color
from placard.engine.effects import TextEffects, TextEffectsConfig
from placard.engine.geometry import ClipMask, MaskSpec, NoMask
from placard.engine.text_layout import TextLayout

VALID_FONT_WEIGHTS = (
    "normal", "bold", "100", "200", "300", "400", "500", "600", "700", "800", "900",
)


@dataclass(frozen=True)
class FontConfig:
    family: str
    weight: str
    size_px: int


@dataclass(frozen=True)
class PlaceholderSpec:
    """Typed placeholder request: every field already parsed and defaulted."""

    width: int
    height: int
    background: Background
    text: str
    text_color: Color | None = None
    font_family: str = "sans-serif"
    font_weight: str = "normal"
    font_size: int | None = None
    padding: int = 24
    mask: MaskSpec = field(default_factory=NoMask)
    effects: TextEffectsConfig = field(default_factory=TextEffectsConfig)


@dataclass(frozen=True)
class Fitting:
    padding: int
    effective_padding: int
    min_font_size: int
    initial_font_size: int
    final_font_size: int
    iterations: int


@dataclass(frozen=True)
class Scene:
    width: int
    height: int
    background: Background
    mask: ClipMask | None
    text: str
    layout: TextLayout
    font: FontConfig
    text_color: Color
    effects: TextEffects
    fitting: Fitting

    @property
    def text_lines(self) -> tuple[str, ...]:
        return self.layout.lines

    @property
    def mask_path(self) -> str | None:
        return self.mask.to_svg_path() if self.mask is not None else None
