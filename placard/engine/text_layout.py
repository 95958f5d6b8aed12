"""Text layout engine — line splitting, heuristic sizing and auto-shrink.

No glyph metrics are available here, so block extents are estimated:
    width  = longest line (in characters) * font_size * char_width
    height = line count * font_size * line_height
The font shrinks by ``shrink_factor`` (floored, never below the minimum)
until the block fits inside the padded canvas. Each step strictly decreases
the size until the minimum, so the loop runs O(log(initial / minimum)) times.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from placard.engine.config import DEFAULT_CONFIG, EngineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextBlockSize:
    width: float
    height: float


@dataclass(frozen=True)
class FitResult:
    initial_size: int
    final_size: int
    iterations: int


@dataclass(frozen=True)
class TextLayout:
    """Vertically centred line block for a fixed font size."""

    lines: tuple[str, ...]
    font_size: int
    start_y: float  # baseline of the first line
    line_advance: float
    block: TextBlockSize

    @property
    def baselines(self) -> tuple[float, ...]:
        return tuple(self.start_y + i * self.line_advance for i in range(len(self.lines)))


def split_lines(text: str) -> tuple[str, ...]:
    """Turn literal ``\\n`` escapes into breaks, then split on line breaks."""
    return tuple(text.replace("\\n", "\n").split("\n"))


def estimate_text_size(
    lines: tuple[str, ...] | list[str],
    font_size: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> TextBlockSize:
    longest = max((len(line) for line in lines), default=0)
    return TextBlockSize(
        width=longest * font_size * config.char_width,
        height=len(lines) * font_size * config.line_height,
    )


def effective_padding(
    padding: int,
    outline_width: float | None = None,
    shadow_offset: tuple[float, float] | None = None,
    shadow_blur: float | None = None,
) -> int:
    """Padding grown by the footprint of enabled effects.

    ``outline_width`` is None when the outline is off; ``shadow_offset`` and
    ``shadow_blur`` are None when the shadow is off.
    """
    total = padding
    if outline_width is not None:
        total += math.ceil(outline_width)
    if shadow_offset is not None:
        dx, dy = shadow_offset
        total += math.ceil(max(abs(dx), abs(dy)) + (shadow_blur or 0.0))
    return total


def default_font_size(width: int, height: int, config: EngineConfig = DEFAULT_CONFIG) -> int:
    return math.floor(min(width, height) / config.default_font_divisor)


def shrink(font_size: int, config: EngineConfig = DEFAULT_CONFIG) -> int:
    """One auto-shrink step."""
    return max(config.min_font_size, math.floor(font_size * config.shrink_factor))


def fits(block: TextBlockSize, max_width: float, max_height: float) -> bool:
    return block.width <= max_width and block.height <= max_height


def fit_font_size(
    lines: tuple[str, ...] | list[str],
    font_size: int,
    width: int,
    height: int,
    padding: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> FitResult:
    """Shrink ``font_size`` until the estimated block fits the padded canvas.

    Sizes below the minimum are raised to it first; the result is always in
    [min_font_size, max(initial, min_font_size)].
    """
    max_width = width - 2 * padding
    max_height = height - 2 * padding
    size = max(config.min_font_size, font_size)
    iterations = 0

    while size > config.min_font_size and not fits(
        estimate_text_size(lines, size, config), max_width, max_height
    ):
        size = shrink(size, config)
        iterations += 1
        logger.debug("Auto-shrink step %d: font size %dpx", iterations, size)

    return FitResult(initial_size=font_size, final_size=size, iterations=iterations)


def layout_lines(
    lines: tuple[str, ...],
    font_size: int,
    height: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> TextLayout:
    """Centre the block vertically; baselines advance by one line height."""
    advance = font_size * config.line_height
    block = estimate_text_size(lines, font_size, config)
    start_y = (height - len(lines) * advance) / 2 + font_size * config.baseline_ratio
    return TextLayout(
        lines=tuple(lines),
        font_size=font_size,
        start_y=start_y,
        line_advance=advance,
        block=block,
    )
