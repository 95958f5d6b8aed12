"""Write an SVG document describing a resolved Scene.

The document is the hand-off format for SVG-capable rasterizers: background
fill or gradient, optional clip path, and the centred text block with its
outline and drop shadow. Gradient geometry matches the engine's sampling so
auto-contrast decisions hold for the rendered image.
"""

from __future__ import annotations

from html import escape

from placard.engine.background import LinearGradient, RadialGradient, SolidBackground
from placard.engine.color import Color
from placard.engine.scene import Scene
from placard.utils.geometry import format_number as _n

_BG_ID = "placard-bg"
_MASK_ID = "placard-mask"
_SHADOW_ID = "placard-shadow"


def _paint(color: Color) -> tuple[str, str]:
    """(#rrggbb, opacity) pair; SVG paints carry alpha separately."""
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}", _n(color.alpha)


def _stops(start: Color, end: Color) -> list[str]:
    lines = []
    for offset, color in (("0", start), ("1", end)):
        hex6, opacity = _paint(color)
        lines.append(f'      <stop offset="{offset}" stop-color="{hex6}" stop-opacity="{opacity}" />')
    return lines


def _background_defs(scene: Scene) -> list[str]:
    bg = scene.background
    if isinstance(bg, LinearGradient):
        dx, dy = bg.direction
        lines = [
            f'    <linearGradient id="{_BG_ID}" gradientUnits="objectBoundingBox"'
            f' x1="{_n(0.5 - dx / 2, 4)}" y1="{_n(0.5 - dy / 2, 4)}"'
            f' x2="{_n(0.5 + dx / 2, 4)}" y2="{_n(0.5 + dy / 2, 4)}">'
        ]
        lines += _stops(bg.color_start, bg.color_end)
        lines.append("    </linearGradient>")
        return lines
    if isinstance(bg, RadialGradient):
        lines = [
            f'    <radialGradient id="{_BG_ID}" gradientUnits="userSpaceOnUse"'
            f' cx="{_n(bg.cx)}" cy="{_n(bg.cy)}" r="{_n(bg.radius)}">'
        ]
        lines += _stops(bg.color_inner, bg.color_outer)
        lines.append("    </radialGradient>")
        return lines
    return []


def _background_fill(scene: Scene) -> str:
    bg = scene.background
    if isinstance(bg, SolidBackground):
        hex6, opacity = _paint(bg.color)
        return f'fill="{hex6}" fill-opacity="{opacity}"'
    return f'fill="url(#{_BG_ID})"'


def _text_element(scene: Scene) -> list[str]:
    layout = scene.layout
    outline = scene.effects.outline
    shadow = scene.effects.shadow
    fill, fill_opacity = _paint(scene.text_color)

    attrs = [
        'x="50%"',
        'y="0"',
        'text-anchor="middle"',
        f'font-family="{escape(scene.font.family)}"',
        f'font-weight="{escape(scene.font.weight)}"',
        f'font-size="{scene.font.size_px}px"',
        f'fill="{fill}"',
        f'fill-opacity="{fill_opacity}"',
    ]
    if outline.enabled:
        stroke, stroke_opacity = _paint(outline.color)
        attrs += [
            f'stroke="{stroke}"',
            f'stroke-opacity="{stroke_opacity}"',
            # the stroke straddles the glyph edge, so double it to get the visible width
            f'stroke-width="{_n(outline.width * 2)}"',
            'stroke-linejoin="round"',
            'paint-order="stroke"',
        ]
    if shadow.enabled:
        attrs.append(f'filter="url(#{_SHADOW_ID})"')

    lines = ["    <text " + " ".join(attrs) + ">"]
    for i, line in enumerate(layout.lines):
        dy = layout.start_y if i == 0 else layout.line_advance
        lines.append(f'      <tspan x="50%" dy="{_n(dy)}">{escape(line)}</tspan>')
    lines.append("    </text>")
    return lines


def scene_to_svg(scene: Scene) -> str:
    """Generate SVG markup for a resolved scene."""
    w, h = scene.width, scene.height
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg">',
    ]

    defs = _background_defs(scene)
    if scene.mask is not None:
        defs += [
            f'    <clipPath id="{_MASK_ID}">',
            f'      <path d="{scene.mask.to_svg_path()}" />',
            "    </clipPath>",
        ]
    shadow = scene.effects.shadow
    if shadow.enabled:
        flood, _ = _paint(shadow.color)
        opacity = shadow.opacity * shadow.color.alpha
        defs += [
            f'    <filter id="{_SHADOW_ID}" x="-50%" y="-50%" width="200%" height="200%">',
            f'      <feDropShadow dx="{_n(shadow.dx)}" dy="{_n(shadow.dy)}"'
            f' stdDeviation="{_n(shadow.blur / 2)}" flood-color="{flood}"'
            f' flood-opacity="{_n(opacity)}" />',
            "    </filter>",
        ]
    if defs:
        lines.append("  <defs>")
        lines += defs
        lines.append("  </defs>")

    group_open = f'  <g clip-path="url(#{_MASK_ID})">' if scene.mask is not None else "  <g>"
    lines.append(group_open)
    lines.append(f'    <rect x="0" y="0" width="{w}" height="{h}" {_background_fill(scene)} />')
    lines += _text_element(scene)
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines)
