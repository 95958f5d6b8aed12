"""Tests for Scene -> SVG serialization."""

from __future__ import annotations

from placard.engine.pipeline import build_scene_from_request
from placard.models.requests import PlaceholderRequest
from placard.svg.serializer import scene_to_svg
from tests.conftest import DARK_SOLID, LINEAR_135, RADIAL_FULL


def _svg(**options) -> str:
    return scene_to_svg(build_scene_from_request(PlaceholderRequest(**options)))


def test_document_shape():
    svg = _svg(**DARK_SOLID)
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert '<svg width="400" height="300" viewBox="0 0 400 300"' in svg
    assert svg.rstrip().endswith("</svg>")


def test_solid_fill_and_text():
    svg = _svg(**DARK_SOLID)
    assert 'fill="#111827" fill-opacity="1"' in svg
    assert 'font-size="50px"' in svg
    assert 'fill="#ffffff"' in svg
    assert '<tspan x="50%" dy="162.5">400x300</tspan>' in svg
    assert "<defs>" not in svg


def test_one_tspan_per_line():
    svg = _svg(w=800, h=400, bg_color="#000", text="a\\nb\\nc")
    assert svg.count("<tspan") == 3


def test_text_is_escaped():
    svg = _svg(**DARK_SOLID, text="<b>&'\"")
    assert "&lt;b&gt;&amp;" in svg
    assert "<b>" not in svg


def test_linear_gradient_defs():
    svg = _svg(**LINEAR_135)
    assert "<linearGradient" in svg
    assert 'stop-color="#111827"' in svg
    assert 'stop-color="#0ea5e9"' in svg
    assert 'fill="url(#placard-bg)"' in svg


def test_radial_gradient_defs():
    svg = _svg(**RADIAL_FULL)
    assert '<radialGradient id="placard-bg" gradientUnits="userSpaceOnUse" cx="120" cy="64" r="136">' in svg


def test_mask_clip_path():
    svg = _svg(**DARK_SOLID, mask="circle")
    assert '<clipPath id="placard-mask">' in svg
    assert '<g clip-path="url(#placard-mask)">' in svg


def test_effects():
    svg = _svg(**DARK_SOLID, outline=True, shadow=True)
    assert 'paint-order="stroke"' in svg
    assert 'stroke="#000000"' in svg
    assert "<feDropShadow" in svg
    assert 'filter="url(#placard-shadow)"' in svg


def test_effects_off_by_default():
    svg = _svg(**DARK_SOLID)
    assert "stroke=" not in svg
    assert "feDropShadow" not in svg


def test_deterministic():
    options = {**LINEAR_135, "mask": "squircle", "shadow": True}
    assert _svg(**options) == _svg(**options)
