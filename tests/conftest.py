"""Shared test fixtures."""

from __future__ import annotations

import pytest

from placard.engine.pipeline import spec_from_request
from placard.models.requests import PlaceholderRequest

LONG_TEXT = "This is a very long text that should be shrunk to fit"

# Placeholder option bags mirroring typical requests

DARK_SOLID = {"width": 400, "height": 300, "bg_color": "#111827"}
LIGHT_SOLID = {"width": 400, "height": 300, "bg_color": "#ffffff"}
LINEAR_135 = {"w": 320, "h": 200, "bg_linear": "#111827,#0ea5e9,135"}
RADIAL_FULL = {"w": 240, "h": 160, "bg_radial": "#111827,#000,50%,40%,85%"}
RADIAL_DEFAULTS = {"w": 240, "h": 160, "bg_radial": "#111827,#000"}
SHRINK = {"w": 100, "h": 50, "bg_color": "#000", "text": LONG_TEXT, "font_size": 100}
ROUNDED_MASK = {"w": 800, "h": 400, "bg_color": "#0ea5e9", "mask": "rounded:15%"}


def make_spec(**options):
    return spec_from_request(PlaceholderRequest(**options))


@pytest.fixture
def dark_spec():
    return make_spec(**DARK_SOLID)


@pytest.fixture
def linear_spec():
    return make_spec(**LINEAR_135)


@pytest.fixture
def radial_spec():
    return make_spec(**RADIAL_FULL)
