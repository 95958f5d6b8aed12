"""Tests for line splitting, size estimation and the auto-shrink loop."""

from __future__ import annotations

import math

import pytest

from placard.engine.text_layout import (
    default_font_size,
    effective_padding,
    estimate_text_size,
    fit_font_size,
    layout_lines,
    shrink,
    split_lines,
)
from tests.conftest import LONG_TEXT


class TestSplitLines:
    def test_literal_escape(self):
        assert split_lines("Line 1\\nLine 2\\nLine 3") == ("Line 1", "Line 2", "Line 3")

    def test_real_newline(self):
        assert split_lines("a\nb") == ("a", "b")

    def test_single_line(self):
        assert split_lines("400x300") == ("400x300",)

    def test_empty_lines_kept(self):
        assert split_lines("a\\n\\nb") == ("a", "", "b")


class TestEstimate:
    def test_block_size(self):
        size = estimate_text_size(("abcd", "ab"), 10)
        assert size.width == pytest.approx(24.0)
        assert size.height == pytest.approx(24.0)

    def test_empty_text(self):
        size = estimate_text_size(("",), 10)
        assert size.width == 0
        assert size.height == pytest.approx(12.0)


class TestEffectivePadding:
    def test_plain(self):
        assert effective_padding(24) == 24

    def test_outline_rounds_up(self):
        assert effective_padding(24, outline_width=2.5) == 27

    def test_shadow(self):
        assert effective_padding(24, shadow_offset=(0, 2), shadow_blur=3) == 29

    def test_shadow_uses_largest_offset(self):
        assert effective_padding(10, shadow_offset=(-3, 1), shadow_blur=1.5) == 15

    def test_both(self):
        assert effective_padding(0, outline_width=4, shadow_offset=(0, 2), shadow_blur=6) == 12


class TestShrink:
    def test_step(self):
        assert shrink(100) == 90
        assert shrink(81) == 72

    def test_floor_at_minimum(self):
        assert shrink(9) == 8
        assert shrink(8) == 8

    def test_default_font_size(self):
        assert default_font_size(400, 300) == 50
        assert default_font_size(100, 50) == 8
        assert default_font_size(5, 5) == 0


class TestFit:
    def test_fits_without_shrinking(self):
        result = fit_font_size(("Hi",), 50, 400, 300, 24)
        assert result.final_size == 50
        assert result.iterations == 0

    def test_long_text_shrinks(self):
        result = fit_font_size(split_lines(LONG_TEXT), 100, 100, 50, 24)
        assert result.initial_size == 100
        assert result.final_size < 100
        assert result.final_size == 8
        assert result.iterations == 20

    def test_stops_once_it_fits(self):
        # 10 chars at 0.6 -> fits 352px when size <= 58
        result = fit_font_size(("abcdefghij",), 100, 400, 300, 24)
        assert result.final_size == 57
        assert estimate_text_size(("abcdefghij",), result.final_size).width <= 352
        assert estimate_text_size(("abcdefghij",), 64).width > 352

    def test_below_minimum_raised(self):
        result = fit_font_size(("x",), 5, 400, 300, 24)
        assert result.final_size == 8
        assert result.iterations == 0

    def test_padding_larger_than_canvas(self):
        result = fit_font_size(("x",), 40, 20, 20, 50)
        assert result.final_size == 8

    @pytest.mark.parametrize("initial", [9, 16, 50, 100, 333, 1000, 5000])
    def test_terminates_in_log_steps(self, initial):
        result = fit_font_size(("impossible",), initial, 10, 10, 24)
        bound = math.ceil(math.log(initial / 8) / math.log(1 / 0.9))
        assert result.iterations <= bound
        assert 8 <= result.final_size <= initial

    def test_pure(self):
        lines = split_lines(LONG_TEXT)
        assert fit_font_size(lines, 100, 100, 50, 24) == fit_font_size(lines, 100, 100, 50, 24)


class TestLayout:
    def test_vertical_centering(self):
        layout = layout_lines(("a", "b"), 20, 100)
        assert layout.line_advance == pytest.approx(24.0)
        assert layout.start_y == pytest.approx(43.0)
        assert layout.baselines == pytest.approx((43.0, 67.0))

    def test_single_line(self):
        layout = layout_lines(("400x300",), 50, 300)
        assert layout.start_y == pytest.approx(162.5)
        assert layout.block.width == pytest.approx(210.0)
