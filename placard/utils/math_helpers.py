"""Math helpers — rounding and clamping shared by the engine. No engine imports."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (2.5 -> 3), unlike banker's ``round``."""
    return int(math.floor(value + 0.5))


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def parse_int_strict(value: int | str) -> int | None:
    """Integer from an int or a plain decimal string; None if it is neither."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.startswith(("+", "-")):
        sign, digits = text[0], text[1:]
    else:
        sign, digits = "", text
    # str.isdigit also accepts superscripts and other Unicode digits int() rejects
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(sign + digits)
