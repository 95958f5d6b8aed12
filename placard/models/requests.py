"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PlaceholderRequest(BaseModel):
    """Loose placeholder option bag, as it arrives from a form or flag parser.

    Dimensions accept ints or numeric strings; ``w``/``h`` are aliases for
    ``width``/``height``. Exactly one of the ``bg_*`` fields must be set.
    """

    width: int | str | None = None
    height: int | str | None = None
    w: int | str | None = None
    h: int | str | None = None

    bg_color: str | None = Field(default=None, description="Solid hex color, e.g. #111827")
    bg_linear: str | None = Field(default=None, description="hex1,hex2,angleDeg")
    bg_radial: str | None = Field(default=None, description="innerHex,outerHex[,cx,cy,r]")

    text: str | None = Field(default=None, description="Label text; literal \\n breaks lines")
    text_color: str | None = None
    font_family: str | None = None
    font_weight: str | None = None
    font_size: int | str | None = None
    padding: int | str | None = None

    mask: str | None = Field(default=None, description="none | circle | rounded[:r] | squircle[:r]")

    outline: bool = False
    outline_color: str | None = None
    outline_width: float | None = None

    shadow: bool = False
    shadow_color: str | None = None
    shadow_dx: float | None = None
    shadow_dy: float | None = None
    shadow_blur: float | None = None
    shadow_opacity: float | None = None
