"""
layout.py — Positioning engine: where the logo and text go on a template.

Resolution order:
  1. Explicit logo position (center / chest / corners) overrides everything.
  2. Otherwise the garment side decides:
       front → chest logo at the left margin, 25% down, ≤ 25% template width
       back  → centred print, 25% down, 1.3× the front size
  3. Otherwise (mockup key has no side) the industry layout policy applies.

Absolute caps hold in every branch: logo ≤ 40% of template width and
≤ 30% of template height. The logo box is square (size × size); the
normalised logo is fitted inside it.

Text sits below the logo, each line centred on its own rendered width:
front at 40% / 45% of the height, back lower at 45% / 50% to clear the
larger back print. All coordinates are whole pixels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .models import split_mockup_type
from .styling import layout_to_position

MARGIN          = 50
CHEST_WIDTH_CAP = 0.25
MAX_WIDTH_RATIO  = 0.40
MAX_HEIGHT_RATIO = 0.30
BACK_SCALE      = 1.3

LOGO_TOP = {
    "center":      0.30,
    "chest":       0.25,
    "front":       0.25,
    "back":        0.25,
    "full-width":  0.20,
}

# (company name, tagline) as a fraction of template height
TEXT_TOP = {
    "front": (0.40, 0.45),
    "back":  (0.45, 0.50),
}


@dataclass(frozen=True)
class LayoutBox:
    logo_top: int
    logo_left: int
    logo_size: int
    company_name_top: int
    company_name_left: int
    tagline_top: int
    tagline_left: int


def _px(value: float) -> int:
    """Round half up to a whole pixel."""
    return int(math.floor(value + 0.5))


def cap_logo_size(size: float, width: int, height: int) -> int:
    """Apply the absolute 40%-width / 30%-height caps (rounded down so they always hold)."""
    return max(1, int(math.floor(min(size, width * MAX_WIDTH_RATIO, height * MAX_HEIGHT_RATIO))))


def _chest_size(base: int, width: int, height: int) -> int:
    return min(cap_logo_size(base, width, height), max(1, int(width * CHEST_WIDTH_CAP)))


def _place_explicit(position: str, width: int, height: int, base: int):
    """(top, left, size) for an explicit logo position."""
    if position == "center":
        size = cap_logo_size(base, width, height)
        return _px(height * LOGO_TOP["center"]), _px((width - size) / 2), size

    if position in ("left-chest", "right-chest"):
        size = _chest_size(base, width, height)
        top = _px(height * LOGO_TOP["chest"])
        left = MARGIN if position == "left-chest" else max(0, width - size - MARGIN)
        return top, left, size

    # Corners keep the base size (no chest cap); the absolute caps still hold.
    # On templates too small for the margin the box is pinned to the edge.
    size = cap_logo_size(base, width, height)
    vertical, horizontal = position.split("-")
    top = MARGIN if vertical == "top" else max(0, height - size - MARGIN)
    left = MARGIN if horizontal == "left" else max(0, width - size - MARGIN)
    return top, left, size


def _place_side(side: str, width: int, height: int, base: int):
    front = _chest_size(base, width, height)
    top = _px(height * LOGO_TOP[side])
    if side == "front":
        return top, MARGIN, front
    size = cap_logo_size(front * BACK_SCALE, width, height)
    return top, _px((width - size) / 2), size


def _place_policy(layout: str, width: int, height: int, base: int):
    position = layout_to_position(layout)
    if position is not None:
        return _place_explicit(position, width, height, base)
    # full-width: as wide as the margins allow, then capped
    size = cap_logo_size(width - 2 * MARGIN, width, height)
    return _px(height * LOGO_TOP["full-width"]), MARGIN, size


def compute_layout(
    mockup_type: str,
    layout: str,
    template_width: int,
    template_height: int,
    base_logo_size: int,
    logo_position: Optional[str] = None,
    company_name_width: int = 0,
    tagline_width: int = 0,
) -> LayoutBox:
    """
    Compute logo and text placement for one mockup.

    Args:
        mockup_type:        e.g. 'hoodie-back'; the -front/-back suffix picks the side rules
        layout:             industry layout policy ('centered', 'corner', 'full-width')
        template_width:     working canvas width in px
        template_height:    working canvas height in px
        base_logo_size:     size tier in px before caps
        logo_position:      explicit override, one of the seven LogoPosition values
        company_name_width: rendered width of the company-name bitmap
        tagline_width:      rendered width of the tagline bitmap
    """
    if template_width <= 0 or template_height <= 0:
        raise ValueError(f"Template size must be positive, got {template_width}×{template_height}")

    _, side = split_mockup_type(mockup_type)

    if logo_position:
        top, left, size = _place_explicit(logo_position, template_width, template_height, base_logo_size)
    elif side is not None:
        top, left, size = _place_side(side, template_width, template_height, base_logo_size)
    else:
        top, left, size = _place_policy(layout, template_width, template_height, base_logo_size)

    name_ratio, tag_ratio = TEXT_TOP["back" if side == "back" else "front"]
    return LayoutBox(
        logo_top=top,
        logo_left=left,
        logo_size=size,
        company_name_top=_px(template_height * name_ratio),
        company_name_left=_px((template_width - company_name_width) / 2),
        tagline_top=_px(template_height * tag_ratio),
        tagline_left=_px((template_width - tagline_width) / 2),
    )
