"""
styling.py — Colour parsing and styling-tier lookups. Pure functions, no I/O.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

DEFAULT_COLOR_HEX = "#3B82F6"
DEFAULT_RGB       = (59, 130, 246)

# Base logo edge length on the canonical 800×1000 canvas
LOGO_SIZES = {
    "small":  150,
    "medium": 200,
    "large":  250,
}

# (company name px, tagline px)
TEXT_SIZES = {
    "bold":    (48, 24),
    "elegant": (44, 22),
    "casual":  (46, 23),
}

# Industry layout → logo position. full-width has no single-position equivalent.
LAYOUT_POSITIONS = {
    "centered":   "center",
    "corner":     "left-chest",
    "full-width": None,
}

_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")


def hex_to_rgb(hex_str: Optional[str]) -> Tuple[int, int, int]:
    """'#3B82F6' → (59, 130, 246). Malformed input yields DEFAULT_RGB."""
    if not isinstance(hex_str, str):
        return DEFAULT_RGB
    h = hex_str.strip().lstrip("#")
    if len(h) == 3:
        h = h[0] * 2 + h[1] * 2 + h[2] * 2
    if not _HEX_RE.match(h):
        return DEFAULT_RGB
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def logo_size_for(tier: str) -> int:
    """Base logo size for a styling tier; unknown tiers get the medium size."""
    return LOGO_SIZES.get(tier, LOGO_SIZES["medium"])


def text_sizes_for(style: str) -> Tuple[int, int]:
    return TEXT_SIZES.get(style, TEXT_SIZES["bold"])


def layout_to_position(layout: str) -> Optional[str]:
    """Map an industry layout policy to the equivalent explicit logo position."""
    return LAYOUT_POSITIONS.get(layout, "center")
