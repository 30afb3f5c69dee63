"""
text.py — Render a single line of text onto a transparent bitmap.

Style tags pick the face:
  bold    → sans-serif bold
  elegant → serif regular
  casual  → sans-serif regular

Widths come from real glyph metrics (ImageDraw.textbbox), so callers centre
text on the width of the returned bitmap. No wrapping — one line always.
"""

from __future__ import annotations

import io
from functools import lru_cache
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

_FONT_CANDIDATES = {
    "bold": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
        "/usr/share/fonts/truetype/freefont/FreeSansBold.ttf",
        "DejaVuSans-Bold.ttf",
    ],
    "elegant": [
        "/System/Library/Fonts/Supplemental/Georgia.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSerif.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSerif-Regular.ttf",
        "/usr/share/fonts/truetype/freefont/FreeSerif.ttf",
        "DejaVuSerif.ttf",
    ],
    "casual": [
        "/System/Library/Fonts/Helvetica.ttc",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
        "DejaVuSans.ttf",
    ],
}

PADDING = 4


@lru_cache(maxsize=None)
def _font_path(style: str) -> Optional[str]:
    """First loadable font file for a style, or None for Pillow's built-in face."""
    for path in _FONT_CANDIDATES.get(style, _FONT_CANDIDATES["casual"]):
        try:
            ImageFont.truetype(path, 12)
            return path
        except OSError:
            continue
    return None


def register_fonts() -> dict:
    """Resolve the font for every style once. Safe to call repeatedly."""
    return {style: _font_path(style) for style in _FONT_CANDIDATES}


def load_font(style: str, size: int) -> ImageFont.ImageFont:
    path = _font_path(style)
    if path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(path, size)


def measure_text(text: str, font_size: int, style: str = "bold") -> Tuple[int, int]:
    """(width, height) of the rendered bitmap, padding included."""
    font = load_font(style, font_size)
    x1, y1, x2, y2 = ImageDraw.Draw(Image.new("RGBA", (1, 1))).textbbox((0, 0), text, font=font)
    return (x2 - x1) + 2 * PADDING, (y2 - y1) + 2 * PADDING


def render_text_image(
    text: str,
    font_size: int,
    color: Tuple[int, int, int],
    style: str = "bold",
) -> Image.Image:
    """RGBA bitmap of one line of text; only glyph pixels are opaque."""
    if not text:
        raise ValueError("Cannot render empty text")
    if font_size <= 0:
        raise ValueError(f"font_size must be positive, got {font_size}")

    font = load_font(style, font_size)
    probe = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
    x1, y1, x2, y2 = probe.textbbox((0, 0), text, font=font)
    w = max(1, x2 - x1) + 2 * PADDING
    h = max(1, y2 - y1) + 2 * PADDING

    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    ImageDraw.Draw(canvas).text(
        (PADDING - x1, PADDING - y1), text, fill=tuple(color) + (255,), font=font,
    )
    return canvas


def render_text(
    text: str,
    font_size: int,
    color: Tuple[int, int, int],
    style: str = "bold",
) -> bytes:
    """render_text_image, encoded as PNG bytes."""
    buf = io.BytesIO()
    render_text_image(text, font_size, color, style).save(buf, format="PNG")
    return buf.getvalue()
