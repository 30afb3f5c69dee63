"""
templates.py — Garment template store.

Every mockup type resolves to one PNG in the templates directory. Only
t-shirts and hoodies have their own art today; sweatshirt, polo and
tank-top share the t-shirt asset of the same side (SHARED_TEMPLATES).
Adding real art for those garments means adding the file and dropping the
entry from SHARED_TEMPLATES.

write_placeholder_templates() draws flat white garment silhouettes so a
fresh checkout has a usable store.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Tuple

from PIL import Image, ImageDraw, UnidentifiedImageError

from .errors import TemplateNotFoundError
from .models import MOCKUP_TYPES, split_mockup_type

logger = logging.getLogger(__name__)

DISTINCT_TEMPLATES = ("tshirt-front", "tshirt-back", "hoodie-front", "hoodie-back")

# mockup type → template it borrows until it gets its own art
SHARED_TEMPLATES: Dict[str, str] = {
    "sweatshirt-front": "tshirt-front",
    "sweatshirt-back":  "tshirt-back",
    "polo-front":       "tshirt-front",
    "polo-back":        "tshirt-back",
    "tank-top-front":   "tshirt-front",
    "tank-top-back":    "tshirt-back",
}

TEMPLATE_FILES: Dict[str, str] = {
    key: f"{SHARED_TEMPLATES.get(key, key)}.png" for key in MOCKUP_TYPES
}

BACKDROP = (236, 236, 238)
GARMENT  = (255, 255, 255)
OUTLINE  = (196, 196, 200)


def template_is_shared(mockup_type: str) -> bool:
    return mockup_type in SHARED_TEMPLATES


def template_path(templates_dir: Path, mockup_type: str) -> Path:
    """Resolve the template file for a mockup type; raises TemplateNotFoundError."""
    filename = TEMPLATE_FILES.get(mockup_type)
    if filename is None:
        raise TemplateNotFoundError(f"No template is mapped for mockup type '{mockup_type}'")
    path = Path(templates_dir) / filename
    if not path.is_file():
        raise TemplateNotFoundError(f"Template for '{mockup_type}' not found: {path}")
    return path


def load_template(
    templates_dir: Path,
    mockup_type: str,
    canvas_size: Tuple[int, int],
) -> Image.Image:
    """
    Open the template as RGBA, shrunk to fit the working canvas (aspect kept,
    never enlarged). Colours are left exactly as in the asset.
    """
    path = template_path(templates_dir, mockup_type)
    try:
        img = Image.open(path)
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise TemplateNotFoundError(f"Template for '{mockup_type}' is unreadable: {path} ({exc})") from exc
    img = img.convert("RGBA")
    img.thumbnail(canvas_size, Image.LANCZOS)
    return img


# ── Placeholder art ───────────────────────────────────────────────────────────
#
# Coordinates below are on an 800×1000 design grid and scaled to the canvas.

_TSHIRT_BODY = [
    (320, 120), (180, 165), (60, 330), (150, 385), (220, 320),
    (220, 900), (580, 900), (580, 320), (650, 385), (740, 330),
    (620, 165), (480, 120),
]

_HOODIE_BODY = [
    (310, 150), (170, 195), (90, 420), (70, 760), (160, 770), (215, 470),
    (215, 920), (585, 920), (585, 470), (640, 770), (730, 760), (710, 420),
    (630, 195), (490, 150),
]


def _scaled(points: List[Tuple[int, int]], sx: float, sy: float) -> List[Tuple[float, float]]:
    return [(x * sx, y * sy) for x, y in points]


def _box(x1, y1, x2, y2, sx, sy) -> List[float]:
    return [x1 * sx, y1 * sy, x2 * sx, y2 * sy]


def draw_placeholder_template(mockup_type: str, size: Tuple[int, int] = (800, 1000)) -> Image.Image:
    """Flat white garment silhouette for a distinct template key."""
    garment, side = split_mockup_type(mockup_type)
    w, h = size
    sx, sy = w / 800, h / 1000
    line = max(2, int(round(3 * min(sx, sy))))

    img = Image.new("RGBA", size, BACKDROP + (255,))
    draw = ImageDraw.Draw(img)

    if garment == "hoodie":
        # hood behind the body
        draw.ellipse(_box(280, 40, 520, 230, sx, sy), fill=GARMENT, outline=OUTLINE, width=line)
        draw.polygon(_scaled(_HOODIE_BODY, sx, sy), fill=GARMENT, outline=OUTLINE, width=line)
        if side == "front":
            draw.ellipse(_box(345, 110, 455, 200, sx, sy), fill=BACKDROP, outline=OUTLINE, width=line)
            draw.rounded_rectangle(_box(290, 650, 510, 800, sx, sy), radius=int(20 * sx), outline=OUTLINE, width=line)
            draw.line(_box(380, 200, 375, 330, sx, sy), fill=OUTLINE, width=line)
            draw.line(_box(420, 200, 425, 330, sx, sy), fill=OUTLINE, width=line)
        else:
            draw.arc(_box(300, 60, 500, 230, sx, sy), start=200, end=340, fill=OUTLINE, width=line)
        draw.line(_box(215, 890, 585, 890, sx, sy), fill=OUTLINE, width=line)
    else:
        draw.polygon(_scaled(_TSHIRT_BODY, sx, sy), fill=GARMENT, outline=OUTLINE, width=line)
        neck_depth = 200 if side == "front" else 150
        draw.chord(_box(320, 60, 480, neck_depth, sx, sy), start=0, end=180, fill=BACKDROP, outline=OUTLINE, width=line)

    return img


def write_placeholder_templates(
    templates_dir: Path,
    size: Tuple[int, int] = (800, 1000),
    overwrite: bool = False,
) -> List[Path]:
    """Write placeholder art for every distinct template. Returns the files written."""
    templates_dir = Path(templates_dir)
    templates_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for key in DISTINCT_TEMPLATES:
        path = templates_dir / f"{key}.png"
        if path.exists() and not overwrite:
            continue
        draw_placeholder_template(key, size).save(path, format="PNG")
        written.append(path)
    logger.info(f"Placeholder templates written: {len(written)} → {templates_dir}")
    return written
