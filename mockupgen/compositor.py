"""
compositor.py — Put one logo (plus company name / tagline) on one garment.

Pipeline per mockup type:
  1. Load the garment template, shrunk to the working canvas.
  2. Render the company name and tagline (industry text style + colours).
  3. Ask the positioning engine for the logo box and text offsets.
  4. Normalise the logo into its box.
  5. Alpha-composite logo and text onto the untinted template.
  6. Write a PNG named mockup-<type>-<epoch ms>-<token>.png.

compose() never raises for per-type failures: template, logo and write
errors come back as a failed MockupResult so sibling types still run.
"""

from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path
from typing import Dict, Optional, Tuple

from PIL import Image

from .config import Settings
from .errors import MockupError, PersistError, TemplateNotFoundError
from .industries import IndustryProfile, get_industry_profile
from .layout import LayoutBox, compute_layout
from .logo import normalize_logo_image
from .models import MockupRequest, MockupResult
from .styling import hex_to_rgb, logo_size_for, text_sizes_for
from .templates import load_template, template_is_shared
from .text import measure_text, register_fonts, render_text_image

logger = logging.getLogger(__name__)

MIN_FONT_SIZE   = 12
TEXT_MAX_WIDTH  = 0.90


def _fit_font_size(text: str, size: int, style: str, max_width: int) -> int:
    """Step the font size down until the rendered line fits max_width."""
    while size > MIN_FONT_SIZE and measure_text(text, size, style)[0] > max_width:
        size -= 2
    return max(size, MIN_FONT_SIZE)


def _paste_centered_in_box(canvas: Image.Image, img: Image.Image, left: int, top: int, box: int) -> None:
    x = left + (box - img.width) // 2
    y = top + (box - img.height) // 2
    canvas.alpha_composite(img, (x, y))


def _paste_clipped(canvas: Image.Image, img: Image.Image, left: int, top: int) -> None:
    """alpha_composite with negative offsets handled by cropping the source."""
    sx, sy = max(0, -left), max(0, -top)
    if sx or sy:
        img = img.crop((sx, sy, img.width, img.height))
    canvas.alpha_composite(img, (max(0, left), max(0, top)))


class MockupCompositor:
    """Composites logos onto garment templates and persists the result."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        register_fonts()

    # ── Stages ────────────────────────────────────────────────────────────────

    def _render_lines(
        self,
        request: MockupRequest,
        profile: IndustryProfile,
        canvas_width: int,
    ) -> Tuple[Optional[Image.Image], Optional[Image.Image]]:
        style = profile.styling.text_style
        name_px, tag_px = text_sizes_for(style)
        max_width = int(canvas_width * TEXT_MAX_WIDTH)

        name_img = None
        if request.company_name:
            size = _fit_font_size(request.company_name, name_px, style, max_width)
            name_img = render_text_image(
                request.company_name, size, hex_to_rgb(profile.primary_colors[0]), style,
            )

        tag_img = None
        if request.tagline:
            size = _fit_font_size(request.tagline, tag_px, style, max_width)
            tag_img = render_text_image(
                request.tagline, size, hex_to_rgb(profile.secondary_colors[0]), style,
            )
        return name_img, tag_img

    def _persist(self, canvas: Image.Image, mockup_type: str) -> Path:
        out_dir = Path(self.settings.output_dir)
        filename = f"mockup-{mockup_type}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}.png"
        out_path = out_dir / filename
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            canvas.save(out_path, format="PNG")
        except (OSError, ValueError) as exc:
            raise PersistError(f"Could not write {out_path}: {exc}") from exc
        return out_path

    def render(
        self,
        request: MockupRequest,
        mockup_type: str,
        logos: Optional[Dict[int, Image.Image]] = None,
    ) -> Tuple[Image.Image, LayoutBox]:
        """
        Build the composited image in memory. Raises MockupError subclasses.

        logos, when given, maps logo box size → normalised logo for this
        request; sibling types with the same box reuse it instead of
        decoding and tracing the logo again.
        """
        s = self.settings
        template = load_template(s.templates_dir, mockup_type, s.canvas_size)
        if template_is_shared(mockup_type):
            logger.debug(f"{mockup_type}: using shared placeholder template")

        profile = get_industry_profile(request.industry)
        name_img, tag_img = self._render_lines(request, profile, template.width)

        layout = compute_layout(
            mockup_type,
            profile.styling.layout,
            template.width,
            template.height,
            logo_size_for(profile.styling.logo_size),
            request.logo_position,
            company_name_width=name_img.width if name_img else 0,
            tagline_width=tag_img.width if tag_img else 0,
        )

        logo = logos.get(layout.logo_size) if logos is not None else None
        if logo is None:
            logo = normalize_logo_image(
                request.logo,
                layout.logo_size,
                logo_format=request.logo_format,
                vectorize=s.vectorize,
                max_colors=s.max_vector_colors,
            )
            if logos is not None:
                logos[layout.logo_size] = logo

        canvas = template.copy()
        _paste_centered_in_box(canvas, logo, layout.logo_left, layout.logo_top, layout.logo_size)
        if name_img is not None:
            _paste_clipped(canvas, name_img, layout.company_name_left, layout.company_name_top)
        if tag_img is not None:
            _paste_clipped(canvas, tag_img, layout.tagline_left, layout.tagline_top)
        return canvas, layout

    # ── Public API ────────────────────────────────────────────────────────────

    def compose(
        self,
        request: MockupRequest,
        mockup_type: str,
        logos: Optional[Dict[int, Image.Image]] = None,
    ) -> MockupResult:
        """Generate and persist one mockup; failures become a failed result."""
        try:
            canvas, layout = self.render(request, mockup_type, logos)
            out_path = self._persist(canvas, mockup_type)
        except TemplateNotFoundError as exc:
            logger.error(f"{mockup_type}: {exc}")
            return MockupResult.failed(mockup_type, exc)
        except MockupError as exc:
            logger.warning(f"{mockup_type}: {type(exc).__name__}: {exc}")
            return MockupResult.failed(mockup_type, exc)

        logger.info(
            f"{mockup_type}: logo {layout.logo_size}px at "
            f"({layout.logo_left}, {layout.logo_top}) → {out_path.name}"
        )
        return MockupResult.ok(mockup_type, str(out_path))
