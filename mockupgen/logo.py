"""
logo.py — Logo quality normaliser.

normalize_logo(source, target_size) fits a logo inside a
target_size × target_size box (aspect preserved, never enlarged past its
intrinsic size) and returns PNG bytes.

  SVG input    → rasterised directly at the fitted size (cairosvg)
  raster input → Lanczos resample (Pillow)

Optional enhancement for flat raster logos: when the source has at most
`max_colors` distinct colours it is traced to SVG (vtracer) and the SVG
is rasterised instead. Tracing is best-effort — any failure yields the
plain raster resample, never an exception.

Vector vs raster is decided by the format tag (file suffix or an explicit
logo_format), never by sniffing content.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import LogoDecodeError, VectorizationFailure

logger = logging.getLogger(__name__)

VECTOR_FORMATS = {"svg", "svg+xml", "image/svg+xml"}

# Colour counting never needs full resolution; NEAREST adds no new colours.
_COUNT_MAX_EDGE = 512

# vtracer settings tuned for flat logo marks
_TRACE_PARAMS = dict(
    colormode="color",
    hierarchical="stacked",
    mode="spline",
    filter_speckle=4,
    color_precision=6,
    layer_difference=16,
    corner_threshold=60,
    length_threshold=4.0,
    max_iterations=10,
    splice_threshold=45,
    path_precision=3,
)

LogoInput = Union[str, Path, bytes]


# ── Source handling ────────────────────────────────────────────────────────────

def read_logo_bytes(source: LogoInput) -> bytes:
    """Return the raw bytes of a logo given as a path or a byte buffer."""
    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        path = Path(source)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise LogoDecodeError(f"Logo file not readable: {path} ({exc})") from exc
    if not data:
        raise LogoDecodeError("Logo is empty")
    return data


def is_vector_source(source: LogoInput, logo_format: Optional[str] = None) -> bool:
    if logo_format and logo_format.lower().lstrip(".") in VECTOR_FORMATS:
        return True
    if isinstance(source, (str, Path)):
        return Path(source).suffix.lower() == ".svg"
    return False


def fit_inside(size: Tuple[int, int], target: int) -> Tuple[int, int]:
    """Largest (w, h) with the same aspect that fits target×target, never larger than size."""
    w, h = size
    if w <= 0 or h <= 0:
        raise LogoDecodeError(f"Logo has no pixels ({w}×{h})")
    scale = min(1.0, target / max(w, h))
    return max(1, int(round(w * scale))), max(1, int(round(h * scale)))


def decode_raster(data: bytes) -> Image.Image:
    """Decode raster bytes to RGBA. First frame of animations, EXIF orientation applied."""
    try:
        img = Image.open(io.BytesIO(data))
        if getattr(img, "is_animated", False):
            img.seek(0)
        img.load()
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise LogoDecodeError(f"Could not decode logo image: {exc}") from exc
    img = ImageOps.exif_transpose(img)
    return img.convert("RGBA")


def rasterize_svg(svg: Union[str, bytes], target_size: int) -> Image.Image:
    """
    Render SVG markup into the target box without enlarging it past its
    intrinsic size. Raises LogoDecodeError when the markup cannot be rendered.
    """
    markup = svg.encode("utf-8") if isinstance(svg, str) else svg
    try:
        import cairosvg  # native cairo is loaded lazily, only for vector work

        intrinsic = Image.open(io.BytesIO(cairosvg.svg2png(bytestring=markup)))
        w, h = fit_inside(intrinsic.size, target_size)
        if (w, h) == intrinsic.size:
            img = intrinsic
        else:
            png = cairosvg.svg2png(bytestring=markup, output_width=w, output_height=h)
            img = Image.open(io.BytesIO(png))
        img.load()
    except LogoDecodeError:
        raise
    except Exception as exc:
        raise LogoDecodeError(f"Could not render SVG logo: {exc}") from exc
    return img.convert("RGBA")


def resample_raster(img: Image.Image, target_size: int) -> Image.Image:
    """Lanczos resample into the target box; smaller logos are left as-is."""
    size = fit_inside(img.size, target_size)
    if size == img.size:
        return img.copy()
    return img.resize(size, Image.LANCZOS)


# ── Auto-vectorisation ────────────────────────────────────────────────────────

def count_colors(img: Image.Image) -> int:
    """Distinct RGBA colours; every fully transparent pixel counts as one colour."""
    probe = img.convert("RGBA")
    if max(probe.size) > _COUNT_MAX_EDGE:
        probe = probe.copy()
        probe.thumbnail((_COUNT_MAX_EDGE, _COUNT_MAX_EDGE), Image.NEAREST)
    arr = np.array(probe).reshape(-1, 4)
    arr[arr[:, 3] == 0] = 0
    packed = arr.astype(np.uint32)
    keys = (packed[:, 0] << 24) | (packed[:, 1] << 16) | (packed[:, 2] << 8) | packed[:, 3]
    return int(np.unique(keys).size)


@dataclass
class VectorTrace:
    """Outcome of a tracing attempt: either svg or error is set."""
    svg: Optional[str] = None
    error: Optional[VectorizationFailure] = None

    @property
    def ok(self) -> bool:
        return self.svg is not None


def trace_logo(img: Image.Image, max_colors: int) -> VectorTrace:
    """Trace a flat raster logo to SVG. Never raises; failures are returned."""
    try:
        colors = count_colors(img)
        if colors > max_colors:
            return VectorTrace(error=VectorizationFailure(
                f"{colors} colours exceeds the vectorisation limit of {max_colors}"
            ))

        import vtracer

        buf = io.BytesIO()
        img.save(buf, format="PNG")
        svg = vtracer.convert_raw_image_to_svg(buf.getvalue(), img_format="png", **_TRACE_PARAMS)
        if not svg or "<svg" not in svg:
            return VectorTrace(error=VectorizationFailure("Tracer returned no SVG"))
        return VectorTrace(svg=svg)
    except Exception as exc:
        return VectorTrace(error=VectorizationFailure(f"Tracing failed: {exc}"))


def render_or_fallback(
    trace: VectorTrace,
    target_size: int,
    fallback: Callable[[], Image.Image],
) -> Image.Image:
    """Rasterise a successful trace; otherwise (or if rendering fails) use fallback()."""
    if not trace.ok:
        logger.debug(f"Vectorisation skipped: {trace.error}")
        return fallback()
    try:
        return rasterize_svg(trace.svg, target_size)
    except Exception as exc:
        logger.warning(f"Traced SVG could not be rendered, using raster: {exc}")
        return fallback()


# ── Public API ────────────────────────────────────────────────────────────────

def normalize_logo_image(
    source: LogoInput,
    target_size: int,
    logo_format: Optional[str] = None,
    vectorize: bool = False,
    max_colors: int = 4,
) -> Image.Image:
    """
    Fit a logo into a target_size box as an RGBA image.

    Args:
        source:      logo file path or raw bytes
        target_size: edge length of the square bounding box in px
        logo_format: format tag for byte buffers ('svg', 'png', ...)
        vectorize:   try the trace-to-SVG enhancement for flat raster logos
        max_colors:  colour-count gate for tracing

    Raises:
        LogoDecodeError if the source cannot be decoded at all.
    """
    if target_size <= 0:
        raise ValueError(f"target_size must be positive, got {target_size}")

    data = read_logo_bytes(source)

    if is_vector_source(source, logo_format):
        return rasterize_svg(data, target_size)

    img = decode_raster(data)

    def _raster() -> Image.Image:
        return resample_raster(img, target_size)

    if not vectorize:
        return _raster()
    return render_or_fallback(trace_logo(img, max_colors), target_size, _raster)


def normalize_logo(
    source: LogoInput,
    target_size: int,
    logo_format: Optional[str] = None,
    vectorize: bool = False,
    max_colors: int = 4,
) -> bytes:
    """normalize_logo_image, encoded as PNG bytes."""
    img = normalize_logo_image(source, target_size, logo_format, vectorize, max_colors)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
