"""Shared fixtures: a temporary template store, output dir and a flat 3-colour logo."""

import io

import pytest
from PIL import Image, ImageDraw

from mockupgen.config import Settings
from mockupgen.templates import write_placeholder_templates

LOGO_WHITE = (255, 255, 255)
LOGO_BLUE = (37, 99, 235)
LOGO_DARK = (17, 24, 39)


def make_logo(size=(300, 300)) -> Image.Image:
    """White square, blue disc and a dark centre block: exactly three colours."""
    w, h = size
    img = Image.new("RGB", size, LOGO_WHITE)
    draw = ImageDraw.Draw(img)
    draw.ellipse([w * 0.2, h * 0.2, w * 0.8, h * 0.8], fill=LOGO_BLUE)
    draw.rectangle([w * 0.4, h * 0.4, w * 0.6, h * 0.6], fill=LOGO_DARK)
    return img


def to_png(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def logo_bytes():
    return to_png(make_logo())


@pytest.fixture
def logo_path(tmp_path, logo_bytes):
    path = tmp_path / "logo.png"
    path.write_bytes(logo_bytes)
    return path


@pytest.fixture
def templates_dir(tmp_path):
    path = tmp_path / "templates"
    write_placeholder_templates(path)
    return path


@pytest.fixture
def settings(tmp_path, templates_dir):
    return Settings(
        templates_dir=templates_dir,
        output_dir=tmp_path / "out",
        vectorize=False,
    )


@pytest.fixture
def cairo():
    """Skip when the native cairo library behind cairosvg cannot be loaded."""
    try:
        import cairosvg
    except (ImportError, OSError) as exc:
        pytest.skip(f"cairosvg unavailable: {exc}")
    return cairosvg
