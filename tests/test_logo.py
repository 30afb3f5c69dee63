"""Tests for the logo normaliser."""

import io

import pytest
from PIL import Image

from mockupgen import logo as logo_mod
from mockupgen.errors import LogoDecodeError
from mockupgen.logo import (
    VectorTrace,
    count_colors,
    fit_inside,
    is_vector_source,
    normalize_logo,
    normalize_logo_image,
    render_or_fallback,
    trace_logo,
)

from conftest import make_logo, to_png

SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="400" height="400" viewBox="0 0 400 400">'
    '<rect width="400" height="400" fill="#2563EB"/></svg>'
)
WIDE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="400" height="100" viewBox="0 0 400 100">'
    '<rect width="400" height="100" fill="#111827"/></svg>'
)


class TestFitInside:

    def test_shrinks_to_box(self):
        assert fit_inside((300, 300), 200) == (200, 200)

    def test_keeps_aspect(self):
        assert fit_inside((400, 200), 100) == (100, 50)

    def test_never_enlarges(self):
        assert fit_inside((120, 80), 600) == (120, 80)

    def test_empty_image_rejected(self):
        with pytest.raises(LogoDecodeError):
            fit_inside((0, 10), 100)


class TestRasterNormalise:

    def test_resizes_to_target(self, logo_bytes):
        assert normalize_logo_image(logo_bytes, 200).size == (200, 200)

    def test_no_enlargement(self, logo_bytes):
        assert normalize_logo_image(logo_bytes, 600).size == (300, 300)

    def test_aspect_ratio_preserved(self):
        data = to_png(make_logo((400, 200)))
        assert normalize_logo_image(data, 100).size == (100, 50)

    def test_path_and_bytes_agree(self, logo_bytes, logo_path):
        from_bytes = normalize_logo_image(logo_bytes, 150)
        from_path = normalize_logo_image(logo_path, 150)
        assert from_bytes.tobytes() == from_path.tobytes()

    def test_returns_png_bytes(self, logo_bytes):
        out = Image.open(io.BytesIO(normalize_logo(logo_bytes, 100)))
        assert out.format == "PNG"
        assert out.size == (100, 100)

    def test_output_is_rgba(self, logo_bytes):
        assert normalize_logo_image(logo_bytes, 100).mode == "RGBA"

    def test_first_frame_of_animation(self):
        frames = [Image.new("RGB", (64, 64), c) for c in ((255, 0, 0), (0, 255, 0))]
        buf = io.BytesIO()
        frames[0].save(buf, format="GIF", save_all=True, append_images=frames[1:])
        img = normalize_logo_image(buf.getvalue(), 32)
        assert img.getpixel((16, 16))[:3] == (255, 0, 0)

    def test_garbage_bytes(self):
        with pytest.raises(LogoDecodeError):
            normalize_logo_image(b"definitely not an image", 100)

    def test_empty_bytes(self):
        with pytest.raises(LogoDecodeError):
            normalize_logo_image(b"", 100)

    def test_missing_file(self, tmp_path):
        with pytest.raises(LogoDecodeError):
            normalize_logo_image(tmp_path / "nope.png", 100)

    def test_non_positive_target(self, logo_bytes):
        with pytest.raises(ValueError):
            normalize_logo_image(logo_bytes, 0)


class TestVectorDetection:

    def test_svg_suffix(self, tmp_path):
        assert is_vector_source(tmp_path / "mark.SVG")

    def test_format_tag(self):
        assert is_vector_source(b"<svg/>", "svg")
        assert is_vector_source(b"<svg/>", "image/svg+xml")

    def test_bytes_without_tag_are_raster(self):
        assert not is_vector_source(b"<svg/>")

    def test_png_path(self, logo_path):
        assert not is_vector_source(logo_path)


class TestColorCount:

    def test_flat_logo(self):
        assert count_colors(make_logo()) == 3

    def test_transparent_pixels_count_once(self):
        img = Image.new("RGBA", (10, 10), (0, 0, 0, 0))
        img.putpixel((0, 0), (255, 0, 0, 0))
        img.putpixel((1, 0), (0, 255, 0, 0))
        img.putpixel((2, 0), (0, 0, 255, 255))
        assert count_colors(img) == 2

    def test_large_images_are_probed_downscaled(self):
        assert count_colors(make_logo((1600, 1600))) == 3


class TestTracing:

    def test_too_many_colours_is_a_failure(self):
        img = Image.new("RGB", (16, 16))
        img.putdata([(i, i, i) for i in range(256)])
        trace = trace_logo(img, max_colors=4)
        assert not trace.ok
        assert "exceeds" in str(trace.error)

    def test_never_raises(self, monkeypatch):
        def boom(img):
            raise RuntimeError("probe exploded")

        monkeypatch.setattr(logo_mod, "count_colors", boom)
        trace = trace_logo(make_logo(), max_colors=4)
        assert not trace.ok
        assert "probe exploded" in str(trace.error)

    def test_fallback_on_failed_trace(self):
        fallback = Image.new("RGBA", (5, 5))
        out = render_or_fallback(VectorTrace(error=None), 100, lambda: fallback)
        assert out is fallback

    def test_fallback_on_unrenderable_svg(self):
        fallback = Image.new("RGBA", (5, 5))
        out = render_or_fallback(VectorTrace(svg="<svg broken"), 100, lambda: fallback)
        assert out is fallback

    def test_vectorized_logo_fits_box(self, logo_bytes):
        img = normalize_logo_image(logo_bytes, 120, vectorize=True, max_colors=4)
        assert max(img.size) <= 120

    def test_photo_skips_vectorisation(self, monkeypatch):
        img = Image.new("RGB", (64, 64))
        img.putdata([(x * 4, y * 4, (x + y) * 2) for y in range(64) for x in range(64)])

        def no_render(*args, **kwargs):
            raise AssertionError("tracer output should not be rendered")

        monkeypatch.setattr(logo_mod, "rasterize_svg", no_render)
        out = normalize_logo_image(to_png(img), 32, vectorize=True)
        assert out.size == (32, 32)


class TestSvg:

    def test_rasterised_at_target(self, cairo):
        img = normalize_logo_image(SQUARE_SVG.encode(), 200, logo_format="svg")
        assert img.size == (200, 200)
        assert img.getpixel((100, 100))[:3] == (0x25, 0x63, 0xEB)

    def test_svg_keeps_aspect(self, cairo):
        assert normalize_logo_image(WIDE_SVG.encode(), 200, logo_format="svg").size == (200, 50)

    def test_svg_not_enlarged(self, cairo):
        assert normalize_logo_image(WIDE_SVG.encode(), 1000, logo_format="svg").size == (400, 100)

    def test_svg_path(self, cairo, tmp_path):
        path = tmp_path / "mark.svg"
        path.write_text(SQUARE_SVG)
        assert normalize_logo_image(path, 100).size == (100, 100)

    def test_bad_svg(self, cairo):
        with pytest.raises(LogoDecodeError):
            normalize_logo_image(b"<svg not closed", 100, logo_format="svg")
