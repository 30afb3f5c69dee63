"""Tests for the positioning engine."""

import itertools

import pytest

from mockupgen.layout import compute_layout
from mockupgen.models import LOGO_POSITIONS, MOCKUP_TYPES
from mockupgen.styling import LOGO_SIZES

W, H = 800, 1000


def _layout(mockup_type="tshirt-front", layout="centered", base=200, position=None, **kw):
    return compute_layout(mockup_type, layout, W, H, base, position, **kw)


class TestCaps:

    @pytest.mark.parametrize("size", [(800, 1000), (300, 900), (1200, 400), (97, 61)])
    def test_caps_hold_everywhere(self, size):
        w, h = size
        keys = MOCKUP_TYPES + ("banner",)
        layouts = ("centered", "corner", "full-width")
        positions = (None,) + LOGO_POSITIONS
        for key, layout, position, base in itertools.product(keys, layouts, positions, LOGO_SIZES.values()):
            box = compute_layout(key, layout, w, h, base, position)
            assert box.logo_size <= 0.4 * w, (key, layout, position, base)
            assert box.logo_size <= 0.3 * h, (key, layout, position, base)
            assert box.logo_size >= 1

    @pytest.mark.parametrize("size", [(97, 61), (120, 90), (800, 1000)])
    def test_logo_box_never_starts_off_canvas(self, size):
        w, h = size
        for position in LOGO_POSITIONS:
            box = compute_layout("tshirt-front", "centered", w, h, 250, position)
            assert box.logo_top >= 0 and box.logo_left >= 0, position

    def test_small_template_pins_corner_to_edge(self):
        box = compute_layout("tshirt-front", "centered", 97, 61, 200, "bottom-right")
        assert (box.logo_top, box.logo_left, box.logo_size) == (0, 29, 18)

    def test_front_chest_cap_is_quarter_width(self):
        box = compute_layout("tshirt-front", "centered", 600, 2000, 250)
        assert box.logo_size == 150

    @pytest.mark.parametrize("bad", [(0, 1000), (800, 0), (-1, 10)])
    def test_non_positive_template_rejected(self, bad):
        with pytest.raises(ValueError):
            compute_layout("tshirt-front", "centered", bad[0], bad[1], 200)


class TestSides:

    def test_front(self):
        box = _layout("tshirt-front")
        assert (box.logo_top, box.logo_left, box.logo_size) == (250, 50, 200)

    def test_back_is_larger_and_centred(self):
        box = _layout("hoodie-back")
        assert box.logo_size == 260
        assert box.logo_left == 270
        assert box.logo_top == 250

    def test_back_never_smaller_than_front(self):
        for garment, base in itertools.product(("tshirt", "hoodie", "tank-top"), LOGO_SIZES.values()):
            front = _layout(f"{garment}-front", base=base)
            back = _layout(f"{garment}-back", base=base)
            assert back.logo_size >= front.logo_size

    def test_back_text_sits_lower(self):
        front = _layout("tshirt-front")
        back = _layout("tshirt-back")
        assert back.company_name_top > front.company_name_top
        assert back.tagline_top > front.tagline_top
        assert (front.company_name_top, front.tagline_top) == (400, 450)
        assert (back.company_name_top, back.tagline_top) == (450, 500)


class TestExplicitPositions:

    def test_center(self):
        box = _layout(position="center")
        assert (box.logo_top, box.logo_left) == (300, 300)

    def test_right_chest(self):
        box = _layout(position="right-chest")
        assert (box.logo_top, box.logo_left, box.logo_size) == (250, 550, 200)

    def test_top_right(self):
        box = _layout(position="top-right")
        assert box.logo_top == 50
        assert box.logo_left == W - box.logo_size - 50

    def test_bottom_left(self):
        box = _layout(position="bottom-left")
        assert (box.logo_top, box.logo_left) == (750, 50)

    def test_position_overrides_side(self):
        assert _layout("tshirt-back", position="left-chest").logo_left == 50


class TestPolicy:

    def test_full_width_for_key_without_side(self):
        box = _layout("banner", layout="full-width")
        assert (box.logo_top, box.logo_left, box.logo_size) == (200, 50, 300)

    def test_centered_policy(self):
        box = _layout("banner", layout="centered")
        assert (box.logo_top, box.logo_left) == (300, 300)

    def test_corner_policy_is_left_chest(self):
        box = _layout("banner", layout="corner")
        assert (box.logo_top, box.logo_left) == (250, 50)


class TestText:

    def test_lines_centred_on_their_width(self):
        box = _layout(company_name_width=300, tagline_width=101)
        assert box.company_name_left == 250
        assert box.tagline_left == 350

    def test_wider_than_template_goes_negative(self):
        assert _layout(company_name_width=900).company_name_left == -50
