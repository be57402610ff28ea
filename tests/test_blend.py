import pytest

from pixcells.blend import BlendMode, apply_opacity, blend_pixel

OPAQUE_BLACK = 0xFF000000
OPAQUE_WHITE = 0xFFFFFFFF
OPAQUE_RED = 0xFF0000FF
OPAQUE_GREEN = 0xFF00FF00
OPAQUE_BLUE = 0xFFFF0000
PRIMARIES = [OPAQUE_RED, OPAQUE_GREEN, OPAQUE_BLUE, OPAQUE_BLACK, OPAQUE_WHITE]


@pytest.mark.parametrize("mode", list(BlendMode))
@pytest.mark.parametrize("dst", [0, OPAQUE_RED, 0x80123456])
def test_transparent_source_leaves_destination(mode, dst):
    assert blend_pixel(dst, 0x00FFFFFF, mode) == dst


@pytest.mark.parametrize("dst", PRIMARIES + [0])
@pytest.mark.parametrize("src", PRIMARIES)
def test_normal_opaque_source_replaces(dst, src):
    assert blend_pixel(dst, src, BlendMode.NORMAL) == src


@pytest.mark.parametrize("color", PRIMARIES)
def test_multiply_by_white_is_identity(color):
    assert blend_pixel(color, OPAQUE_WHITE, BlendMode.MULTIPLY) == color


@pytest.mark.parametrize("color", PRIMARIES)
def test_screen_and_add_with_black_are_identity(color):
    assert blend_pixel(color, OPAQUE_BLACK, BlendMode.SCREEN) == color
    assert blend_pixel(color, OPAQUE_BLACK, BlendMode.ADD) == color


def test_multiply_disjoint_primaries_is_black():
    assert blend_pixel(OPAQUE_GREEN, OPAQUE_RED, BlendMode.MULTIPLY) == OPAQUE_BLACK


def test_add_saturates_to_white():
    assert blend_pixel(OPAQUE_WHITE, OPAQUE_WHITE, BlendMode.ADD) == OPAQUE_WHITE


def test_overlay_on_black_and_white_keeps_destination():
    for src in PRIMARIES:
        assert blend_pixel(OPAQUE_BLACK, src, BlendMode.OVERLAY) == OPAQUE_BLACK
        assert blend_pixel(OPAQUE_WHITE, src, BlendMode.OVERLAY) == OPAQUE_WHITE


def test_unknown_mode_acts_as_normal():
    dst, src = 0xC0408020, 0x7F10E0A0
    assert blend_pixel(dst, src, 99) == blend_pixel(dst, src, BlendMode.NORMAL)


def test_result_alpha_not_below_destination_alpha():
    dst = 0x80102030
    for alpha in (1, 64, 128, 200):
        out = blend_pixel(dst, (alpha << 24) | 0x00AABBCC, BlendMode.NORMAL)
        assert (out >> 24) & 0xFF >= (dst >> 24) & 0xFF


def test_apply_opacity_full_is_identity():
    assert apply_opacity(0x80123456, 1.0) == 0x80123456


def test_apply_opacity_zero_clears_alpha_only():
    assert apply_opacity(OPAQUE_RED, 0.0) == OPAQUE_RED & 0x00FFFFFF


def test_apply_opacity_truncates():
    assert apply_opacity(OPAQUE_WHITE, 0.5) >> 24 == 127
    assert apply_opacity(OPAQUE_WHITE, 0.5) & 0x00FFFFFF == 0x00FFFFFF