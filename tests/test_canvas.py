import pytest

from pixcells.canvas import Canvas

RED = 0xFF0000FF


def test_default_canvas_is_64_square_and_transparent():
    canvas = Canvas()
    assert (canvas.width, canvas.height) == (64, 64)
    assert len(canvas.pixels) == 64 * 64
    assert set(canvas.pixels) == {0}


def test_set_then_get_round_trip():
    canvas = Canvas(8, 4)
    canvas.set(3, 2, RED)
    assert canvas.get(3, 2) == RED
    assert canvas.pixels[2 * 8 + 3] == RED


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (8, 0), (0, 4)])
def test_out_of_bounds(x, y):
    canvas = Canvas(8, 4)
    canvas.fill(RED)
    assert not canvas.in_bounds(x, y)
    assert canvas.get(x, y) == 0
    before = list(canvas.pixels)
    canvas.set(x, y, 0x12345678)
    assert canvas.pixels == before


def test_in_bounds_corners():
    canvas = Canvas(5, 3)
    assert canvas.in_bounds(0, 0)
    assert canvas.in_bounds(4, 2)


def test_fill_sets_every_pixel():
    canvas = Canvas(3, 3)
    canvas.fill(RED)
    assert all(p == RED for p in canvas.pixels)


def test_resize_fills_opaque_white():
    canvas = Canvas(2, 2)
    canvas.fill(RED)
    canvas.resize(5, 7)
    assert (canvas.width, canvas.height) == (5, 7)
    assert canvas.pixels == [0xFFFFFFFF] * 35


def test_invalid_sizes_raise():
    with pytest.raises(ValueError):
        Canvas(-1, 4)
    with pytest.raises(ValueError):
        Canvas(2, 2, [0, 0, 0])
    with pytest.raises(ValueError):
        Canvas(2, 2).resize(3, -2)