import pytest

from pixcells.preview import PreviewView, fit_zoom, step_zoom


def test_fit_zoom_never_below_one():
    assert fit_zoom(1000, 1) == 1
    assert fit_zoom(1, 4096) == 1


@pytest.mark.parametrize("w,h", [(1, 1), (16, 16), (64, 32), (10, 100), (160, 3)])
def test_fit_zoom_fills_at_most_target(w, h):
    z = fit_zoom(w, h)
    assert z == int(z)
    assert z * max(w, h) <= 160
    assert (z + 1) * max(w, h) > 160


def test_fit_zoom_rejects_empty():
    with pytest.raises(ValueError):
        fit_zoom(0, 5)


def test_step_zoom_clamps():
    assert step_zoom(32, 1) == 32
    assert step_zoom(1, -1) == 1


def test_step_zoom_fine_below_eight():
    for z in range(1, 8):
        assert step_zoom(z, 1) == z + 1


def test_step_zoom_coarse_is_multiple_of_four():
    for z in (8, 9, 12, 15, 20):
        up = step_zoom(z, 1)
        assert up > z
        assert up % 4 == 0


@pytest.mark.parametrize("z", [1, 2, 3, 4, 5, 6, 7, 8, 12, 16, 20, 24, 28])
def test_step_zoom_round_trip(z):
    assert step_zoom(step_zoom(z, 1), -1) == z


def test_step_zoom_uses_sign_only():
    assert step_zoom(3, 0.2) == step_zoom(3, 5)
    assert step_zoom(3, 0) == 3


def test_reset_fits_and_clears_pan():
    view = PreviewView(zoom=7, pan_x=5, pan_y=-3)
    zoom = view.reset(32, 16)
    assert zoom == fit_zoom(32, 16)
    assert (view.pan_x, view.pan_y) == (0.0, 0.0)


def test_pan_by_accumulates():
    view = PreviewView()
    view.pan_by(3, 4)
    view.pan_by(-1, 2)
    assert (view.pan_x, view.pan_y) == (2, 6)


def test_zoom_at_keeps_point_under_mouse():
    view = PreviewView(zoom=2, pan_x=10, pan_y=20)
    mx, my = 50.0, 70.0
    before = ((mx - view.pan_x) / view.zoom, (my - view.pan_y) / view.zoom)
    assert view.zoom_at(1.0, mx, my)
    assert view.zoom == step_zoom(2, 1)
    after = ((mx - view.pan_x) / view.zoom, (my - view.pan_y) / view.zoom)
    assert after == pytest.approx(before)


def test_zoom_at_without_wheel_does_nothing():
    view = PreviewView(zoom=4, pan_x=1, pan_y=2)
    assert not view.zoom_at(0.0, 10, 10)
    assert (view.zoom, view.pan_x, view.pan_y) == (4, 1, 2)


def test_zoom_at_limit_reports_no_change():
    view = PreviewView(zoom=32, pan_x=1, pan_y=2)
    assert not view.zoom_at(1.0, 10, 10)
    assert (view.zoom, view.pan_x, view.pan_y) == (32, 1, 2)