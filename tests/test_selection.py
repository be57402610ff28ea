from pixcells.document import Document
from pixcells.selection import Selection, commit_floating, lift_selection


def _doc():
    doc = Document(width=4, height=3)
    doc.active_canvas().pixels[:] = [0xFF000001 + i for i in range(12)]
    doc.rebuild_composite()
    return doc


def _rect_selection(**extra):
    return Selection(active=True, x0=1, y0=0, x1=2, y1=1, **extra)


def test_lift_copies_and_clears_region():
    doc = _doc()
    canvas = doc.active_canvas()
    original = list(canvas.pixels)
    sel = _rect_selection()
    lift_selection(doc, sel)
    assert sel.floating is True
    assert (sel.float_w, sel.float_h) == (2, 2)
    assert (sel.float_x, sel.float_y) == (1, 0)
    assert (sel.float_orig_x, sel.float_orig_y) == (1, 0)
    assert sel.float_pixels == [original[1], original[2], original[5], original[6]]
    for index in (1, 2, 5, 6):
        assert canvas.pixels[index] == 0
        assert doc.composite[index] == 0
    for index in (0, 3, 4, 7, 8, 11):
        assert canvas.pixels[index] == original[index]


def test_lift_respects_mask():
    doc = _doc()
    canvas = doc.active_canvas()
    original = list(canvas.pixels)
    sel = _rect_selection(mask=[True, False, False, True])
    lift_selection(doc, sel)
    assert sel.float_pixels == [original[1], 0, 0, original[6]]
    assert canvas.get(2, 0) == original[2]
    assert canvas.get(1, 1) == original[5]
    assert canvas.get(1, 0) == 0


def test_commit_at_new_position():
    doc = _doc()
    canvas = doc.active_canvas()
    sel = _rect_selection()
    lift_selection(doc, sel)
    lifted = list(sel.float_pixels)
    sel.float_x, sel.float_y = 2, 1
    commit_floating(doc, sel)
    assert [canvas.get(2, 1), canvas.get(3, 1), canvas.get(2, 2), canvas.get(3, 2)] == lifted
    assert sel.active is False
    assert sel.floating is False
    assert sel.float_pixels == []
    assert sel.mask == []
    assert sel.sel_revision == 1


def test_lift_then_commit_in_place_restores_canvas():
    doc = _doc()
    original = list(doc.active_canvas().pixels)
    sel = _rect_selection(mask=[True, False, True, True])
    lift_selection(doc, sel)
    commit_floating(doc, sel)
    assert doc.active_canvas().pixels == original


def test_commit_skips_transparent_pixels():
    doc = _doc()
    canvas = doc.active_canvas()
    before = canvas.get(0, 0)
    sel = Selection(
        floating=True,
        float_pixels=[0x00FFFFFF, 0xFF0000FF],
        float_w=2,
        float_h=1,
    )
    commit_floating(doc, sel)
    assert canvas.get(0, 0) == before
    assert canvas.get(1, 0) == 0xFF0000FF