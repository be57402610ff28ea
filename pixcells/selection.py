"""Rectangular and masked selections that can be lifted and dropped."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .canvas import TRANSPARENT
from .document import Document

log = logging.getLogger(__name__)


@dataclass
class Selection:
    """A selection rectangle, optional bbox-relative mask and floating pixels."""

    active: bool = False
    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0
    mask: list[bool] = field(default_factory=list)
    floating: bool = False
    float_pixels: list[int] = field(default_factory=list)
    float_w: int = 0
    float_h: int = 0
    float_x: int = 0
    float_y: int = 0
    float_orig_x: int = 0
    float_orig_y: int = 0
    sel_revision: int = 0


def lift_selection(document: Document, selection: Selection) -> None:
    """Cut the selected pixels off the active layer into a floating buffer."""
    sw = selection.x1 - selection.x0 + 1
    sh = selection.y1 - selection.y0 + 1
    selection.float_w = sw
    selection.float_h = sh
    selection.float_x = selection.float_orig_x = selection.x0
    selection.float_y = selection.float_orig_y = selection.y0

    canvas = document.active_canvas()
    masked = bool(selection.mask)
    lifted = []
    for y in range(sh):
        for x in range(sw):
            cx, cy = selection.x0 + x, selection.y0 + y
            if masked and not selection.mask[y * sw + x]:
                lifted.append(TRANSPARENT)
                continue
            lifted.append(canvas.get(cx, cy))
            canvas.set(cx, cy, TRANSPARENT)
    selection.float_pixels = lifted
    selection.floating = True
    document.rebuild_composite()
    log.info("lift selection: %dx%d", sw, sh)


def commit_floating(document: Document, selection: Selection) -> None:
    """Paste the floating pixels onto the active layer and drop the selection."""
    canvas = document.active_canvas()
    if selection.float_w > 0:
        for index, pixel in enumerate(selection.float_pixels):
            if (pixel >> 24) & 0xFF:
                y, x = divmod(index, selection.float_w)
                canvas.set(selection.float_x + x, selection.float_y + y, pixel)
    selection.active = False
    selection.floating = False
    selection.float_pixels = []
    selection.mask = []
    selection.sel_revision += 1
    document.rebuild_composite()
    log.info("commit float to (%d,%d)", selection.float_x, selection.float_y)