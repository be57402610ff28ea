"""PNG import and export, including sprite sheets of all frames."""

from __future__ import annotations

import logging
import os
import struct
from enum import IntEnum

from PIL import Image

from .canvas import Canvas
from .document import Document

log = logging.getLogger(__name__)


class SheetLayout(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1
    GRID = 2


def save(canvas: Canvas, path: str | os.PathLike[str]) -> None:
    """Write a canvas as an RGBA PNG."""
    if canvas.width <= 0 or canvas.height <= 0:
        raise ValueError("cannot write an empty image")
    data = struct.pack(f"<{len(canvas.pixels)}I", *canvas.pixels)
    Image.frombytes("RGBA", (canvas.width, canvas.height), data).save(path, format="PNG")


def load(path: str | os.PathLike[str]) -> Canvas:
    """Read an image file into a canvas, converting it to RGBA."""
    with Image.open(path) as image:
        rgba = image.convert("RGBA")
        width, height = rgba.size
        data = rgba.tobytes()
    pixels = list(struct.unpack(f"<{width * height}I", data))
    return Canvas(width, height, pixels)


def build_sprite_sheet(
    document: Document,
    layout: SheetLayout = SheetLayout.HORIZONTAL,
    grid_cols: int = 4,
) -> Canvas:
    """Lay out the composite of every frame on one canvas."""
    fw, fh, n = document.width, document.height, len(document.frames)
    if fw <= 0 or fh <= 0 or n <= 0:
        raise ValueError("empty canvas")

    layout = SheetLayout(layout)
    if layout is SheetLayout.HORIZONTAL:
        cols, rows = n, 1
    elif layout is SheetLayout.VERTICAL:
        cols, rows = 1, n
    else:
        cols = grid_cols if grid_cols > 0 else 4
        rows = -(-n // cols)

    sheet = Canvas(fw * cols, fh * rows)
    for index in range(n):
        frame_pixels = document.composite_frame(index)
        row, col = divmod(index, cols)
        ox, oy = col * fw, row * fh
        for y in range(fh):
            start = (oy + y) * sheet.width + ox
            sheet.pixels[start:start + fw] = frame_pixels[y * fw:(y + 1) * fw]
    return sheet


def save_sprite_sheet(
    document: Document,
    path: str | os.PathLike[str],
    layout: SheetLayout = SheetLayout.HORIZONTAL,
    grid_cols: int = 4,
) -> Canvas:
    """Build a sprite sheet, write it as PNG and return it."""
    sheet = build_sprite_sheet(document, layout, grid_cols)
    save(sheet, path)
    log.info(
        "saved sprite sheet %r (%dx%d, %d frames)",
        os.fspath(path), sheet.width, sheet.height, len(document.frames),
    )
    return sheet