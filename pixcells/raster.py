"""Rasterisation primitives: brushes, lines, fills, shapes and scaling."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .canvas import Canvas

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class ColorSelectResult:
    """Bounding box of a colour selection and its bbox-relative mask."""

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0
    mask: list[bool] = field(default_factory=list)
    any: bool = False


def paint_pixel(
    canvas: Canvas, x: int, y: int, color: int, brush_size: int, circle: bool
) -> None:
    """Stamp a square or round brush centred on (x, y)."""
    half = int(brush_size / 2)
    for dy in range(-half, half + 1):
        for dx in range(-half, half + 1):
            if circle and dx * dx + dy * dy > half * half:
                continue
            canvas.set(x + dx, y + dy, color)


def bresenham(
    canvas: Canvas,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: int,
    brush_size: int,
    circle: bool,
) -> None:
    """Draw a line by stamping the brush at every Bresenham step."""
    dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
    dy, sy = -abs(y1 - y0), (1 if y0 < y1 else -1)
    err = dx + dy
    while True:
        paint_pixel(canvas, x0, y0, color, brush_size, circle)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def flood_fill(canvas: Canvas, sx: int, sy: int, new_color: int) -> None:
    """Replace the 4-connected region of the seed's colour with new_color."""
    old_color = canvas.get(sx, sy)
    if old_color == new_color:
        return
    queue = deque([(sx, sy)])
    canvas.set(sx, sy, new_color)
    while queue:
        x, y = queue.popleft()
        for ddx, ddy in _NEIGHBOURS:
            nx, ny = x + ddx, y + ddy
            if canvas.in_bounds(nx, ny) and canvas.get(nx, ny) == old_color:
                canvas.set(nx, ny, new_color)
                queue.append((nx, ny))


def color_select(canvas: Canvas, sx: int, sy: int, contiguous: bool) -> ColorSelectResult:
    """Select pixels matching the seed colour, connected or anywhere on the canvas."""
    if not canvas.in_bounds(sx, sy):
        return ColorSelectResult()
    target = canvas.get(sx, sy)
    w, h = canvas.width, canvas.height
    hit = [False] * (w * h)

    if contiguous:
        x0 = x1 = sx
        y0 = y1 = sy
        hit[sy * w + sx] = True
        queue = deque([(sx, sy)])
        while queue:
            x, y = queue.popleft()
            x0, y0 = min(x0, x), min(y0, y)
            x1, y1 = max(x1, x), max(y1, y)
            for ddx, ddy in _NEIGHBOURS:
                nx, ny = x + ddx, y + ddy
                if (
                    canvas.in_bounds(nx, ny)
                    and not hit[ny * w + nx]
                    and canvas.get(nx, ny) == target
                ):
                    hit[ny * w + nx] = True
                    queue.append((nx, ny))
    else:
        x0, y0, x1, y1 = w, h, -1, -1
        for index, pixel in enumerate(canvas.pixels):
            if pixel == target:
                hit[index] = True
                y, x = divmod(index, w)
                x0, y0 = min(x0, x), min(y0, y)
                x1, y1 = max(x1, x), max(y1, y)
        if x1 < 0:
            return ColorSelectResult()

    mask = [
        hit[y * w + x]
        for y in range(y0, y1 + 1)
        for x in range(x0, x1 + 1)
    ]
    return ColorSelectResult(x0, y0, x1, y1, mask, True)


def draw_rect(
    canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: int, filled: bool
) -> None:
    """Draw a rectangle outline or filled rectangle between two corners."""
    minx, maxx = min(x0, x1), max(x0, x1)
    miny, maxy = min(y0, y1), max(y0, y1)
    if filled:
        for y in range(miny, maxy + 1):
            for x in range(minx, maxx + 1):
                canvas.set(x, y, color)
        return
    for x in range(minx, maxx + 1):
        canvas.set(x, miny, color)
        canvas.set(x, maxy, color)
    for y in range(miny + 1, maxy):
        canvas.set(minx, y, color)
        canvas.set(maxx, y, color)


def rasterize_ellipse(
    x0: int, y0: int, x1: int, y1: int, filled: bool
) -> Iterator[tuple[int, int]]:
    """Yield the points of an ellipse fitting the box [x0,x1] x [y0,y1] exactly.

    Points may repeat. When filled, each scanline between the outline's edges is
    spanned, so fill and outline share the same silhouette.
    """
    if x0 == x1 and y0 == y1:
        yield (x0, y0)
        return
    a, b = abs(x1 - x0), abs(y1 - y0)
    b1 = b & 1
    dx = 4 * (1 - a) * b * b
    dy = 4 * (b1 + 1) * a * a
    err = dx + dy + b1 * a * a
    if x0 > x1:
        x0 = x1
        x1 += a
    if y0 > y1:
        y0 = y1
    y0 += (b + 1) // 2
    y1 = y0 - b1
    a *= 8 * a
    b1 = 8 * b * b

    while True:
        if filled:
            for x in range(x0, x1 + 1):
                yield (x, y0)
                yield (x, y1)
        else:
            yield (x1, y0)
            yield (x0, y0)
            yield (x0, y1)
            yield (x1, y1)
        e2 = 2 * err
        if e2 <= dy:
            y0 += 1
            y1 -= 1
            dy += a
            err += dy
        if e2 >= dx or 2 * err > dy:
            x0 += 1
            x1 -= 1
            dx += b1
            err += dx
        if x0 > x1:
            break

    # Finish the tips of flat, nearly one-pixel-high ellipses.
    while y0 - y1 < b:
        if filled:
            for x in range(x0 - 1, x1 + 2):
                yield (x, y0)
                yield (x, y1)
        else:
            yield (x0 - 1, y0)
            yield (x1 + 1, y0)
            yield (x0 - 1, y1)
            yield (x1 + 1, y1)
        y0 += 1
        y1 -= 1


def draw_ellipse(
    canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: int, filled: bool
) -> None:
    """Draw an ellipse fitting the given box onto the canvas."""
    for x, y in rasterize_ellipse(x0, y0, x1, y1, filled):
        canvas.set(x, y, color)


def nn_scale(src: Sequence[int], sw: int, sh: int, dw: int, dh: int) -> list[int]:
    """Nearest-neighbour rescale of a row-major pixel buffer."""
    if dw <= 0 or dh <= 0:
        return []
    return [
        src[(y * sh // dh) * sw + (x * sw // dw)]
        for y in range(dh)
        for x in range(dw)
    ]