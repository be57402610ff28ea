"""Colour conversions and palette editing: swatches, recent colours, hue sort."""

from __future__ import annotations

import colorsys
import logging
import re

from .document import Color, Palette

log = logging.getLogger(__name__)

MAX_RECENT = 8

_HEX6 = re.compile(r"#?([0-9A-Fa-f]{6})")


def _byte(channel: float) -> int:
    return min(255, max(0, int(channel * 255.0 + 0.5)))


def _rgb_bytes(color: Color) -> tuple[int, int, int]:
    return _byte(color[0]), _byte(color[1]), _byte(color[2])


def color_to_hex(color: Color) -> str:
    """The colour as six upper-case hex digits, RRGGBB, ignoring alpha."""
    r, g, b = _rgb_bytes(color)
    return f"{r:02X}{g:02X}{b:02X}"


def parse_hex(text: str) -> Color:
    """Parse RRGGBB (with an optional leading '#') into an opaque colour."""
    match = _HEX6.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"not a six-digit hex colour: {text!r}")
    value = int(match.group(1), 16)
    return (
        ((value >> 16) & 0xFF) / 255.0,
        ((value >> 8) & 0xFF) / 255.0,
        (value & 0xFF) / 255.0,
        1.0,
    )


def hex_rgba_string(color: Color) -> str:
    """The colour as RRGGBBFF, always fully opaque."""
    return f"{color_to_hex(color)}FF"


def css_string(color: Color) -> str:
    """The colour as a CSS rgb() expression."""
    r, g, b = _rgb_bytes(color)
    return f"rgb({r}, {g}, {b})"


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB in 0..1 to hue, saturation and value in 0..1."""
    return colorsys.rgb_to_hsv(r, g, b)


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert hue, saturation and value in 0..1 to RGB in 0..1."""
    return colorsys.hsv_to_rgb(h % 1.0, s, v)


def _opaque(color: Color) -> Color:
    return (color[0], color[1], color[2], 1.0)


def _same_rgb(a: Color, b: Color) -> bool:
    return a[0] == b[0] and a[1] == b[1] and a[2] == b[2]


def swap_colors(palette: Palette) -> None:
    """Exchange the primary and secondary colours."""
    palette.primary_color, palette.secondary_color = (
        palette.secondary_color,
        palette.primary_color,
    )


def select_swatch(palette: Palette, index: int) -> Color:
    """Make a swatch the primary colour and move it to the front of the recent list."""
    if not 0 <= index < len(palette.swatches):
        raise IndexError(f"no swatch at index {index}")
    swatch = palette.swatches[index]
    palette.primary_color = _opaque(swatch)
    palette.selected_swatch = index
    log.info("palette: #%s", color_to_hex(swatch))
    recent = [c for c in palette.recent_colors if not _same_rgb(c, swatch)]
    palette.recent_colors = [swatch, *recent][:MAX_RECENT]
    return palette.primary_color


def add_swatch(palette: Palette, color: Color | None = None) -> bool:
    """Append a colour (the primary one by default) unless its RGB is already present."""
    if color is None:
        color = palette.primary_color
    if any(_same_rgb(s, color) for s in palette.swatches):
        return False
    palette.swatches.append(_opaque(color))
    log.info("palette: added #%s", color_to_hex(color))
    return True


def remove_selected(palette: Palette) -> Color | None:
    """Remove the selected swatch and return it, or None if nothing is selected."""
    index = palette.selected_swatch
    if not 0 <= index < len(palette.swatches):
        return None
    removed = palette.swatches.pop(index)
    log.info("palette: removed #%s", color_to_hex(removed))
    if palette.swatches:
        palette.selected_swatch = min(index, len(palette.swatches) - 1)
    else:
        palette.selected_swatch = -1
    return removed


def sort_by_hue(palette: Palette) -> None:
    """Order the swatches by hue and clear the selection."""
    palette.swatches.sort(key=lambda c: rgb_to_hsv(c[0], c[1], c[2])[0])
    palette.selected_swatch = -1
    log.info("palette: sorted by hue")