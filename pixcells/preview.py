"""Zoom and pan state of the floating animation preview."""

from __future__ import annotations

import math
from dataclasses import dataclass

MIN_ZOOM = 1.0
MAX_ZOOM = 32.0
FIT_TARGET = 160.0
_COARSE_FROM = 8.0
_COARSE_STEP = 4.0


def fit_zoom(width: int, height: int) -> float:
    """A whole-number zoom that makes the larger side fill about 160 pixels."""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size {width}x{height}")
    return max(MIN_ZOOM, math.floor(FIT_TARGET / max(width, height)))


def step_zoom(zoom: float, direction: float) -> float:
    """The next zoom level in the direction's sign.

    Steps are one pixel up to 8x and multiples of four above it, clamped to 1..32.
    """
    if direction == 0:
        return zoom
    step = 1.0 if direction > 0 else -1.0
    if step > 0 and zoom >= _COARSE_FROM:
        new_zoom = math.ceil((zoom + 1.0) / _COARSE_STEP) * _COARSE_STEP
    elif step < 0 and zoom > _COARSE_FROM:
        new_zoom = math.floor((zoom - 1.0) / _COARSE_STEP) * _COARSE_STEP
    else:
        new_zoom = zoom + step
    return min(max(float(new_zoom), MIN_ZOOM), MAX_ZOOM)


@dataclass
class PreviewView:
    """Zoom factor and pan offset of the preview, relative to its content area."""

    zoom: float = MIN_ZOOM
    pan_x: float = 0.0
    pan_y: float = 0.0

    def reset(self, width: int, height: int) -> float:
        """Centre-less reset for a new image size: clear the pan and fit the zoom."""
        self.pan_x = 0.0
        self.pan_y = 0.0
        self.zoom = fit_zoom(width, height)
        return self.zoom

    def pan_by(self, dx: float, dy: float) -> None:
        """Move the image by a mouse drag delta."""
        self.pan_x += dx
        self.pan_y += dy

    def zoom_at(self, wheel: float, mouse_x: float, mouse_y: float) -> bool:
        """Zoom one step for a wheel movement, keeping the point under the mouse fixed.

        The mouse position is relative to the top-left of the content area.
        Returns whether the zoom changed.
        """
        if wheel == 0:
            return False
        old_zoom = self.zoom
        new_zoom = step_zoom(old_zoom, wheel)
        if new_zoom == old_zoom:
            return False
        self.pan_x = mouse_x - (mouse_x - self.pan_x) / old_zoom * new_zoom
        self.pan_y = mouse_y - (mouse_y - self.pan_y) / old_zoom * new_zoom
        self.zoom = new_zoom
        return True