"""Interface scale presets and their persistence in a settings file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

SCALES = (0.75, 1.0, 1.25, 1.5, 2.0)
DEFAULT_SCALE = 1.0

_SETTING = re.compile(r"ui_scale=\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def nearest_scale(scale: float) -> float:
    """The supported preset closest to scale; ties go to the smaller preset."""
    return min(SCALES, key=lambda preset: abs(scale - preset))


@dataclass
class UiScale:
    """The interface scale currently in effect."""

    scale: float = DEFAULT_SCALE

    def apply(self, scale: float) -> float:
        """Snap to the nearest preset, make it current and return it."""
        self.scale = nearest_scale(scale)
        return self.scale

    def px(self, base: float) -> float:
        """Scale a size given in unscaled pixels."""
        return base * self.scale


def save_scale(path: str | os.PathLike[str], scale: float) -> None:
    """Write the scale setting to a settings file."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"ui_scale={scale:.2f}\n")


def load_scale(path: str | os.PathLike[str]) -> float:
    """Read the scale setting, or the default if the file is missing or unreadable."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError:
        return DEFAULT_SCALE
    match = _SETTING.match(text)
    if match is None:
        return DEFAULT_SCALE
    return float(match.group(1))