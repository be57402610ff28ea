"""A single RGBA8 raster image."""

from __future__ import annotations

from dataclasses import dataclass, field

TRANSPARENT = 0x00000000
OPAQUE_WHITE = 0xFFFFFFFF


@dataclass
class Canvas:
    """Row-major RGBA8 pixels packed as 32-bit ints, red in bits 0-7."""

    width: int = 64
    height: int = 64
    pixels: list[int] = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid canvas size {self.width}x{self.height}")
        if self.pixels is None:
            self.pixels = [TRANSPARENT] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies on the canvas."""
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, rgba: int) -> None:
        """Set a pixel; coordinates off the canvas are ignored."""
        if self.in_bounds(x, y):
            self.pixels[y * self.width + x] = rgba

    def get(self, x: int, y: int) -> int:
        """Return a pixel, or transparent black off the canvas."""
        if self.in_bounds(x, y):
            return self.pixels[y * self.width + x]
        return TRANSPARENT

    def fill(self, rgba: int) -> None:
        """Set every pixel to one colour."""
        self.pixels[:] = [rgba] * len(self.pixels)

    def resize(self, width: int, height: int) -> None:
        """Change the size, discarding content and filling with opaque white."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [OPAQUE_WHITE] * (width * height)