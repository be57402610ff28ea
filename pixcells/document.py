"""An animated sprite document: frames of layers, tags and a colour palette."""

from __future__ import annotations

from dataclasses import dataclass, field

from .blend import apply_opacity, blend_pixel
from .canvas import TRANSPARENT, Canvas

Color = tuple[float, float, float, float]


@dataclass
class Layer:
    """One raster layer of a frame."""

    name: str = "Layer 1"
    canvas: Canvas = field(default_factory=Canvas)
    visible: bool = True
    locked: bool = False
    opacity: float = 1.0
    blend_mode: int = 0


@dataclass
class Frame:
    """One animation frame: a stack of layers, bottom first."""

    layers: list[Layer] = field(default_factory=list)
    duration_ms: int = 100


@dataclass
class AnimTag:
    """A named, inclusive range of frames used for playback."""

    name: str = "tag"
    start: int = 0
    end: int = 0


@dataclass
class Palette:
    """Swatches and the current drawing colours, as RGBA floats in 0..1."""

    swatches: list[Color] = field(default_factory=list)
    palette_name: str = "Default"
    primary_color: Color = (0.0, 0.0, 0.0, 1.0)
    secondary_color: Color = (1.0, 1.0, 1.0, 1.0)
    selected_swatch: int = -1
    recent_colors: list[Color] = field(default_factory=list)


@dataclass
class Document:
    """A sprite of fixed size with frames, tags, palette and a cached composite."""

    width: int = 64
    height: int = 64
    frames: list[Frame] = field(default_factory=list)
    fps: float = 12.0
    tags: list[AnimTag] = field(default_factory=list)
    active_tag: int = -1
    active_frame: int = 0
    active_layer: int = 0
    palette: Palette = field(default_factory=Palette)
    composite: list[int] = field(default_factory=list)
    project_path: str = ""
    unsaved_changes: bool = False
    needs_center: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid document size {self.width}x{self.height}")
        if not self.frames:
            self.new_canvas(self.width, self.height)
        else:
            self.rebuild_composite()

    def new_canvas(self, width: int, height: int) -> None:
        """Reset to a single frame holding one transparent layer of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid document size {width}x{height}")
        self.width = width
        self.height = height
        self.frames = [Frame(layers=[Layer(canvas=Canvas(width, height))])]
        self.tags = []
        self.active_tag = -1
        self.active_frame = 0
        self.active_layer = 0
        self.needs_center = True
        self.rebuild_composite()

    def active_canvas(self) -> Canvas:
        """The canvas of the active layer in the active frame."""
        return self.frames[self.active_frame].layers[self.active_layer].canvas

    def composite_frame(self, index: int) -> list[int]:
        """Flatten the visible layers of one frame into a pixel list."""
        out = [TRANSPARENT] * (self.width * self.height)
        for layer in self.frames[index].layers:
            if not layer.visible:
                continue
            mode = layer.blend_mode
            opacity = layer.opacity
            out = [
                blend_pixel(dst, apply_opacity(src, opacity), mode)
                for dst, src in zip(out, layer.canvas.pixels)
            ]
        return out

    def rebuild_composite(self) -> None:
        """Recompute the cached composite of the active frame."""
        if 0 <= self.active_frame < len(self.frames):
            self.composite = self.composite_frame(self.active_frame)
        else:
            self.composite = [TRANSPARENT] * (self.width * self.height)