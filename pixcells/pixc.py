"""Reading and writing the native PIXC project format."""

from __future__ import annotations

import logging
import os
import struct

from .canvas import Canvas
from .document import AnimTag, Document, Frame, Layer, Palette

log = logging.getLogger(__name__)

MAGIC = b"PIXC"
VERSION = 2
MAX_DIMENSION = 4096


class PixcError(ValueError):
    """Raised when a PIXC file is malformed or unsupported."""


def _encode_str(text: str) -> bytes:
    data = text.encode("utf-8")[:255]
    return bytes([len(data)]) + data


def _to_i16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def save(document: Document, path: str | os.PathLike[str]) -> None:
    """Write a document with its palette to a PIXC file."""
    w, h = document.width, document.height
    out = bytearray(MAGIC)
    out += struct.pack(
        "<HHHHf",
        VERSION,
        w & 0xFFFF,
        h & 0xFFFF,
        len(document.frames) & 0xFFFF,
        document.fps,
    )

    palette = document.palette
    out += struct.pack("<H", len(palette.swatches) & 0xFFFF)
    for color in palette.swatches:
        out += struct.pack("<4f", *color)
    out += _encode_str(palette.palette_name)

    count = w * h
    for frame in document.frames:
        out += struct.pack("<HH", frame.duration_ms & 0xFFFF, len(frame.layers) & 0xFFFF)
        for layer in frame.layers:
            if len(layer.canvas.pixels) != count:
                raise ValueError(
                    f"layer {layer.name!r} has {len(layer.canvas.pixels)} pixels, expected {count}"
                )
            out += _encode_str(layer.name)
            out += struct.pack(
                "<BBfB",
                1 if layer.visible else 0,
                1 if layer.locked else 0,
                layer.opacity,
                int(layer.blend_mode) & 0xFF,
            )
            out += struct.pack(f"<{count}I", *layer.canvas.pixels)

    out += struct.pack("<H", len(document.tags) & 0xFFFF)
    for tag in document.tags:
        out += _encode_str(tag.name)
        out += struct.pack("<HH", tag.start & 0xFFFF, tag.end & 0xFFFF)
    out += struct.pack("<h", _to_i16(document.active_tag))

    with open(path, "wb") as f:
        f.write(out)
    log.info(
        "saved %r (%d frames, %d tags, %dx%d)",
        os.fspath(path), len(document.frames), len(document.tags), w, h,
    )


class _Reader:
    def __init__(self, data: bytes, path: str) -> None:
        self._data = data
        self._pos = 0
        self._path = path

    def take(self, size: int, what: str) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise PixcError(f"truncated {what} in {self._path!r}")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, fmt: str, what: str) -> tuple:
        layout = struct.Struct("<" + fmt)
        return layout.unpack(self.take(layout.size, what))

    def string(self, what: str) -> str:
        (length,) = self.unpack("B", what)
        return self.take(length, what).decode("utf-8", errors="replace")


def load(path: str | os.PathLike[str]) -> Document:
    """Read a PIXC file (version 1 or 2) into a new document."""
    name = os.fspath(path)
    with open(path, "rb") as f:
        data = f.read()
    reader = _Reader(data, name)

    if data[:4] != MAGIC:
        raise PixcError(f"bad magic in {name!r}")
    reader.take(4, "header")
    (version,) = reader.unpack("H", "header")
    if not 1 <= version <= 2:
        raise PixcError(f"unsupported version {version} in {name!r}")

    w, h, frame_count, fps = reader.unpack("HHHf", "header")
    if w == 0 or h == 0 or w > MAX_DIMENSION or h > MAX_DIMENSION or frame_count == 0:
        raise PixcError(
            f"invalid dimensions or frame count ({w}x{h}, {frame_count} frames) in {name!r}"
        )

    (color_count,) = reader.unpack("H", "palette")
    swatches = [reader.unpack("4f", "palette colors") for _ in range(color_count)]
    palette = Palette(swatches=swatches, palette_name=reader.string("palette name"))

    count = w * h
    frames = []
    for fi in range(frame_count):
        duration, layer_count = reader.unpack("HH", f"frame header at frame {fi}")
        layers = []
        for li in range(layer_count):
            where = f"at frame {fi} layer {li}"
            layer_name = reader.string(f"layer name {where}")
            visible, locked, opacity, blend = reader.unpack("BBfB", f"layer attributes {where}")
            pixels = list(reader.unpack(f"{count}I", f"pixel data {where}"))
            layers.append(
                Layer(
                    name=layer_name,
                    canvas=Canvas(w, h, pixels),
                    visible=visible != 0,
                    locked=locked != 0,
                    opacity=opacity,
                    blend_mode=blend,
                )
            )
        frames.append(Frame(layers=layers, duration_ms=duration))

    tags: list[AnimTag] = []
    active_tag = -1
    if version >= 2:
        (tag_count,) = reader.unpack("H", "tags block")
        last = frame_count - 1
        for ti in range(tag_count):
            tag_name = reader.string(f"tag {ti}")
            start, end = reader.unpack("HH", f"tag {ti}")
            start = min(max(start, 0), last)
            end = min(max(end, start), last)
            tags.append(AnimTag(tag_name, start, end))
        (stored,) = reader.unpack("h", "active_tag")
        active_tag = stored if 0 <= stored < len(tags) else -1

    document = Document(
        width=w,
        height=h,
        frames=frames,
        fps=fps,
        tags=tags,
        active_tag=active_tag,
        palette=palette,
        needs_center=True,
    )
    log.info(
        "loaded %r (v%d, %d frames, %d tags, %dx%d)",
        name, version, frame_count, len(tags), w, h,
    )
    return document