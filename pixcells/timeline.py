"""Frame navigation, playback, frame reordering and animation tags."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .canvas import Canvas
from .document import AnimTag, Document, Frame, Layer

log = logging.getLogger(__name__)


def playback_range(document: Document) -> tuple[int, int]:
    """The inclusive frame range that plays: the active tag's span, or all frames."""
    lo, hi = 0, len(document.frames) - 1
    if 0 <= document.active_tag < len(document.tags):
        tag = document.tags[document.active_tag]
        lo = min(max(tag.start, 0), hi)
        hi = min(max(tag.end, lo), hi)
    return lo, hi


def _step(document: Document, delta: int) -> int:
    lo, hi = playback_range(document)
    span = hi - lo + 1
    current = document.active_frame
    if current < lo or current > hi:
        document.active_frame = lo
    else:
        document.active_frame = lo + (current - lo + delta) % span
    document.rebuild_composite()
    return document.active_frame


def next_frame(document: Document) -> int:
    """Advance to the next frame within the playback range, wrapping around."""
    return _step(document, 1)


def previous_frame(document: Document) -> int:
    """Go back to the previous frame within the playback range, wrapping around."""
    return _step(document, -1)


def add_frame(document: Document) -> Frame:
    """Append an empty single-layer frame and make it active."""
    layer = Layer(name="Layer 1", canvas=Canvas(document.width, document.height))
    frame = Frame(layers=[layer])
    document.frames.append(frame)
    document.active_frame = len(document.frames) - 1
    document.active_layer = 0
    document.rebuild_composite()
    log.info("timeline: added frame %d", document.active_frame + 1)
    return frame


def move_frame(document: Document, src: int, dst: int) -> None:
    """Move a frame to a new position, keeping the active frame and tags attached."""
    count = len(document.frames)
    if not (0 <= src < count and 0 <= dst < count):
        raise IndexError(f"frame move {src} -> {dst} out of range for {count} frames")
    if src == dst:
        return

    def remap(j: int) -> int:
        if j == src:
            return dst
        if src > dst and dst <= j < src:
            return j + 1
        if src < dst and src < j <= dst:
            return j - 1
        return j

    new_active = remap(document.active_frame)
    for tag in document.tags:
        tag.start, tag.end = remap(tag.start), remap(tag.end)
        if tag.start > tag.end:
            tag.start, tag.end = tag.end, tag.start

    document.frames.insert(dst, document.frames.pop(src))
    document.active_frame = new_active
    document.active_layer = min(
        document.active_layer, len(document.frames[new_active].layers) - 1
    )
    document.rebuild_composite()
    log.info("timeline: moved frame %d to position %d", src + 1, dst + 1)


def add_tag(document: Document) -> AnimTag:
    """Append a tag named "tag" spanning every frame."""
    tag = AnimTag(name="tag", start=0, end=len(document.frames) - 1)
    document.tags.append(tag)
    log.info("tag added")
    return tag


def delete_tag(document: Document, index: int) -> AnimTag:
    """Remove a tag, keeping the active tag pointing at the same tag if it survives."""
    if not 0 <= index < len(document.tags):
        raise IndexError(f"no tag at index {index}")
    tag = document.tags.pop(index)
    if document.active_tag == index:
        document.active_tag = -1
    elif document.active_tag > index:
        document.active_tag -= 1
    log.info("tag deleted: %r", tag.name)
    return tag


@dataclass
class Playback:
    """Timed playback of the document's frames within the active range."""

    playing: bool = False
    next_frame_at: float = 0.0

    def toggle(self, document: Document, now: float) -> bool:
        """Start or stop playback; a range of one frame never plays."""
        self.playing = not self.playing
        if self.playing:
            lo, hi = playback_range(document)
            if hi - lo + 1 <= 1:
                self.playing = False
            else:
                self.next_frame_at = now + 1.0 / document.fps
        return self.playing

    def tick(self, document: Document, now: float) -> bool:
        """Advance a frame if one is due; return whether the frame changed."""
        if document.frames and document.active_frame >= len(document.frames):
            document.active_frame = len(document.frames) - 1
        if not self.playing:
            return False
        lo, hi = playback_range(document)
        if hi - lo + 1 <= 1:
            self.playing = False
            return False
        if now < self.next_frame_at:
            return False
        next_frame(document)
        self.next_frame_at = now + 1.0 / document.fps
        return True