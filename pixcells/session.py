"""Document-level session logic: titles, file opening and the quit confirmation queue."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from . import pixc
from . import png
from .document import Document

log = logging.getLogger(__name__)

APP_NAME = "pixcells"
UNTITLED = "Untitled"
_PIXC_SUFFIXES = (".pixc", ".PIXC")


def display_name(path: str | os.PathLike[str]) -> str:
    """The file name part of a path, split on either slash, or "Untitled" if empty."""
    text = os.fspath(path)
    if not text:
        return UNTITLED
    cut = max(text.rfind("/"), text.rfind("\\"))
    return text[cut + 1:] if cut >= 0 else text


def window_title(path: str | os.PathLike[str], unsaved: bool) -> str:
    """The main window title, starred when the document has unsaved changes."""
    marker = "*" if unsaved else ""
    return f"{marker}{display_name(path)} \u2014 {APP_NAME}"


def is_pixc_path(path: str | os.PathLike[str]) -> bool:
    """Whether a path names a project file that can be saved to directly."""
    text = os.fspath(path)
    return len(text) >= 5 and text.endswith(_PIXC_SUFFIXES)


def sniff_pixc(path: str | os.PathLike[str]) -> bool:
    """Whether a file starts with the project-file magic; unreadable files do not."""
    try:
        with open(path, "rb") as f:
            head = f.read(4)
    except OSError:
        return False
    return head == pixc.MAGIC


def open_file(path: str | os.PathLike[str]) -> Document:
    """Open a project file, or any other image as a one-frame, one-layer document.

    The kind of file is decided by its content, not its name.
    """
    name = os.fspath(path)
    if sniff_pixc(name):
        document = pixc.load(name)
    else:
        canvas = png.load(name)
        document = Document(width=canvas.width, height=canvas.height)
        document.frames[0].layers[0].canvas = canvas
        document.rebuild_composite()
    document.project_path = name
    document.unsaved_changes = False
    return document


@dataclass
class QuitQueue:
    """Indices of documents with unsaved changes still to be confirmed before quitting."""

    pending: list[int] = field(default_factory=list)

    def start(self, dirty_flags) -> bool:
        """Queue every dirty document; return True when nothing needs confirming."""
        self.pending = [index for index, dirty in enumerate(dirty_flags) if dirty]
        return not self.pending

    def current(self) -> int | None:
        """The document awaiting confirmation, or None when the queue is empty."""
        return self.pending[0] if self.pending else None

    def advance(self, closed_index: int) -> bool:
        """Drop the confirmed document, whose tab closes; return True when done.

        Later indices shift down by one to follow the closed tab.
        """
        if not self.pending:
            raise IndexError("no document is awaiting confirmation")
        del self.pending[0]
        self.pending = [
            index - 1 if index > closed_index else index for index in self.pending
        ]
        return not self.pending

    def cancel(self) -> None:
        """Abandon quitting."""
        self.pending = []