#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/canvas.py
"""Line-oriented output buffer written by the node renderer.

A :class:`Canvas` is handed to exactly one recursive render call at a time.
Lists and tables render each item or cell into a private sub-canvas obtained
from :meth:`Canvas.derive_subcanvas`, measure or reshape it, and splice its
lines back into the parent with :meth:`Canvas.extend`.

"""

from __future__ import annotations

from typing import Iterable

from bbml.document import Document, Line, StyledRun, lines_width
from bbml.links import LinkRegistry


class Canvas:
    """In-progress lines of styled runs plus the shared link registry.

    Parameters
    ----------
    links : LinkRegistry, optional
        Registry to record links in. A new one is created when omitted.

    """

    def __init__(self, links: LinkRegistry | None = None):
        self.lines: list[Line] = []
        self.links = links if links is not None else LinkRegistry()

    def newline(self) -> None:
        """Unconditionally start a new, empty current line."""
        self.lines.append(Line())

    def ensure_blank_separator(self) -> None:
        """Start a new line unless the current line is already empty."""
        if not self.is_current_line_empty():
            self.newline()

    def append_run(self, run: StyledRun) -> None:
        """Append a run to the current line, creating the first line if needed."""
        if not self.lines:
            self.newline()
        self.lines[-1].append(run)

    def reserve_lines(self, count: int, first_run: StyledRun | None = None) -> list[Line]:
        """Append ``count`` new lines and return them for direct filling.

        Parameters
        ----------
        count : int
            Number of lines to append
        first_run : StyledRun, optional
            Run every reserved line starts with

        """
        reserved = [Line([first_run] if first_run is not None else []) for _ in range(count)]
        self.lines.extend(reserved)
        return reserved

    def extend(self, lines: Iterable[Line]) -> None:
        """Splice finished lines (from a sub-canvas) onto the end of this canvas."""
        self.lines.extend(lines)

    def is_current_line_empty(self) -> bool:
        return not self.lines or self.lines[-1].is_empty()

    def is_whole_empty_or_whitespace(self) -> bool:
        """Return True when no line holds visible text."""
        return all(line.is_blank() for line in self.lines)

    def register_link(self, href: str) -> int:
        return self.links.register(href)

    def derive_subcanvas(self) -> Canvas:
        """Create an empty canvas sharing this canvas's link registry."""
        return Canvas(self.links)

    @property
    def width(self) -> int:
        return lines_width(self.lines)

    @property
    def height(self) -> int:
        return len(self.lines)

    def to_document(self) -> Document:
        """Finish the canvas into a cleaned-up :class:`Document`."""
        return Document(self.lines).cleanup()
