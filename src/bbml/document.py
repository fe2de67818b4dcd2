#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/document.py
"""Rendered document model.

A :class:`Document` is an ordered sequence of :class:`Line` objects, each an
ordered sequence of :class:`StyledRun` values painted left to right with no
implicit gap. Widths count characters; every character is assumed to occupy
one terminal column.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from rich.text import Text as RichText

from bbml.style import DEFAULT_STYLE, Style


@dataclass(frozen=True)
class StyledRun:
    """A contiguous span of text sharing one style.

    Parameters
    ----------
    text : str
        Run content
    style : Style, default Style()
        Attributes applied to the whole run

    """

    text: str
    style: Style = DEFAULT_STYLE

    @property
    def width(self) -> int:
        return len(self.text)

    def split_at(self, offset: int) -> tuple[StyledRun, StyledRun]:
        """Split the run at a character offset; both halves keep the style."""
        return StyledRun(self.text[:offset], self.style), StyledRun(self.text[offset:], self.style)


@dataclass
class Line:
    """One terminal line made of styled runs."""

    runs: list[StyledRun] = field(default_factory=list)

    @property
    def width(self) -> int:
        return sum(run.width for run in self.runs)

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)

    def is_empty(self) -> bool:
        """Return True when the line has no runs at all."""
        return not self.runs

    def is_blank(self) -> bool:
        """Return True when every run (if any) is empty or whitespace."""
        return all(not run.text.strip() for run in self.runs)

    def append(self, run: StyledRun) -> None:
        self.runs.append(run)

    def prepend(self, run: StyledRun) -> None:
        self.runs.insert(0, run)

    def __iter__(self) -> Iterator[StyledRun]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)


def lines_width(lines: Iterable[Line]) -> int:
    """Return the width of the widest line, 0 for no lines."""
    return max((line.width for line in lines), default=0)


def cleanup_lines(lines: list[Line]) -> None:
    """Normalise a finished sequence of lines in place.

    Drops every run with empty text, then removes the first line if it has
    become empty and the last line if it has become empty. Each end is trimmed
    at most once, so a deliberate trailing blank line (such as the padding a
    list leaves after itself) is only consumed if it is the sole blank.

    Parameters
    ----------
    lines : list of Line
        Lines to clean up

    """
    for line in lines:
        line.runs = [run for run in line.runs if run.text]

    if lines and lines[0].is_empty():
        del lines[0]

    if lines and lines[-1].is_empty():
        del lines[-1]


@dataclass
class Document:
    """A finished, renderable terminal document.

    Parameters
    ----------
    lines : list of Line
        Ordered document lines
    cleaned : bool, default False
        Whether :meth:`cleanup` has already been applied

    """

    lines: list[Line] = field(default_factory=list)
    cleaned: bool = False

    @property
    def width(self) -> int:
        return lines_width(self.lines)

    @property
    def height(self) -> int:
        return len(self.lines)

    def cleanup(self) -> Document:
        """Apply :func:`cleanup_lines` once; later calls leave the document unchanged.

        Returns
        -------
        Document
            This document, for chaining

        """
        if not self.cleaned:
            cleanup_lines(self.lines)
            self.cleaned = True
        return self

    def to_plain_text(self) -> str:
        """Return the document text without styling, lines joined by newlines."""
        return "\n".join(line.text for line in self.lines)

    def to_rich_text(self) -> RichText:
        """Convert to a :class:`rich.text.Text` for painting in a terminal."""
        text = RichText(no_wrap=True)
        for index, line in enumerate(self.lines):
            if index:
                text.append("\n")
            for run in line.runs:
                text.append(run.text, style=run.style.to_rich())
        return text

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


__all__ = ["StyledRun", "Line", "Document", "cleanup_lines", "lines_width"]
