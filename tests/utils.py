"""Test utilities for the bbml test suite."""

from bbml import Document, render
from bbml.document import Line, StyledRun
from bbml.style import Style


def run_texts(document: Document) -> list[list[str]]:
    """Return the run texts of every line, for comparing layout exactly."""
    return [[run.text for run in line] for line in document]


def render_texts(markup: str, **kwargs) -> list[list[str]]:
    """Render markup and return its run texts."""
    document, _ = render(markup, **kwargs)
    return run_texts(document)


def make_line(*texts: str, style: Style | None = None) -> Line:
    """Build a line with one run per text."""
    if style is None:
        return Line([StyledRun(text) for text in texts])
    return Line([StyledRun(text, style) for text in texts])


def line_texts(lines: list[Line]) -> list[str]:
    return [line.text for line in lines]
