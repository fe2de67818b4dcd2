#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/utils/text.py
"""Text normalisation and character-exact line wrapping."""

from __future__ import annotations

import re

from bbml.constants import HTML_WHITESPACE
from bbml.document import Line

_WHITESPACE_RUN_RE = re.compile(f"[{re.escape(HTML_WHITESPACE)}]+")
_LINE_ENDING_RE = re.compile(r"\r\n?")


def collapse_whitespace(text: str) -> str:
    """Trim text and collapse each internal whitespace run to its first character.

    Keeping the first character (rather than always a space) lets a newline
    that starts a whitespace run survive as a line break. Non-breaking spaces
    are content and are left alone.

    Parameters
    ----------
    text : str
        Raw text node content

    Returns
    -------
    str
        Normalised text

    Examples
    --------
        >>> collapse_whitespace("  a   b \\n c ")
        'a b c'
        >>> collapse_whitespace("a\\n  b")
        'a\\nb'

    """
    text = _LINE_ENDING_RE.sub("\n", text).strip(HTML_WHITESPACE)
    return _WHITESPACE_RUN_RE.sub(lambda match: match.group(0)[0], text)


def chop_after(line: Line, width: int) -> Line:
    """Cut ``line`` down to ``width`` characters and return the overflow.

    The run that crosses the boundary is split at the exact character offset.
    Its first half stays in ``line``; its remainder and every following run
    move to the returned line. A line that already fits is left untouched and
    an empty line is returned.

    Parameters
    ----------
    line : Line
        Line to shorten (modified in place)
    width : int
        Maximum width of ``line`` after the call

    Returns
    -------
    Line
        The overflow

    """
    cumulative = 0
    for index, run in enumerate(line.runs):
        if cumulative + run.width > width:
            keep, rest = run.split_at(width - cumulative)
            overflow = Line([rest, *line.runs[index + 1 :]])
            line.runs[index:] = [keep]
            return overflow
        cumulative += run.width
    return Line()


def wrap_lines_to_width(lines: list[Line], width: int) -> None:
    """Wrap every line in ``lines`` so none is wider than ``width``.

    Over-wide lines are chopped with :func:`chop_after` and the overflow is
    inserted right after them, then wrapped in turn. Breaks fall at exact
    character positions; no attempt is made to find word boundaries.

    Parameters
    ----------
    lines : list of Line
        Lines to wrap (modified in place)
    width : int
        Target width, at least 1

    Raises
    ------
    ValueError
        If ``width`` is less than 1

    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")

    index = 0
    while index < len(lines):
        if lines[index].width > width:
            lines.insert(index + 1, chop_after(lines[index], width))
        index += 1
