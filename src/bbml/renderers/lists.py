#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/renderers/lists.py
"""List item layout.

Each child of a ``<ul>``/``<ol>`` is rendered into its own sub-canvas by the
node renderer; the helpers here turn those lines into list output: a label on
the first line and a continuation indent on the rest, or, for a list nested
directly inside another list, a plain two-space indent.

"""

from __future__ import annotations

from bbml.constants import BULLET_LABEL, LIST_CONTINUATION_INDENT, NESTED_LIST_INDENT, NUMBERED_LABEL_FORMAT
from bbml.document import Line, StyledRun
from bbml.markup.nodes import Tag


class ListLabeler:
    """Produce item labels for one list.

    Bullet lists repeat ``"  - "``; numbered lists count up from 1. The
    counter only advances when a label is actually taken, so suppressed
    (empty) items do not leave gaps in the numbering.

    Parameters
    ----------
    ordered : bool
        Whether to number the items

    """

    def __init__(self, ordered: bool):
        self.ordered = ordered
        self.next_number = 1

    @classmethod
    def for_tag(cls, tag: Tag) -> ListLabeler:
        return cls(ordered=tag is Tag.OL)

    def next_label(self) -> str:
        if not self.ordered:
            return BULLET_LABEL
        label = NUMBERED_LABEL_FORMAT.format(number=self.next_number)
        self.next_number += 1
        return label


def label_item(lines: list[Line], label: str) -> None:
    """Put ``label`` before the first line and indent the remaining lines.

    The continuation indent is four columns, or the label width if that is
    wider (``"10. "`` and beyond), so wrapped item text lines up under the
    item rather than under the label.
    """
    indent = " " * max(LIST_CONTINUATION_INDENT, len(label))
    lines[0].prepend(StyledRun(label))
    for line in lines[1:]:
        line.prepend(StyledRun(indent))


def indent_nested_list(lines: list[Line]) -> list[Line]:
    """Strip a nested list's own padding and indent what is left.

    A list pads itself with blank lines; when it appears directly inside
    another list that padding is removed (one leading blank line and the
    trailing blank lines) before every remaining line gets a two-space indent.
    """
    if lines and lines[0].is_empty():
        lines = lines[1:]
    end = len(lines)
    while end and lines[end - 1].is_empty():
        end -= 1
    lines = lines[:end]

    for line in lines:
        line.prepend(StyledRun(NESTED_LIST_INDENT))
    return lines
