#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/markup/nodes.py
"""Markup node tree consumed by the renderer.

The tree is read-only once built. Tag names are mapped onto the closed
:class:`Tag` enum of recognised BbML elements; anything else becomes
``Tag.UNRECOGNIZED`` with the original name kept on the element.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Union


class Tag(Enum):
    """Recognised BbML element names."""

    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    P = "p"
    DIV = "div"
    SPAN = "span"
    STRONG = "strong"
    EM = "em"
    A = "a"
    UL = "ul"
    OL = "ol"
    LI = "li"
    TABLE = "table"
    THEAD = "thead"
    TBODY = "tbody"
    TR = "tr"
    TD = "td"
    TH = "th"
    BR = "br"
    UNRECOGNIZED = "#unrecognized"

    @classmethod
    def from_name(cls, name: str) -> Tag:
        """Map a (case-insensitive) element name onto a tag."""
        try:
            return cls(name.lower())
        except ValueError:
            return cls.UNRECOGNIZED


HEADER_TAGS = frozenset({Tag.H4, Tag.H5, Tag.H6})
BLOCK_TAGS = HEADER_TAGS | {Tag.P, Tag.DIV}
INLINE_TAGS = frozenset({Tag.SPAN, Tag.STRONG, Tag.EM, Tag.LI, Tag.TD, Tag.TH})
LIST_TAGS = frozenset({Tag.UL, Tag.OL})
TABLE_GROUP_TAGS = frozenset({Tag.THEAD, Tag.TBODY})

HEADER_LEVELS = {Tag.H4: 4, Tag.H5: 5, Tag.H6: 6}


@dataclass(frozen=True)
class Text:
    """Raw text content, with entities already decoded."""

    content: str


@dataclass(frozen=True)
class Comment:
    """Markup that produces no output (comments, doctypes, CDATA, ...)."""

    content: str = ""


@dataclass(frozen=True)
class Element:
    """A markup element.

    Parameters
    ----------
    tag : Tag
        Recognised tag, or ``Tag.UNRECOGNIZED``
    name : str
        Element name as it appeared in the markup
    attributes : Mapping[str, str]
        Attribute values by name
    children : tuple of MarkupNode
        Child nodes in document order

    """

    tag: Tag
    name: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[MarkupNode, ...] = ()

    @classmethod
    def create(cls, name: str, *children: MarkupNode, **attributes: str) -> Element:
        """Build an element from its name, children and attributes.

            >>> Element.create("a", Text("home"), href="/")
        """
        return cls(Tag.from_name(name), name.lower(), dict(attributes), tuple(children))

    def get(self, attribute: str) -> str | None:
        return self.attributes.get(attribute)

    @property
    def is_list(self) -> bool:
        return self.tag in LIST_TAGS


MarkupNode = Union[Element, Text, Comment]


__all__ = [
    "Tag",
    "Element",
    "Text",
    "Comment",
    "MarkupNode",
    "HEADER_TAGS",
    "BLOCK_TAGS",
    "INLINE_TAGS",
    "LIST_TAGS",
    "TABLE_GROUP_TAGS",
    "HEADER_LEVELS",
]
