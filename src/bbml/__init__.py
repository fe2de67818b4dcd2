"""bbml - render BbML markup as styled terminal text.

BbML is the constrained HTML dialect used for Blackboard Learn content
(headers, paragraphs, emphasis, links, lists, tables and line breaks). bbml
lays it out for a fixed-width terminal: the result is a :class:`Document` of
lines made of styled runs, plus the list of link targets referenced from the
text by ``[n]`` markers.

Examples
--------
    >>> from bbml import render
    >>> doc, links = render("<ol><li>one</li><li><a href='/two'>two</a></li></ol>")
    >>> print(doc.to_plain_text())
    1. one
    2. two[0]
    <BLANKLINE>
    >>> links
    ['/two']

Painting with rich:

    >>> from rich.console import Console
    >>> Console().print(doc.to_rich_text())

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from bbml.api import render, render_nodes, render_to_rich
from bbml.document import Document, Line, StyledRun
from bbml.exceptions import (
    BbmlError,
    LinkNotFoundError,
    ParsingError,
    RecursionLimitExceeded,
    RenderingError,
    ValidationError,
)
from bbml.links import LinkRegistry
from bbml.options import RenderOptions
from bbml.style import Color, Style

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "render",
    "render_nodes",
    "render_to_rich",
    "Document",
    "Line",
    "StyledRun",
    "Style",
    "Color",
    "LinkRegistry",
    "RenderOptions",
    "BbmlError",
    "ValidationError",
    "LinkNotFoundError",
    "ParsingError",
    "RenderingError",
    "RecursionLimitExceeded",
]
