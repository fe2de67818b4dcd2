#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/markup/parser.py
"""BbML markup string to node tree.

Parsing is delegated to BeautifulSoup; this module only adapts its output to
the read-only :mod:`bbml.markup.nodes` tree. Entities are decoded by the
parser, so :class:`~bbml.markup.nodes.Text` content is final text.

"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag as SoupTag
from bs4.exceptions import FeatureNotFound

from bbml.constants import DEFAULT_HTML_PARSER, DEFAULT_MAX_DEPTH
from bbml.exceptions import ParsingError, RecursionLimitExceeded
from bbml.markup.nodes import Comment, Element, MarkupNode, Tag, Text

logger = logging.getLogger(__name__)


def parse_markup(
    markup: str,
    html_parser: str = DEFAULT_HTML_PARSER,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[MarkupNode]:
    """Parse a markup string into top-level markup nodes.

    Parameters
    ----------
    markup : str
        BbML (HTML subset) source
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder to use
    max_depth : int, default 100
        Maximum element nesting depth

    Returns
    -------
    list of MarkupNode
        Top-level nodes in document order. When the parser wraps the input in
        ``<html><body>`` (lxml, html5lib) the children of ``<body>`` are
        returned instead.

    Raises
    ------
    ParsingError
        If the requested parser backend is not installed
    RecursionLimitExceeded
        If elements are nested deeper than ``max_depth``, or so deeply that
        the interpreter stack runs out first

    """
    try:
        soup = BeautifulSoup(markup, html_parser)
    except FeatureNotFound as e:
        raise ParsingError(
            f"HTML parser backend '{html_parser}' is not available: {e}",
            parsing_stage="parser_setup",
            original_error=e,
        ) from e

    body = soup.find("body")
    root = body if isinstance(body, SoupTag) else soup

    try:
        nodes = [_convert(child, 1, max_depth) for child in root.children]
    except RecursionError as e:
        raise RecursionLimitExceeded(None, max_depth, rendering_stage="parse", original_error=e) from e
    logger.debug("Parsed %d top-level markup nodes", len(nodes))
    return nodes


def _convert(node: Any, depth: int, max_depth: int) -> MarkupNode:
    """Convert one BeautifulSoup node and its subtree."""
    if isinstance(node, PreformattedString):
        # Comments, CDATA, doctypes, declarations and processing instructions
        return Comment(str(node))

    if isinstance(node, NavigableString):
        return Text(str(node))

    if depth > max_depth:
        raise RecursionLimitExceeded(depth, max_depth, rendering_stage="parse")

    name = str(node.name).lower()
    return Element(
        tag=Tag.from_name(name),
        name=name,
        attributes=_attributes(node.attrs),
        children=tuple(_convert(child, depth + 1, max_depth) for child in node.children),
    )


def _attributes(attrs: dict[str, Any]) -> dict[str, str]:
    """Flatten BeautifulSoup attributes; multi-valued ones are joined with spaces."""
    flattened = {}
    for key, value in attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        flattened[key.lower()] = "" if value is None else str(value)
    return flattened
