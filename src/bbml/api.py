#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/api.py
"""Public entry points for rendering BbML markup."""

from __future__ import annotations

from typing import Iterable

from rich.text import Text as RichText

from bbml.document import Document
from bbml.markup.nodes import MarkupNode
from bbml.markup.parser import parse_markup
from bbml.options.render import RenderOptions
from bbml.renderers.terminal import TerminalRenderer


def render(markup: str, options: RenderOptions | None = None) -> tuple[Document, list[str]]:
    """Render a BbML markup string to a styled terminal document.

    Parameters
    ----------
    markup : str
        BbML (HTML subset) source
    options : RenderOptions or None, default = None
        Rendering options

    Returns
    -------
    tuple of (Document, list of str)
        The rendered document and the link targets, where link ``n`` is the
        one marked ``[n]`` in the document

    Raises
    ------
    ParsingError
        If the configured parser backend is unavailable
    RecursionLimitExceeded
        If the markup is nested deeper than ``options.max_depth``

    Examples
    --------
        >>> doc, links = render('<a href="google.com">a link</a>')
        >>> doc.to_plain_text()
        'a link[0]'
        >>> links
        ['google.com']

    """
    options = options or RenderOptions()
    nodes = parse_markup(markup, html_parser=options.html_parser, max_depth=options.max_depth)
    return render_nodes(nodes, options)


def render_nodes(
    nodes: Iterable[MarkupNode], options: RenderOptions | None = None
) -> tuple[Document, list[str]]:
    """Render an already-built markup tree (see :mod:`bbml.markup.nodes`)."""
    return TerminalRenderer(options).render(nodes)


def render_to_rich(markup: str, options: RenderOptions | None = None) -> tuple[RichText, list[str]]:
    """Render markup straight to a :class:`rich.text.Text` for printing."""
    document, links = render(markup, options)
    return document.to_rich_text(), links
