#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/renderers/terminal.py
"""Markup tree to styled terminal text.

This module provides the TerminalRenderer class, which walks a BbML markup
tree and writes styled runs into a :class:`~bbml.canvas.Canvas`. Block
elements force their own lines, inline elements only change the style, and
lists and tables are rendered item by item (or cell by cell) into private
sub-canvases that are measured and reshaped before being spliced back in.

Rendering never fails on unknown markup: unrecognised tags are logged and
their children are rendered in the error style so they stay visibly flagged.

"""

from __future__ import annotations

import logging
from typing import Iterable

from bbml.canvas import Canvas
from bbml.document import Document, StyledRun, cleanup_lines
from bbml.exceptions import InvalidOptionsError, RecursionLimitExceeded
from bbml.markup.nodes import (
    BLOCK_TAGS,
    HEADER_LEVELS,
    INLINE_TAGS,
    LIST_TAGS,
    TABLE_GROUP_TAGS,
    Comment,
    Element,
    MarkupNode,
    Tag,
    Text,
)
from bbml.options.render import RenderOptions
from bbml.renderers.lists import ListLabeler, indent_nested_list, label_item
from bbml.renderers.tables import Row, TableLayout
from bbml.style import DEFAULT_STYLE, Style
from bbml.utils.text import collapse_whitespace

logger = logging.getLogger(__name__)


class TerminalRenderer:
    """Render markup nodes to a styled terminal document.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Rendering options

    Examples
    --------
        >>> from bbml.markup import parse_markup
        >>> renderer = TerminalRenderer()
        >>> doc, links = renderer.render(parse_markup('<a href="/x">x</a>'))
        >>> doc.to_plain_text(), links
        ('x[0]', ['/x'])

    """

    _ELEMENT_HANDLERS = {
        Tag.BR: "_render_line_break",
        Tag.A: "_render_anchor",
        Tag.TABLE: "_render_table",
        **dict.fromkeys(BLOCK_TAGS, "_render_block"),
        **dict.fromkeys(INLINE_TAGS, "_render_inline"),
        **dict.fromkeys(LIST_TAGS, "_render_list"),
        # Table sections and rows only have meaning inside a table
        **dict.fromkeys(TABLE_GROUP_TAGS | {Tag.TR}, "_render_unrecognized"),
        Tag.UNRECOGNIZED: "_render_unrecognized",
    }

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer with options."""
        if options is not None and not isinstance(options, RenderOptions):
            raise InvalidOptionsError("TerminalRenderer", RenderOptions, type(options))
        self.options: RenderOptions = options or RenderOptions()

    def render(self, nodes: Iterable[MarkupNode]) -> tuple[Document, list[str]]:
        """Render top-level nodes into a cleaned-up document.

        Parameters
        ----------
        nodes : iterable of MarkupNode
            Top-level markup nodes in document order

        Returns
        -------
        tuple of (Document, list of str)
            The document and the link targets in the order their ``[n]``
            markers appear

        Raises
        ------
        RecursionLimitExceeded
            If the tree is nested deeper than ``options.max_depth``, or so deeply
            that the interpreter stack runs out first

        """
        canvas = Canvas()
        try:
            for node in nodes:
                self.render_node(canvas, node, DEFAULT_STYLE)
        except RecursionError as e:
            raise RecursionLimitExceeded(
                None, self.options.max_depth, rendering_stage="render", original_error=e
            ) from e
        return canvas.to_document(), canvas.links.to_list()

    def render_node(self, canvas: Canvas, node: MarkupNode, style: Style, depth: int = 1) -> None:
        """Render one node (and its subtree) into ``canvas``.

        Parameters
        ----------
        canvas : Canvas
            Canvas to write into; nothing else writes to it during the call
        node : MarkupNode
            Node to render
        style : Style
            Style inherited from the parent
        depth : int, default 1
            Nesting depth of ``node``; top-level nodes are at depth 1

        """
        if isinstance(node, Comment):
            return
        if isinstance(node, Text):
            self._render_text(canvas, node, style)
            return

        if depth > self.options.max_depth:
            raise RecursionLimitExceeded(depth, self.options.max_depth, rendering_stage="render")

        handler_name = self._ELEMENT_HANDLERS[node.tag]
        getattr(self, handler_name)(canvas, node, style, depth)

    def _render_children(self, canvas: Canvas, element: Element, style: Style, depth: int) -> None:
        for child in element.children:
            self.render_node(canvas, child, style, depth + 1)

    def _render_text(self, canvas: Canvas, node: Text, style: Style) -> None:
        text = collapse_whitespace(node.content)
        for index, segment in enumerate(text.split("\n")):
            if index:
                canvas.newline()
            canvas.append_run(StyledRun(segment, style))

    def _render_line_break(self, canvas: Canvas, element: Element, style: Style, depth: int) -> None:
        canvas.newline()

    def _render_block(self, canvas: Canvas, element: Element, style: Style, depth: int) -> None:
        level = HEADER_LEVELS.get(element.tag)
        block_style = style.header(level) if level is not None else style

        canvas.ensure_blank_separator()
        self._render_children(canvas, element, block_style, depth)
        canvas.ensure_blank_separator()

    def _render_inline(self, canvas: Canvas, element: Element, style: Style, depth: int) -> None:
        if element.tag is Tag.STRONG:
            style = style.add_bold()
        elif element.tag is Tag.EM:
            style = style.add_italic()
        self._render_children(canvas, element, style, depth)

    def _render_anchor(self, canvas: Canvas, element: Element, style: Style, depth: int) -> None:
        link_style = style.link()
        self._render_children(canvas, element, link_style, depth)

        href = element.get("href")
        if href is None:
            return
        index = canvas.register_link(href)
        canvas.append_run(StyledRun(f"[{index}]", link_style))

    def _render_unrecognized(self, canvas: Canvas, element: Element, style: Style, depth: int) -> None:
        logger.warning("Unknown or misplaced tag <%s>; rendering its content in the error style", element.name)
        self._render_children(canvas, element, style.error(), depth)

    def _render_list(self, canvas: Canvas, element: Element, style: Style, depth: int) -> None:
        labeler = ListLabeler.for_tag(element.tag)

        for child in element.children:
            subcanvas = canvas.derive_subcanvas()
            self.render_node(subcanvas, child, style, depth + 1)

            if subcanvas.is_whole_empty_or_whitespace():
                continue

            if isinstance(child, Element) and child.is_list:
                lines = indent_nested_list(subcanvas.lines)
            else:
                lines = subcanvas.lines
                label_item(lines, labeler.next_label())

            canvas.extend(lines)

        canvas.ensure_blank_separator()
        canvas.newline()

    def _render_table(self, canvas: Canvas, element: Element, style: Style, depth: int) -> None:
        rows = self._collect_table_rows(canvas, element, depth)
        logger.debug("Collected table with %d rows", len(rows))
        TableLayout(rows, self.options.target_width).emit(canvas)

    def _collect_table_rows(self, canvas: Canvas, element: Element, depth: int) -> list[Row]:
        """Render every cell of a table (or table section) into its own lines.

        ``thead`` and ``tbody`` are descended into transparently; any other
        element child is treated as a row. Cells are rendered with the default
        style, normalised with :func:`~bbml.document.cleanup_lines`, and
        dropped when they come out empty.
        """
        rows: list[Row] = []
        for child in element.children:
            if not isinstance(child, Element):
                continue
            if depth + 1 > self.options.max_depth:
                raise RecursionLimitExceeded(depth + 1, self.options.max_depth, rendering_stage="render")

            if child.tag in TABLE_GROUP_TAGS:
                rows.extend(self._collect_table_rows(canvas, child, depth + 1))
                continue

            cells: Row = []
            for cell in child.children:
                subcanvas = canvas.derive_subcanvas()
                self.render_node(subcanvas, cell, DEFAULT_STYLE, depth + 2)
                if subcanvas.width == 0 or subcanvas.height == 0:
                    continue
                cleanup_lines(subcanvas.lines)
                cells.append(subcanvas.lines)
            if cells:
                rows.append(cells)
        return rows

