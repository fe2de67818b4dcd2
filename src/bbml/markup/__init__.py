#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markup node tree and the parser adapter that builds it."""

from bbml.markup.nodes import Comment, Element, MarkupNode, Tag, Text
from bbml.markup.parser import parse_markup

__all__ = ["Comment", "Element", "MarkupNode", "Tag", "Text", "parse_markup"]
