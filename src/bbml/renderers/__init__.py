#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning markup trees into terminal documents."""

from bbml.renderers.lists import ListLabeler
from bbml.renderers.tables import TableLayout
from bbml.renderers.terminal import TerminalRenderer

__all__ = ["ListLabeler", "TableLayout", "TerminalRenderer"]
