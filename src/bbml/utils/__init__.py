#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for bbml."""

from bbml.utils.text import chop_after, collapse_whitespace, wrap_lines_to_width

__all__ = ["chop_after", "collapse_whitespace", "wrap_lines_to_width"]
