#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the bbml library.

Constants are organized by category:
1. Type Definitions
2. Rendering Defaults
3. List Layout
4. Table Borders
5. CLI Configuration
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParserType = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Rendering Defaults
# =============================================================================

# Column budget tables must fit within
DEFAULT_TARGET_WIDTH = 70

# Deepest markup nesting accepted before RecursionLimitExceeded is raised.
# Each level costs a few interpreter frames, so keep well below sys.getrecursionlimit().
DEFAULT_MAX_DEPTH = 100

DEFAULT_HTML_PARSER: HtmlParserType = "html.parser"

SUPPORTED_HTML_PARSERS: tuple[HtmlParserType, ...] = ("html.parser", "lxml", "html5lib")

# Narrowest table that can still hold a one-character column and its borders
MIN_TARGET_WIDTH = 3

# HTML whitespace characters (non-breaking spaces are content, not whitespace)
HTML_WHITESPACE = " \t\n\r\f\v"

# =============================================================================
# List Layout
# =============================================================================

BULLET_LABEL = "  - "
NUMBERED_LABEL_FORMAT = "{number}. "

# Continuation lines of a list item are indented by at least this much
LIST_CONTINUATION_INDENT = 4

# Extra indent for a list nested directly inside another list
NESTED_LIST_INDENT = "  "

# =============================================================================
# Table Borders
# =============================================================================

TABLE_HORIZONTAL = "─"
TABLE_VERTICAL = "│"
TABLE_TOP_LEFT = "┌"
TABLE_TOP_INTERSECT = "┬"
TABLE_TOP_RIGHT = "┐"
TABLE_MID_LEFT = "├"
TABLE_MID_INTERSECT = "┼"
TABLE_MID_RIGHT = "┤"
TABLE_BOTTOM_LEFT = "└"
TABLE_BOTTOM_INTERSECT = "┴"
TABLE_BOTTOM_RIGHT = "┘"

# =============================================================================
# CLI Configuration
# =============================================================================

CONFIG_FILENAMES = [".bbml.toml", ".bbml.yaml", ".bbml.yml", ".bbml.json"]
PYPROJECT_TOOL_SECTION = "bbml"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2
