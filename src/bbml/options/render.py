#  Copyright (c) 2025 Tom Villani, Ph.D.
# bbml/options/render.py
"""Configuration options for terminal rendering.

This module defines options for parsing BbML markup and laying it out as
styled terminal text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bbml.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_MAX_DEPTH,
    DEFAULT_TARGET_WIDTH,
    MIN_TARGET_WIDTH,
    SUPPORTED_HTML_PARSERS,
    HtmlParserType,
)
from bbml.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration options for rendering markup to terminal text.

    Parameters
    ----------
    target_width : int, default 70
        Column budget tables must fit within. A table wider than this has its
        widest column shrunk and re-wrapped when that single column can absorb
        the overflow.
    max_depth : int, default 100
        Maximum markup nesting depth. Deeper input raises
        :class:`~bbml.exceptions.RecursionLimitExceeded`.
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup tree builder used to parse markup strings.

    Examples
    --------
        >>> from bbml import render
        >>> from bbml.options import RenderOptions
        >>> doc, links = render("<p>Hello</p>", RenderOptions(target_width=40))

    """

    target_width: int = field(
        default=DEFAULT_TARGET_WIDTH,
        metadata={"help": "Column budget tables must fit within", "type": int, "importance": "core"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum markup nesting depth", "type": int, "importance": "advanced"},
    )
    html_parser: HtmlParserType = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup parser backend",
            "choices": list(SUPPORTED_HTML_PARSERS),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and parser choice.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.target_width < MIN_TARGET_WIDTH:
            raise ValueError(f"target_width must be at least {MIN_TARGET_WIDTH}, got {self.target_width}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.html_parser not in SUPPORTED_HTML_PARSERS:
            raise ValueError(
                f"html_parser must be one of {', '.join(SUPPORTED_HTML_PARSERS)}, got {self.html_parser!r}"
            )
