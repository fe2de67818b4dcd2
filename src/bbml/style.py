#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/style.py
"""Text styles carried through the render.

A :class:`Style` is an immutable value. Tag handlers derive a modified copy
and hand it to their children, so a style change never leaks into a sibling
or an ancestor.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.style import Style as RichStyle

from bbml.options.base import CloneFrozenMixin


class Color(str, Enum):
    """Terminal colours used by the renderer.

    Values are colour names understood by :mod:`rich`; ``DEFAULT`` leaves the
    terminal's own colour in place.
    """

    DEFAULT = "default"
    WHITE = "white"
    BLUE = "blue"
    RED = "red"


# Distinguished colours
LINK_COLOR = Color.BLUE
ERROR_COLOR = Color.RED
HEADER_UNDERLINE_COLOR = Color.WHITE


@dataclass(frozen=True)
class Style(CloneFrozenMixin):
    """Active text attributes for a run.

    Parameters
    ----------
    bold : bool, default False
    italic : bool, default False
    underline : bool, default False
    foreground : Color, default Color.DEFAULT
    underline_color : Color, default Color.DEFAULT

    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    foreground: Color = Color.DEFAULT
    underline_color: Color = Color.DEFAULT

    def add_bold(self) -> Style:
        return self.create_updated(bold=True)

    def add_italic(self) -> Style:
        return self.create_updated(italic=True)

    def header(self, level: int) -> Style:
        """Derive the style for a header of the given level (4-6)."""
        if level == 4:
            return self.create_updated(bold=True, underline=True, underline_color=HEADER_UNDERLINE_COLOR)
        return self.add_bold()

    def link(self) -> Style:
        return self.create_updated(foreground=LINK_COLOR)

    def error(self) -> Style:
        """Derive the style used to flag unrecognised markup."""
        return self.create_updated(foreground=ERROR_COLOR, underline_color=ERROR_COLOR)

    def to_rich(self) -> RichStyle:
        """Convert to a :class:`rich.style.Style`.

        Rich has no notion of a separate underline colour, so only the
        foreground colour is carried over.
        """
        return RichStyle(
            bold=self.bold or None,
            italic=self.italic or None,
            underline=self.underline or None,
            color=None if self.foreground is Color.DEFAULT else self.foreground.value,
        )


DEFAULT_STYLE = Style()
