#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for bbml."""

from bbml.options.base import CloneFrozenMixin
from bbml.options.render import RenderOptions

__all__ = ["CloneFrozenMixin", "RenderOptions"]
