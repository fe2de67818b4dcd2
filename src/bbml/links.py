#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/links.py
"""Registry of link targets referenced from a rendered document.

Indices are assigned in registration order and printed after the link text
as ``[n]``. One registry is shared by a root canvas and all of its
sub-canvases so indices stay monotonic across list items and table cells.

"""

from __future__ import annotations

import logging
from typing import Iterator

from bbml.exceptions import LinkNotFoundError

logger = logging.getLogger(__name__)


class LinkRegistry:
    """Append-only, ordered list of hrefs."""

    def __init__(self) -> None:
        self._hrefs: list[str] = []

    def register(self, href: str) -> int:
        """Append an href and return its 0-based index."""
        self._hrefs.append(href)
        index = len(self._hrefs) - 1
        logger.debug("Registered link [%d] -> %s", index, href)
        return index

    def resolve(self, index: int) -> str:
        """Return the href registered under ``index``.

        Raises
        ------
        LinkNotFoundError
            If no link has that index

        """
        if index < 0 or index >= len(self._hrefs):
            raise LinkNotFoundError(index, len(self._hrefs))
        return self._hrefs[index]

    @property
    def index_digits(self) -> int:
        """Number of digits in the link count, used to size link-index entry (0 when empty)."""
        if not self._hrefs:
            return 0
        return len(str(len(self._hrefs)))

    @classmethod
    def from_hrefs(cls, hrefs: list[str]) -> LinkRegistry:
        """Rebuild a registry from a list returned by :func:`bbml.render`."""
        registry = cls()
        registry._hrefs = list(hrefs)
        return registry

    def to_list(self) -> list[str]:
        return list(self._hrefs)

    def __len__(self) -> int:
        return len(self._hrefs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._hrefs)

    def __getitem__(self, index: int) -> str:
        return self._hrefs[index]

    def __repr__(self) -> str:
        return f"LinkRegistry({self._hrefs!r})"
