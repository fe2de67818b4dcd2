"""Base classes for bbml options.

Options are frozen dataclasses so a single instance can be shared between
renders without one call affecting another.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        """Build an instance from a mapping, ignoring keys that are not fields.

        Keys may use either snake_case or kebab-case, as found in config files.
        """
        names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        kwargs = {}
        for key, value in values.items():
            name = key.replace("-", "_")
            if name in names:
                kwargs[name] = value
        return cls(**kwargs)
