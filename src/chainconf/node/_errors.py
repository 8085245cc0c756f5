"""
Exceptions raised by ConfigNode.

Both are programming errors: reserved keys form a closed set and merge
sources are checked before anything is written, so a node is never left
half-modified when one of these is raised.
"""

from __future__ import annotations

import typing as _typing


class ConfigNodeError(Exception):
    """Base class for ConfigNode errors."""

    pass


class ReservedKeyError(ConfigNodeError):
    """Raised when a write targets a reserved key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"It is not possible to use '{key}' as a key name, "
            f"please choose a different key name."
        )


class UnsupportedMergeSourceError(ConfigNodeError, TypeError):
    """Raised when merge() is given something that cannot become a mapping."""

    def __init__(self, source: _typing.Any) -> None:
        self.source_type = type(source)
        super().__init__(
            f"unable to convert {self.source_type.__name__} into a mapping "
            f"(expected a Mapping or an object with to_dict() or model_dump())"
        )
