"""
chainconf - hierarchical configuration with fallback to parent nodes

A ConfigNode holds its own key/value table and falls back to a parent
("default") node for keys it doesn't have. Values can be lazy, a fixed set
of key names is reserved, and nodes support dict-like bulk operations.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("chainconf")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from chainconf.config import Settings  # noqa: E402
from chainconf.node import (  # noqa: E402
    ConfigNode,
    ConfigNodeError,
    Lazy,
    NodeOptions,
    ReservedKeyError,
    UnsupportedMergeSourceError,
    lazy,
)

__all__ = [
    "__version__",
    "__version_info__",
    "ConfigNode",
    "ConfigNodeError",
    "Lazy",
    "NodeOptions",
    "ReservedKeyError",
    "Settings",
    "UnsupportedMergeSourceError",
    "lazy",
]
