"""
ConfigNode — configuration tables with fallback to a parent node.

Example:
    >>> from chainconf.node import ConfigNode, lazy
    >>> root = ConfigNode.from_map({"pager": "less", "color": True})
    >>> local = ConfigNode(root)
    >>> local.color = False  # shadows the root, even though it's falsy
    >>> local.pager
    'less'
"""

from chainconf.node._core import ConfigNode
from chainconf.node._errors import (
    ConfigNodeError,
    ReservedKeyError,
    UnsupportedMergeSourceError,
)
from chainconf.node._lazy import Lazy, LazyValue, is_lazy, lazy
from chainconf.node._options import NodeOptions

__all__ = [
    "ConfigNode",
    "ConfigNodeError",
    "Lazy",
    "LazyValue",
    "NodeOptions",
    "ReservedKeyError",
    "UnsupportedMergeSourceError",
    "is_lazy",
    "lazy",
]
