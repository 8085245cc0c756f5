"""
Shared fixtures for ConfigNode tests.
"""

import pytest as _pytest

import chainconf.node as node


@_pytest.fixture
def root() -> node.ConfigNode:
    """Root node with a few defaults."""
    return node.ConfigNode.from_map({"color": True, "pager": "less", "width": 80})


@_pytest.fixture
def local(root: node.ConfigNode) -> node.ConfigNode:
    """Empty node falling back to root."""
    return node.ConfigNode(root)


@_pytest.fixture
def chain(root: node.ConfigNode) -> list[node.ConfigNode]:
    """Four-node chain, nearest first: [local3, local2, local1, root]."""
    local1 = node.ConfigNode(root)
    local2 = node.ConfigNode(local1)
    local3 = node.ConfigNode(local2)
    return [local3, local2, local1, root]
