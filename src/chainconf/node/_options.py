"""
Per-tree options for ConfigNode.

Options travel down a tree: a node created without explicit options takes
its parent's, and a root without options uses the defaults below.
"""

from __future__ import annotations

import pydantic as _pydantic

import chainconf.constants as constants


class NodeOptions(_pydantic.BaseModel):
    """
    Configuration parameters of a ConfigNode tree.

    YAML/env section: node.*
    """

    model_config = _pydantic.ConfigDict(frozen=True, extra="forbid")

    reserved_keys: frozenset[str] = frozenset()
    """Key names writers may not use, on top of the ConfigNode API names."""

    copy_on_read_keys: frozenset[str] = frozenset(constants.DEFAULT_COPY_ON_READ_KEYS)
    """Keys whose inherited value is deep-copied into a node on first read."""
