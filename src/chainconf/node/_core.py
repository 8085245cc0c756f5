"""
ConfigNode: a configuration table that falls back to a parent node.

Each node owns a local table. Reads check the local table first and then
walk up the chain of defaults; writes always land in the local table.
Precedence is decided by presence in the table, never by the truthiness of
the stored value, so a local ``False`` shadows an inherited ``True``.

Read semantics:
- Local key: returns the stored value (lazy values are evaluated)
- Inherited key: returns the nearest ancestor's value
- Unknown key: returns None

Thread safety: NOT thread-safe for concurrent writes. Ancestors are only
ever read by their descendants.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import typing as _typing

import chainconf.node._convert as _convert
import chainconf.node._errors as _errors
import chainconf.node._lazy as _lazy
import chainconf.node._options as _options

_logger = _logging.getLogger(__name__)

_NodeT = _typing.TypeVar("_NodeT", bound="ConfigNode")


class ConfigNode:
    """
    A node in a configuration fallback tree.

    Example:
        >>> root = ConfigNode.from_map({"color": True, "pager": "less"})
        >>> local = ConfigNode(root)
        >>> local.color = False
        >>> local.color, local.pager
        (False, 'less')
        >>> local.forget("color")
        >>> local.color
        True

    Keys are always stored as strings. Any key can be read and written with
    ``node[key]``; keys that are valid identifiers can also be used as
    attributes. A local key takes precedence over a method or attribute of
    the same name defined by a subclass or mixin.

    Args:
        default: The parent node consulted for keys missing locally.
        options: Reserved keys and copy-on-read keys for this node. Taken
            from ``default`` when omitted, so a whole tree shares them.

    Note:
        **Reserved keys:** the public API names of ConfigNode (``get``,
        ``keys``, ``default``, ...) plus ``options.reserved_keys`` can never
        be stored. Writing one raises ReservedKeyError.

        **Copy-on-read keys:** reading one of ``options.copy_on_read_keys``
        that is only inherited with ``get`` or ``node[key]`` stores a deep
        copy in the local table first, so the caller can mutate it without
        touching the ancestor. Attribute reads of such a key return a
        detached copy and store nothing.

        **Thread safety:** no locking is done. Callers sharing a node
        between threads must synchronize writes themselves.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        default: ConfigNode | None = None,
        *,
        options: _options.NodeOptions | None = None,
    ) -> None:
        if options is None:
            options = default._options if default is not None else _options.NodeOptions()
        self._lookup: dict[str, _typing.Any] = {}
        self._default = default
        self._options = options
        self._reserved_keys = _API_NAMES | options.reserved_keys

    @classmethod
    def from_map(
        cls: type[_NodeT],
        source: _abc.Mapping[_typing.Any, _typing.Any],
        default: ConfigNode | None = None,
        *,
        options: _options.NodeOptions | None = None,
    ) -> _NodeT:
        """
        Build a node from a mapping.

        Nested mappings become nodes too, including mappings inside lists
        and tuples. Nested nodes get the same ``default`` as the node being
        built, so they are siblings falling back to one ancestor rather
        than a chain.

        Args:
            source: The mapping to convert.
            default: Parent for the new node and every nested node.
            options: Options for the new node and every nested node.

        Raises:
            ReservedKeyError: If source contains a reserved key.
            UnsupportedMergeSourceError: If source can't become a mapping.
        """
        node = cls(default, options=options)
        mapping = _convert.to_mapping(source)
        if mapping is None:
            raise _errors.UnsupportedMergeSourceError(source)

        items = [(str(key), value) for key, value in mapping.items()]
        for key, _ in items:
            node._check_key(key)

        def build(nested: _abc.Mapping[_typing.Any, _typing.Any]) -> _NodeT:
            return cls.from_map(nested, default, options=node._options)

        for key, value in items:
            node._lookup[key] = _convert.convert_value(value, build)
        return node

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def default(self) -> ConfigNode | None:
        """The parent node, or None for a root."""
        return self._default

    @property
    def last_default(self) -> ConfigNode | None:
        """The terminal ancestor of the chain, or None for a root."""
        node = self._default
        while node is not None and node._default is not None:
            node = node._default
        return node

    @property
    def options(self) -> _options.NodeOptions:
        """Options shared by this node's tree."""
        return self._options

    @property
    def reserved_keys(self) -> frozenset[str]:
        """Key names that can never be stored in this node."""
        return self._reserved_keys

    # =========================================================================
    # Reads and writes
    # =========================================================================

    def get(self, key: _typing.Any) -> _typing.Any:
        """
        Resolve a key through the local table and then the parent chain.

        Lazy values are evaluated on every call. Never raises for unknown
        keys.

        Returns:
            The resolved value, or None if no node in the chain has the key.
        """
        key = str(key)
        found, value = self._find(key)
        if not found:
            return None
        if key not in self._lookup and key in self._options.copy_on_read_keys:
            return self._copy_from_default(key, value)
        return _lazy.resolve(value)

    def set(self, key: _typing.Any, value: _typing.Any) -> None:
        """
        Store a value in the local table.

        Raises:
            ReservedKeyError: If key is reserved. Nothing is stored.
        """
        key = str(key)
        self._check_key(key)
        self._lookup[key] = value

    def resolves(self, key: _typing.Any) -> bool:
        """Check if key is stored in this node or any ancestor."""
        found, _ = self._find(str(key))
        return found

    def forget(self, key: _typing.Any) -> None:
        """Remove a local key so reads fall through to the parent again."""
        self._lookup.pop(str(key), None)

    def keys(self) -> list[str]:
        """Return local keys in insertion order (inherited keys excluded)."""
        return list(self._lookup)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Return a shallow copy of the local table."""
        return dict(self._lookup)

    def clear(self) -> bool:
        """Remove every local key. The parent is left untouched."""
        _logger.debug("Clearing %d local keys", len(self._lookup))
        self._lookup.clear()
        return True

    def merge(self, other: _typing.Any) -> ConfigNode:
        """
        Store every key/value pair of ``other`` in the local table.

        Args:
            other: A Mapping, or an object with ``to_dict()`` or
                ``model_dump()`` (tried in that order).

        Returns:
            This node.

        Raises:
            UnsupportedMergeSourceError: If other can't become a mapping.
            ReservedKeyError: If other contains a reserved key.
                Nothing is stored in either case.
        """
        source = _convert.to_mapping(other)
        if source is None:
            raise _errors.UnsupportedMergeSourceError(other)

        items = [(str(key), value) for key, value in source.items()]
        for key, _ in items:
            self._check_key(key)
        self._lookup.update(items)
        _logger.debug("Merged %d keys from %s", len(items), type(other).__name__)
        return self

    def eager_load(self) -> None:
        """
        Copy the terminal ancestor's keys into the local table.

        Keys already stored locally are kept. Values are copied as stored,
        so lazy values stay lazy; copy-on-read keys are deep-copied.
        Afterwards, changes to the terminal ancestor no longer affect those
        keys here.

        Raises:
            ReservedKeyError: If an ancestor key is reserved for this node.
                Nothing is stored.
        """
        root = self.last_default
        if root is None:
            return

        pending = [key for key in root._lookup if key not in self._lookup]
        for key in pending:
            self._check_key(key)
        copied = self._options.copy_on_read_keys
        for key in pending:
            value = root._lookup[key]
            self._lookup[key] = _copy.deepcopy(value) if key in copied else value
        _logger.debug("Eager-loaded %d keys from terminal default", len(pending))

    # =========================================================================
    # Internal helpers
    # =========================================================================

    def _check_key(self, key: str) -> None:
        if key in self._reserved_keys:
            raise _errors.ReservedKeyError(key)

    def _find(self, key: str) -> tuple[bool, _typing.Any]:
        """
        Walk the chain for a raw stored value.

        Returns:
            Tuple of (found, raw_value). Lazy values are not evaluated.
        """
        node: ConfigNode | None = self
        while node is not None:
            if key in node._lookup:
                return True, node._lookup[key]
            node = node._default
        return False, None

    def _copy_from_default(self, key: str, inherited: _typing.Any) -> _typing.Any:
        value = _copy.deepcopy(_lazy.resolve(inherited))
        if key in self._reserved_keys:
            # Reserved here but legitimately stored by an ancestor.
            return value
        self._lookup[key] = value
        _logger.debug("Stored a local copy of inherited key %r", key)
        return value

    def _chain_keys(self) -> list[str]:
        """All keys resolvable from this node, nearest first."""
        seen: dict[str, None] = {}
        node: ConfigNode | None = self
        while node is not None:
            seen.update(dict.fromkeys(node._lookup))
            node = node._default
        return list(seen)

    # =========================================================================
    # Python protocols
    # =========================================================================

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        return self.get(key)

    def __setitem__(self, key: _typing.Any, value: _typing.Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        """Check if key is stored locally."""
        return str(key) in self._lookup

    def __getattribute__(self, name: str) -> _typing.Any:
        # Local keys win over methods a subclass or mixin defines.
        # API names are reserved, so they can never be shadowed here.
        if name[:1] != "_":
            lookup = object.__getattribute__(self, "_lookup")
            if name in lookup:
                return _lazy.resolve(lookup[name])
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> _typing.Any:
        """
        Resolve inherited keys once normal attribute lookup has failed.

        Nothing is stored: ``hasattr`` and ``getattr`` with a default go
        through here. An inherited copy-on-read key comes back as a detached
        deep copy; use ``node[key]`` to keep a local copy.
        """
        if name[:1] != "_":
            found, value = self._find(name)
            if found:
                value = _lazy.resolve(value)
                if name in self._options.copy_on_read_keys:
                    return _copy.deepcopy(value)
                return value
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute or key {name!r}"
        )

    def __setattr__(self, name: str, value: _typing.Any) -> None:
        if name[:1] == "_":
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if name[:1] == "_":
            object.__delattr__(self, name)
        else:
            self.forget(name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._chain_keys()))

    def __eq__(self, other: object) -> bool:
        """Compare local tables. Parents are not considered."""
        if not isinstance(other, ConfigNode):
            return NotImplemented
        return self._lookup == other._lookup

    def __copy__(self) -> ConfigNode:
        """Shallow-copy the local table. The parent is shared."""
        clone = type(self)(self._default, options=self._options)
        clone._lookup.update(self._lookup)
        return clone

    def __deepcopy__(self, memo: dict[int, _typing.Any]) -> ConfigNode:
        """Deep-copy the local table. The parent is still shared."""
        clone = type(self)(self._default, options=self._options)
        memo[id(self)] = clone
        clone._lookup.update(_copy.deepcopy(self._lookup, memo))
        return clone

    def __repr__(self) -> str:
        # Only one level of the chain, so deep chains stay printable.
        parent = self._default
        if parent is None:
            default = "None"
        else:
            default = f"{type(parent).__name__}(keys={list(parent._lookup)!r})"
        return f"{type(self).__name__}(keys={list(self._lookup)!r}, default={default})"


# Every public name on the class; these can never be used as keys.
_API_NAMES = frozenset(name for name in dir(ConfigNode) if not name.startswith("_"))
