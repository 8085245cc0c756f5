"""
Value conversion helpers for ConfigNode.

- to_mapping: turns a merge source into a Mapping
- convert_value: turns nested mappings into nodes for from_map
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

# Conversion methods tried by merge, in priority order.
# to_dict() is the package-wide convention; model_dump() covers pydantic models.
MAPPING_CONVERTERS = ("to_dict", "model_dump")


def to_mapping(source: _typing.Any) -> _abc.Mapping[_typing.Any, _typing.Any] | None:
    """
    Convert a merge source to a Mapping.

    Args:
        source: A Mapping, or an object exposing one of MAPPING_CONVERTERS.

    Returns:
        The mapping, or None if the source can't become one.
    """
    if isinstance(source, _abc.Mapping):
        return source

    for name in MAPPING_CONVERTERS:
        converter = getattr(source, name, None)
        if callable(converter):
            result = converter()
            if isinstance(result, _abc.Mapping):
                return result
            return None

    return None


def convert_value(
    value: _typing.Any,
    build: _typing.Callable[[_abc.Mapping[_typing.Any, _typing.Any]], _typing.Any],
) -> _typing.Any:
    """
    Convert a value read from a source map.

    Mappings are passed to ``build``. Lists and tuples keep their type, order
    and length, with mapping elements passed to ``build``. Nested sequences
    and everything else are returned unchanged.

    Args:
        value: The value to convert.
        build: Turns a mapping into a node.
    """
    if isinstance(value, _abc.Mapping):
        return build(value)
    # Exact tuple only: rebuilding a namedtuple positionally would change its type.
    if isinstance(value, list) or type(value) is tuple:
        converted = [
            build(item) if isinstance(item, _abc.Mapping) else item for item in value
        ]
        return converted if isinstance(value, list) else tuple(converted)
    return value
