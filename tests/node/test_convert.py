"""Tests for value conversion helpers."""

import collections as _collections
import types as _types

import pydantic as _pydantic
import pytest as _pytest

import chainconf.node._convert as _convert


class TestToMapping:
    """Converting merge sources."""

    def test_mapping_returned_as_is(self) -> None:
        """Mappings are used directly."""
        source = {"a": 1}

        assert _convert.to_mapping(source) is source

    def test_read_only_mapping(self) -> None:
        """Any Mapping works, not just dict."""
        source = _types.MappingProxyType({"a": 1})

        assert _convert.to_mapping(source) == {"a": 1}

    def test_pydantic_model(self) -> None:
        """pydantic models convert through model_dump()."""

        class Model(_pydantic.BaseModel):
            epoch: int = 3

        assert _convert.to_mapping(Model()) == {"epoch": 3}

    @_pytest.mark.parametrize("source", [None, 1, "text", [("a", 1)], object()])
    def test_unconvertible(self, source: object) -> None:
        """Anything else gives None."""
        assert _convert.to_mapping(source) is None

    def test_non_callable_attribute_skipped(self) -> None:
        """A to_dict attribute that isn't callable is ignored."""

        class Source:
            to_dict = {"not": "callable"}

            def model_dump(self) -> dict[str, int]:
                return {"b": 2}

        assert _convert.to_mapping(Source()) == {"b": 2}


class TestConvertValue:
    """Converting values for from_map."""

    @staticmethod
    def _build(mapping: object) -> tuple[str, object]:
        return ("built", mapping)

    def test_mapping(self) -> None:
        """Mappings go through build."""
        assert _convert.convert_value({"a": 1}, self._build) == ("built", {"a": 1})

    def test_list_elements(self) -> None:
        """Mapping elements are built; others kept in order."""
        result = _convert.convert_value([{"a": 1}, 2, "x"], self._build)

        assert result == [("built", {"a": 1}), 2, "x"]

    def test_namedtuple_untouched(self) -> None:
        """Tuple subclasses are stored unchanged."""
        Pair = _collections.namedtuple("Pair", "left right")
        value = Pair({"a": 1}, 2)

        assert _convert.convert_value(value, self._build) is value

    @_pytest.mark.parametrize("value", ["text", b"bytes", 3, None, {1, 2}])
    def test_scalars_untouched(self, value: object) -> None:
        """Non-container values pass through."""
        assert _convert.convert_value(value, self._build) is value
