"""Property-based tests for equality, rendering and JSON conversion."""

import json
from typing import TYPE_CHECKING

from hypothesis import given, strategies as st

from gqlvalue import (
    Enum,
    Object,
    String,
    Value,
    Variable,
    erase_to_json,
    literal_from_json,
    parse_json_value,
    quote_string,
    serialize_value,
)

from .strategies import (
    field_pairs_strategy,
    json_safe_value_strategy,
    name_strategy,
    value_strategy,
)

if TYPE_CHECKING:
    from random import Random


class TestEqualityProperties:
    @given(value_strategy)
    def test_reflexive(self, value: Value) -> None:
        assert value == value

    @given(value_strategy, value_strategy)
    def test_symmetric(self, a: Value, b: Value) -> None:
        assert (a == b) == (b == a)

    @given(value_strategy, value_strategy)
    def test_hash_consistent(self, a: Value, b: Value) -> None:
        if a == b:
            assert hash(a) == hash(b)

    @given(field_pairs_strategy, st.randoms(use_true_random=False))
    def test_object_ignores_insertion_order(
        self, pairs: "list[tuple[str, Value]]", random: "Random"
    ) -> None:
        shuffled = list(pairs)
        random.shuffle(shuffled)
        assert Object(pairs) == Object(shuffled)


class TestRenderingProperties:
    @given(field_pairs_strategy, st.randoms(use_true_random=False))
    def test_object_rendering_is_deterministic(
        self, pairs: "list[tuple[str, Value]]", random: "Random"
    ) -> None:
        shuffled = list(pairs)
        random.shuffle(shuffled)
        assert str(Object(pairs)) == str(Object(shuffled))

    @given(value_strategy)
    def test_duplicate_renders_identically(self, value: Value) -> None:
        assert str(value.duplicate()) == str(value)

    @given(st.text(alphabet=st.characters(min_codepoint=0x20, max_codepoint=0xFFFF)))
    def test_printable_text_quoted_verbatim(self, text: str) -> None:
        assert quote_string(text) == f'"{text}"'


class TestJsonProperties:
    @given(json_safe_value_strategy)
    def test_literal_roundtrip_preserves_value(self, value: Value) -> None:
        assert literal_from_json(erase_to_json(value)) == value

    @given(json_safe_value_strategy)
    def test_serialized_text_parses_back(self, value: Value) -> None:
        assert parse_json_value(serialize_value(value)) == value

    @given(value_strategy)
    def test_serialize_is_valid_json(self, value: Value) -> None:
        # Should not raise
        json.loads(serialize_value(value))

    @given(name_strategy)
    def test_enum_does_not_roundtrip(self, name: str) -> None:
        result = literal_from_json(erase_to_json(Enum(name)))
        assert result == String(name)
        assert result != Enum(name)

    @given(name_strategy)
    def test_variable_does_not_roundtrip(self, name: str) -> None:
        result = literal_from_json(erase_to_json(Variable(name)))
        assert result == String(name)
        assert result != Variable(name)
