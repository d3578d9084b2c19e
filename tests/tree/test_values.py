"""Tests for Tree Value kinds and rendering helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from json_tree_validator.tree.values import (
    ABSENT,
    IGNORE_MARKER,
    ValueKind,
    is_ignore_marker,
    kind_of,
    numbers_equal,
    parse_json,
    to_display_text,
    to_json_text,
    to_matcher_text,
)


class TestValueKind:
    def test_has_exactly_six_members(self) -> None:
        assert len(ValueKind) == 6

    def test_values_are_lowercased(self) -> None:
        assert ValueKind.OBJECT == "object"
        assert ValueKind.NULL == "null"

    def test_display_is_capitalised(self) -> None:
        assert ValueKind.ARRAY.display == "Array"
        assert ValueKind.OBJECT.display == "Object"

    def test_containers(self) -> None:
        assert ValueKind.OBJECT.is_container
        assert ValueKind.ARRAY.is_container
        assert not ValueKind.STRING.is_container


class TestKindOf:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ({}, ValueKind.OBJECT),
            ([], ValueKind.ARRAY),
            ((1, 2), ValueKind.ARRAY),
            ("x", ValueKind.STRING),
            (5, ValueKind.NUMBER),
            (5.5, ValueKind.NUMBER),
            (Decimal("1.25"), ValueKind.NUMBER),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (None, ValueKind.NULL),
        ],
    )
    def test_dispatch(self, value: object, kind: ValueKind) -> None:
        assert kind_of(value) is kind

    def test_bool_is_not_a_number(self) -> None:
        assert kind_of(True) is ValueKind.BOOLEAN

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            kind_of({1, 2})

    def test_absent_is_not_a_value(self) -> None:
        with pytest.raises(TypeError):
            kind_of(ABSENT)


class TestNumbersEqual:
    def test_int_and_float(self) -> None:
        assert numbers_equal(5, 5.0)

    def test_trailing_zeros(self) -> None:
        assert numbers_equal(Decimal("5"), Decimal("5.00"))

    def test_float_against_decimal(self) -> None:
        assert numbers_equal(0.1, Decimal("0.1"))

    def test_different_values(self) -> None:
        assert not numbers_equal(33, 44)

    def test_precision_is_kept(self) -> None:
        assert not numbers_equal(
            Decimal("1.000000000000000000001"), Decimal("1.000000000000000000002")
        )


class TestRendering:
    def test_compact_array(self) -> None:
        assert to_json_text([11, 22, 44]) == "[11,22,44]"

    def test_compact_object_keeps_key_order(self) -> None:
        assert (
            to_json_text({"index": 2, "text": "Hallo Welt!"})
            == '{"index":2,"text":"Hallo Welt!"}'
        )

    def test_decimal_keeps_digits(self) -> None:
        assert to_json_text(Decimal("5.00")) == "5.00"

    def test_scalars(self) -> None:
        assert to_json_text(None) == "null"
        assert to_json_text(True) == "true"
        assert to_json_text("a") == '"a"'

    def test_display_text_shows_strings_bare(self) -> None:
        assert to_display_text("b") == "b"
        assert to_display_text(33) == "33"
        assert to_display_text(None) == "null"
        assert to_display_text(ABSENT) == "absent"

    def test_matcher_text(self) -> None:
        assert to_matcher_text("Lorem") == "Lorem"
        assert to_matcher_text(None) == "null"
        assert to_matcher_text(False) == "false"
        assert to_matcher_text(ABSENT) is None
        assert to_matcher_text([1, 2]) == "[1,2]"


class TestIgnoreMarker:
    def test_marker(self) -> None:
        assert is_ignore_marker(IGNORE_MARKER)

    def test_marker_with_whitespace(self) -> None:
        assert is_ignore_marker("  @ignore@ ")

    def test_other_values(self) -> None:
        assert not is_ignore_marker("@ignore")
        assert not is_ignore_marker(None)


class TestParseJson:
    def test_floats_become_decimals(self) -> None:
        assert parse_json('{"a": 5.00}') == {"a": Decimal("5.00")}

    def test_integers_stay_integers(self) -> None:
        assert parse_json("[1, 2]") == [1, 2]

    def test_invalid_text_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_json('{"index": invalid}')

    @pytest.mark.parametrize("text", ['{"v": NaN}', "[Infinity]", '{"v": -Infinity}'])
    def test_non_standard_constants_are_rejected(self, text: str) -> None:
        with pytest.raises(ValueError, match="Non-standard JSON constant"):
            parse_json(text)

    def test_absent_is_falsy_singleton(self) -> None:
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"
        assert type(ABSENT)() is ABSENT
