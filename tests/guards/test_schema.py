"""Tests for Schema guards."""

from collections import OrderedDict
from typing import Any

import pytest

from shapeguard import ABSENT, Number, Schema, String, ValidationError
from shapeguard.guards.errors import ErrorKind
from tests.shapes import Point, Segment


class TestSchemaDefaults:
    def test_absent_value_uses_field_defaults(self) -> None:
        assert Point() == {"x": 0, "y": 0}

    def test_empty_object(self) -> None:
        assert Point({}) == {"x": 0, "y": 0}

    def test_nested_defaults(self) -> None:
        assert Segment() == {
            "start": {"x": 0, "y": 0},
            "end": {"x": 0, "y": 0},
            "opacity": 1,
        }


class TestSchemaNormalization:
    def test_strips_undeclared_fields(self) -> None:
        assert Point({"x": 17, "z": 50}) == {"x": 17, "y": 0}

    def test_nested_strip_and_default(self) -> None:
        result = Segment({"end": {"x": 17, "foo": "bar"}, "opacity": 0.5})
        assert result == {
            "start": {"x": 0, "y": 0},
            "end": {"x": 17, "y": 0},
            "opacity": 0.5,
        }

    def test_returns_new_dict(self) -> None:
        value = {"x": 1, "y": 2}
        result = Point(value)
        assert result == value
        assert result is not value

    def test_output_keys_follow_declaration_order(self) -> None:
        g = Schema({"b": Number(0), "a": Number(0)})
        assert list(g({"a": 1, "b": 2})) == ["b", "a"]

    def test_accepts_any_mapping(self) -> None:
        assert Point(OrderedDict(x=3)) == {"x": 3, "y": 0}

    def test_empty_descriptor(self) -> None:
        assert Schema({})({"anything": 1}) == {}


class TestSchemaRejection:
    def test_non_object_value(self) -> None:
        with pytest.raises(ValidationError, match="Object") as info:
            Point("{ y: 6 }")
        assert str(info.value) == "Object expected instead of str `{ y: 6 }`"
        assert info.value.kind is ErrorKind.STRUCTURE_MISMATCH

    def test_array_value_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Object expected instead of list"):
            Point([1, 2])

    def test_none_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Object"):
            Point(None)

    def test_field_error_propagates_unchanged(self) -> None:
        with pytest.raises(ValidationError, match="Number expected instead of str `5`") as info:
            Point({"x": "5"})
        assert info.value.name == "x"
        assert info.value.kind is ErrorKind.TYPE_MISMATCH

    def test_nested_structure_error(self) -> None:
        with pytest.raises(ValidationError, match="Object expected instead of int `17`") as info:
            Segment({"start": 17})
        assert info.value.name == "start"

    def test_first_declared_field_wins(self) -> None:
        g = Schema({"a": Number(0), "b": String("")})
        with pytest.raises(ValidationError) as info:
            g({"b": 1, "a": "x"})
        assert info.value.name == "a"

    def test_missing_field_without_default(self) -> None:
        g = Schema({"title": String(message="{{key}} is required")})
        with pytest.raises(ValidationError, match="^title is required$"):
            g({})

    def test_custom_template(self) -> None:
        g = Schema({"x": Number(0)}, "{{name}}: need an object, got {{type}}")
        with pytest.raises(ValidationError, match="^point: need an object, got int$"):
            g(3, "point")


class TestSchemaChildren:
    def test_child_receives_absent_for_missing_key(self) -> None:
        seen: list[Any] = []

        def spy(value: Any, name: Any) -> Any:
            seen.append((value, name))
            return "seen"

        assert Schema({"a": spy})({}) == {"a": "seen"}
        assert seen == [(ABSENT, "a")]

    def test_explicit_none_is_passed_through(self) -> None:
        seen: list[Any] = []

        def spy(value: Any, name: Any) -> Any:
            seen.append(value)
            return value

        Schema({"a": spy})({"a": None})
        assert seen == [None]

    def test_non_guard_child_fails_on_invocation(self) -> None:
        g = Schema({"x": 42})
        with pytest.raises(ValidationError, match="Guard expected for `x`") as info:
            g({"x": 1})
        assert info.value.kind is ErrorKind.INVALID_GUARD

    def test_non_mapping_descriptor_fails_on_invocation(self) -> None:
        g = Schema(42)  # type: ignore[arg-type]
        with pytest.raises(ValidationError) as info:
            g({})
        assert info.value.kind is ErrorKind.INVALID_GUARD


class TestSchemaDescriptorSnapshot:
    def test_later_mutation_does_not_affect_guard(self) -> None:
        fields: dict[str, Any] = {"x": Number(0)}
        g = Schema(fields)
        fields["y"] = Number(0)
        assert g() == {"x": 0}

    def test_derive_message(self) -> None:
        g = Point.derive(message="not a point")
        with pytest.raises(ValidationError, match="^not a point$"):
            g(1)
        assert g() == {"x": 0, "y": 0}
