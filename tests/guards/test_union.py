"""Tests for AnyOf union guards."""

import logging
from typing import Any

import pytest

from shapeguard import ABSENT, AnyOf, Null, Number, Schema, String, Tuple, ValidationError
from shapeguard.guards.errors import ErrorKind
from tests.shapes import ArrayPoint, FlexiblePoint, Point


class TestFirstMatchWins:
    def test_array_alternative(self) -> None:
        assert FlexiblePoint([1]) == [1, 0]

    def test_object_alternative(self) -> None:
        assert FlexiblePoint({"y": 15}) == {"x": 0, "y": 15}

    def test_no_alternative_matches(self) -> None:
        with pytest.raises(ValidationError, match="invalid") as info:
            FlexiblePoint(1)
        assert str(info.value) == "Value `1` is invalid for all alternatives"
        assert info.value.kind is ErrorKind.UNION_EXHAUSTED

    def test_order_is_significant(self) -> None:
        """Both alternatives accept absent input; the first one decides."""
        assert AnyOf(Point, ArrayPoint)() == {"x": 0, "y": 0}
        assert AnyOf(ArrayPoint, Point)() == [0, 0]

    def test_later_alternatives_not_invoked(self) -> None:
        calls: list[str] = []

        def second(value: Any, name: Any) -> Any:
            calls.append("second")
            return value

        assert AnyOf(Number(), second)(3) == 3
        assert calls == []

    def test_single_sequence_argument(self) -> None:
        g = AnyOf([String(), Number()])
        assert g("a") == "a"
        assert g(1) == 1

    def test_nullable(self) -> None:
        optional_name = AnyOf(Null(), String())
        assert optional_name(None) is None
        assert optional_name("x") == "x"


class TestExhaustion:
    def test_reasons_discarded_by_default(self) -> None:
        with pytest.raises(ValidationError) as info:
            AnyOf(String(), Number())(True)
        assert "String" not in str(info.value)
        assert info.value.causes == ()

    def test_collect_errors_opt_in(self) -> None:
        g = AnyOf(String(), Number(), collect_errors=True)
        with pytest.raises(ValidationError) as info:
            g(True)
        assert str(info.value) == "Value `True` is invalid for all alternatives"
        assert [str(c) for c in info.value.causes] == [
            "String expected instead of bool `True`",
            "Number expected instead of bool `True`",
        ]

    def test_no_alternatives(self) -> None:
        with pytest.raises(ValidationError, match="invalid"):
            AnyOf()("anything")

    def test_absent_value_without_defaults(self) -> None:
        with pytest.raises(ValidationError, match="Value `absent` is invalid"):
            AnyOf(String(), Number())(ABSENT)

    def test_custom_template(self) -> None:
        g = AnyOf(String(), Number(), message="{{name}}: {{type}} fits nothing")
        with pytest.raises(ValidationError, match="^size: list fits nothing$") as info:
            g([], "size")
        assert info.value.name == "size"

    def test_discarded_reasons_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="shapeguard.guards.union"):
            with pytest.raises(ValidationError):
                AnyOf(String())(5)
        assert "String expected instead of int `5`" in caplog.text


class TestFailureClassification:
    def test_value_error_counts_as_rejection(self) -> None:
        def positive(value: Any, name: Any) -> Any:
            if not isinstance(value, int) or value <= 0:
                raise ValueError("must be positive")
            return value

        g = AnyOf(positive, String())
        assert g(5) == 5
        assert g("five") == "five"

    def test_other_exceptions_propagate(self) -> None:
        def broken(value: Any, name: Any) -> Any:
            raise KeyError("boom")

        with pytest.raises(KeyError):
            AnyOf(broken, String())("x")

    def test_non_callable_alternative(self) -> None:
        with pytest.raises(ValidationError) as info:
            AnyOf(String(), 42)(1)
        assert info.value.kind is ErrorKind.INVALID_GUARD


class TestUnionComposition:
    def test_inside_schema(self) -> None:
        shape = Schema({"id": AnyOf(Number(), String()), "tags": Tuple([String("")])})
        assert shape({"id": "a1", "extra": True}) == {"id": "a1", "tags": [""]}

    def test_union_error_inside_schema_carries_field_name(self) -> None:
        shape = Schema({"id": AnyOf(Number(), String())})
        with pytest.raises(ValidationError) as info:
            shape({"id": None})
        assert info.value.name == "id"
        assert info.value.kind is ErrorKind.UNION_EXHAUSTED

    def test_malformed_nested_descriptor_propagates(self) -> None:
        """A broken alternative is reported, not skipped in favour of the next one."""
        g = AnyOf(Schema({"x": 42}), Number())
        with pytest.raises(ValidationError) as info:
            g({"x": 1})
        assert info.value.kind is ErrorKind.INVALID_GUARD
        assert info.value.name == "x"

    def test_structure_mismatch_still_falls_through(self) -> None:
        g = AnyOf(Schema({"x": 42}), Number())
        assert g(5) == 5
