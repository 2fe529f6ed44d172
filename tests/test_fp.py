"""Tests for cemdoc.fp."""

from __future__ import annotations

from cemdoc.fp import (
    capital,
    compose,
    either,
    field_of,
    identity,
    is_lengthy,
    is_private,
    is_private_or_protected,
    is_protected,
    kind_is,
    negate,
    repeat,
)


def test_negate_and_either_combine_predicates() -> None:
    is_even = lambda n: n % 2 == 0  # noqa: E731
    is_big = lambda n: n > 10  # noqa: E731

    assert negate(is_even)(3) is True
    assert either(is_even, is_big)(11) is True
    assert either(is_even, is_big)(3) is False


def test_compose_applies_right_to_left() -> None:
    add_one = lambda n: n + 1  # noqa: E731
    double = lambda n: n * 2  # noqa: E731

    assert compose(double, add_one)(3) == 8
    assert compose()(5) == 5
    assert identity("x") == "x"


def test_field_of_tolerates_missing_and_non_mapping_values() -> None:
    record = {"type": {"text": "string"}, "return": "void"}

    assert field_of(record, "type", "text") == "string"
    assert field_of(record, "return", "type", "text") is None
    assert field_of(None, "name") is None
    assert field_of(record, "missing") is None


def test_privacy_predicates_treat_absent_privacy_as_public() -> None:
    assert is_private({"privacy": "private"})
    assert is_protected({"privacy": "protected"})
    assert not is_private({"name": "x"})
    assert not is_private_or_protected({"privacy": "public"})
    assert is_private_or_protected({"privacy": "protected"})
    assert not is_private(None)


def test_kind_is_and_small_helpers() -> None:
    assert kind_is("field")({"kind": "field"})
    assert not kind_is("field")({"kind": "method"})
    assert capital("cssProperties") == "CssProperties"
    assert capital("") == ""
    assert repeat(3, None) == [None, None, None]
    assert is_lengthy([1])
    assert not is_lengthy([])
    assert not is_lengthy(None)
