"""Small predicate and combinator helpers used by the renderer."""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Sized, TypeVar

T = TypeVar("T")

Predicate = Callable[[Any], bool]


def identity(value: T) -> T:
    return value


def negate(predicate: Predicate) -> Predicate:
    """Return a predicate that is true wherever ``predicate`` is false."""

    def _negated(value: Any) -> bool:
        return not predicate(value)

    return _negated


def either(*predicates: Predicate) -> Predicate:
    """Return a predicate that holds when any of ``predicates`` holds."""

    def _any(value: Any) -> bool:
        return any(predicate(value) for predicate in predicates)

    return _any


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose right to left: ``compose(g, f)(x) == g(f(x))``."""

    def _composed(value: Any) -> Any:
        for function in reversed(functions):
            value = function(value)
        return value

    return _composed


def is_lengthy(value: Optional[Sized]) -> bool:
    return value is not None and len(value) > 0


def field_of(record: Any, *path: str) -> Any:
    """Walk ``path`` through nested mappings, returning ``None`` on any gap."""
    current = record
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def kind_is(kind: str) -> Predicate:
    def _matches(record: Any) -> bool:
        return field_of(record, "kind") == kind

    return _matches


def is_private(record: Any) -> bool:
    return field_of(record, "privacy") == "private"


def is_protected(record: Any) -> bool:
    return field_of(record, "privacy") == "protected"


is_private_or_protected = either(is_private, is_protected)


def capital(value: str) -> str:
    """Uppercase the first character only (``cssParts`` -> ``CssParts``)."""
    return value[:1].upper() + value[1:]


def repeat(count: int, value: T) -> List[T]:
    return [value] * count


__all__ = [
    "Predicate",
    "capital",
    "compose",
    "either",
    "field_of",
    "identity",
    "is_lengthy",
    "is_private",
    "is_private_or_protected",
    "is_protected",
    "kind_is",
    "negate",
    "repeat",
]
