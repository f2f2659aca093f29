"""JSON value model: kind classification, absence marker, equality and traversal.

A JSON value is one of:
- OBJECT:  ``dict`` with string keys
- ARRAY:   ``list`` (``tuple`` is accepted as an array too)
- SCALAR:  ``str``, ``int``, ``float``, ``bool`` or ``None``
- MISSING: the ``MISSING`` marker, standing for a key absent from a mapping

``None`` (JSON null) and ``MISSING`` are different states: ``{"a": None}``
and ``{}`` differ at ``/a``.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum, auto
from typing import Any, Final

from json_structural_diff.tree.paths import ROOT, extend

__all__ = [
    "MISSING",
    "JsonValue",
    "ValueKind",
    "classify",
    "is_container",
    "iter_descendants",
    "json_equal",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """The four shapes a value can take during comparison."""

    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()
    MISSING = auto()


class _Missing:
    """Singleton type of the ``MISSING`` marker."""

    __slots__ = ()
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

_CONTAINERS = frozenset({ValueKind.OBJECT, ValueKind.ARRAY})


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of ``value``.

    Raises:
        TypeError: If value is neither a JSON value nor ``MISSING``.
    """
    if value is MISSING:
        return ValueKind.MISSING

    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return ValueKind.SCALAR

    if isinstance(value, dict):
        # {1: "a"} and {"1": "a"} serialise identically but would diff apart
        for key in value:
            if not isinstance(key, str):
                raise TypeError(f"Unsupported JSON object key type: {type(key)!r}")
        return ValueKind.OBJECT

    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY

    if value is None or isinstance(value, (str, int, float)):
        return ValueKind.SCALAR

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_container(value: Any) -> bool:
    """True for objects and arrays."""
    return classify(value) in _CONTAINERS


def _scalar_equal(left: Any, right: Any) -> bool:
    # JSON booleans are never equal to numbers, although True == 1 in Python
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return bool(left == right)


def json_equal(left: Any, right: Any) -> bool:
    """Deep structural equality under JSON semantics.

    Differs from ``==`` in two ways: booleans never equal numbers, and a
    tuple equals a list with the same items.  ``1 == 1.0`` still holds since
    JSON has a single number type.

    Raises:
        TypeError: If either side contains a non-JSON value.
    """
    if left is right:
        return True

    kind = classify(left)
    if kind != classify(right):
        return False

    if kind == ValueKind.OBJECT:
        if len(left) != len(right):
            return False
        return all(
            key in right and json_equal(value, right[key])
            for key, value in left.items()
        )

    if kind == ValueKind.ARRAY:
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right, strict=True))

    return _scalar_equal(left, right)


def iter_descendants(value: Any, path: str = ROOT) -> Iterator[tuple[str, Any]]:
    """Yield ``(path, value)`` for every strict descendant, depth-first pre-order.

    ``value`` itself is not yielded.  Scalars have no descendants.
    """
    kind = classify(value)
    if kind == ValueKind.OBJECT:
        children: Any = value.items()
    elif kind == ValueKind.ARRAY:
        children = enumerate(value)
    else:
        return

    for segment, child in children:
        child_path = extend(path, segment)
        yield child_path, child
        yield from iter_descendants(child, child_path)
