"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 100-key nested, 500-element arrays.
Each tier provides both an "edited" pair (a few scattered changes) and a
"rewritten" pair (nothing in common below the root).  A fourth tier of
5000-element arrays holds pairs a handful of edits apart (a rotation and a
single in-place change), whose cost should grow linearly with length.

Array tiers exercise the LCS alignment window; object tiers exercise the
key-union walk and ancestor marking.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_edited_flat(num_keys: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate flat pair where every third value changes."""
    left = generate_flat_object(num_keys)
    right = {
        key: (f"changed_{i}" if i % 3 == 0 else value)
        for i, (key, value) in enumerate(left.items())
    }
    return left, right


def _make_edited_nested_100() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate 100-key nested pair.

    Structure: 10 sections x (9 leaf keys each) + 10 section keys = 100 keys.
    One leaf per section is updated, one removed and one added.
    """
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(10):
        sub_l = {f"field_{i}_{j}": f"value_{i}_{j}" for j in range(9)}
        sub_r = dict(sub_l)
        sub_r[f"field_{i}_0"] = f"changed_{i}"
        del sub_r[f"field_{i}_1"]
        sub_r[f"field_{i}_new"] = f"added_{i}"
        left[f"section_{i}"] = sub_l
        right[f"section_{i}"] = sub_r
    return left, right


def _make_edited_array_500() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate 500-element array pair with scattered inserts and removals.

    Every 25th element is dropped from the right side and every 40th gets an
    inserted record after it, so the LCS window spans almost the whole array.
    """
    items = [{"id": i, "name": f"item_{i}", "tags": [i % 7, i % 11]} for i in range(500)]
    edited: list[Any] = []
    for i, item in enumerate(items):
        if i % 25 == 5:
            continue
        edited.append(item)
        if i % 40 == 10:
            edited.append({"id": -i, "name": f"inserted_{i}", "tags": []})
    return {"items": items}, {"items": edited}


def _make_rewritten_flat(num_keys: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate flat pair with disjoint keys."""
    return (
        generate_flat_object(num_keys, prefix="user"),
        generate_flat_object(num_keys, prefix="product"),
    )


def _make_rewritten_nested_100() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate 100-key nested pair whose leaves all differ."""
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(10):
        left[f"section_{i}"] = {f"field_{i}_{j}": f"user_{i}_{j}" for j in range(9)}
        right[f"section_{i}"] = {f"field_{i}_{j}": j * i for j in range(9)}
    return left, right


def _make_rewritten_array_500() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate 500-element array pair with no common element."""
    left = [{"id": i, "kind": "user"} for i in range(500)]
    right = [{"id": i, "kind": "product"} for i in range(500)]
    return {"items": left}, {"items": right}


def _make_records(num_items: int) -> list[dict[str, Any]]:
    return [{"id": i, "name": f"item_{i}"} for i in range(num_items)]


def _make_rotated_array(num_items: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate array pair where the first record moves to the end."""
    items = _make_records(num_items)
    return {"items": items}, {"items": items[1:] + items[:1]}


def _make_nearly_identical_array(
    num_items: int,
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate array pair differing in one field of the middle record."""
    items = _make_records(num_items)
    edited = [dict(item) for item in items]
    edited[num_items // 2]["name"] = "renamed"
    return {"items": items}, {"items": edited}


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10key_edited() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-key flat pair, every third value changed."""
    return _make_edited_flat(10)


@pytest.fixture
def pair_10key_rewritten() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-key flat pair with disjoint keys."""
    return _make_rewritten_flat(10)


@pytest.fixture
def pair_100key_edited() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key nested pair (10 sections x 9 leaf keys), three edits per section."""
    return _make_edited_nested_100()


@pytest.fixture
def pair_100key_rewritten() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key nested pair with every leaf changed."""
    return _make_rewritten_nested_100()


@pytest.fixture
def pair_500item_edited() -> tuple[dict[str, Any], dict[str, Any]]:
    """500-element array pair with scattered inserts and removals."""
    return _make_edited_array_500()


@pytest.fixture
def pair_500item_rewritten() -> tuple[dict[str, Any], dict[str, Any]]:
    """500-element array pair with no common element."""
    return _make_rewritten_array_500()


@pytest.fixture
def pair_5000item_rotated() -> tuple[dict[str, Any], dict[str, Any]]:
    """5000-element array pair, first record moved to the end."""
    return _make_rotated_array(5000)


@pytest.fixture
def pair_5000item_nearly_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    """5000-element array pair with one changed field."""
    return _make_nearly_identical_array(5000)
