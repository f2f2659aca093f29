"""Public API functions for json-structural-diff.

This module provides the four user-facing functions: compare, diff,
is_unchanged, and change_count.  Each call creates a fresh
JsonDiffComparator to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.comparator import JsonDiffComparator
from json_structural_diff.result import DiffCount, DiffResult

__all__ = ["change_count", "compare", "diff", "is_unchanged"]


def compare(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Compare two JSON values and return a DiffResult.

    Args:
        left:   First JSON value (dict, list, str, int, float, bool, None).
        right:  Second JSON value.
        config: Comparison options. Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``DiffResult`` with ``diff_left``, ``diff_right`` and ``count``.
    """
    return JsonDiffComparator(config=config).compare(left, right)


def diff(left: Any, right: Any) -> dict[str, Any]:
    """Compare two JSON values and return the plain-JSON wire shape.

    Returns:
        ``{"diffLeft": {...}, "diffRight": {...}, "count": {...}}`` with
        string change tags, ready for ``json.dumps``.
    """
    return compare(left, right).to_dict()


def is_unchanged(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if the comparison records no change at all."""
    return compare(left, right, config=config).is_empty


def change_count(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> DiffCount:
    """Return only the create/update/delete tally of the comparison."""
    return compare(left, right, config=config).count
