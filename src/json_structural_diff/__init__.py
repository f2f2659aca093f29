"""JSON structural diff - path-indexed change maps for two JSON documents."""

from __future__ import annotations

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.api import (
    change_count,
    compare,
    diff,
    is_unchanged,
)
from json_structural_diff.comparator import JsonDiffComparator
from json_structural_diff.result import Change, DiffCount, DiffResult
from json_structural_diff.tree.values import MISSING

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "Change",
    "DiffConfig",
    "DiffCount",
    "DiffResult",
    "JsonDiffComparator",
    "change_count",
    "compare",
    "diff",
    "is_unchanged",
]
