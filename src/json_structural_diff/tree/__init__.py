"""Tree subpackage for JSON value and path primitives.

Re-exports the public API for the tree module:
- MISSING: marker for a key absent from a mapping (distinct from null)
- ValueKind: StrEnum of the four value shapes (OBJECT, ARRAY, SCALAR, MISSING)
- classify / json_equal / iter_descendants: value helpers
- extend / ancestors_of / split: slash-path helpers
"""

from json_structural_diff.tree.paths import ROOT, ancestors_of, extend, split
from json_structural_diff.tree.values import (
    MISSING,
    JsonValue,
    ValueKind,
    classify,
    is_container,
    iter_descendants,
    json_equal,
)

__all__ = [
    "MISSING",
    "ROOT",
    "JsonValue",
    "ValueKind",
    "ancestors_of",
    "classify",
    "extend",
    "is_container",
    "iter_descendants",
    "json_equal",
    "split",
]
