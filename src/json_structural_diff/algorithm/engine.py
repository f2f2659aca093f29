"""DiffEngine: recursive structural comparison of two JSON value trees.

Traverses both values simultaneously and reports every difference to a
``ChangeRecorder``.

Architecture:
- ARRAY / ARRAY:   elements aligned by ``align_sequences``; CREATE and DELETE
                   operations are recorded, UPDATE pairs are compared
                   recursively so nested differences get precise paths.
- OBJECT / OBJECT: the union of keys is walked; a key absent on one side is
                   compared as ``MISSING``.
- anything else:   leaf comparison.  Unequal values are recorded as UPDATE on
                   both sides, except when a side is missing or either side
                   is a container (a type switch), which records DELETE on
                   the left and CREATE on the right instead.

Mapping comparison is a plain key-union walk: renamed or moved keys show up
as a delete plus a create.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from json_structural_diff.algorithm.aligner import align_sequences
from json_structural_diff.algorithm.lcs import LCSOracle
from json_structural_diff.algorithm.recorder import ChangeRecorder, Side
from json_structural_diff.result import Change
from json_structural_diff.tree.paths import ROOT, extend
from json_structural_diff.tree.values import (
    MISSING,
    ValueKind,
    classify,
    json_equal,
)

if TYPE_CHECKING:
    from json_structural_diff.protocols import CommonSubsequenceOracle

logger = logging.getLogger(__name__)

_CONTAINERS = frozenset({ValueKind.OBJECT, ValueKind.ARRAY})


class DiffEngine:
    """Recursive structural comparator.

    The engine holds no per-comparison state; all results flow into the
    ``ChangeRecorder`` passed to ``run``, so one engine can serve any number
    of comparisons, including concurrent ones.

    Inputs must be acyclic.  A cyclic structure recurses until Python raises
    ``RecursionError``.

    Example::

        from json_structural_diff.algorithm import ChangeRecorder, DiffEngine

        recorder = ChangeRecorder()
        DiffEngine().run([1, 2, 3], [1, 5, 3], recorder)
        recorder.result().diff_left   # {"/1": "update", "": "child-update"}
    """

    def __init__(self, oracle: CommonSubsequenceOracle | None = None) -> None:
        """Initialise the engine.

        Args:
            oracle: Common-subsequence oracle used to align arrays.  Defaults
                to ``LCSOracle()``.
        """
        self._oracle = oracle if oracle is not None else LCSOracle()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        left: Any,
        right: Any,
        recorder: ChangeRecorder,
        path_left: str = ROOT,
        path_right: str = ROOT,
    ) -> None:
        """Compare ``left`` with ``right`` and record every difference.

        Raises:
            TypeError: If either value contains a non-JSON value.
        """
        self._compare(left, right, path_left, path_right, recorder)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _compare(
        self,
        left: Any,
        right: Any,
        path_left: str,
        path_right: str,
        recorder: ChangeRecorder,
    ) -> None:
        left_kind = classify(left)
        right_kind = classify(right)

        if left_kind == ValueKind.ARRAY and right_kind == ValueKind.ARRAY:
            self._compare_arrays(left, right, path_left, path_right, recorder)
            return

        if left_kind == ValueKind.OBJECT and right_kind == ValueKind.OBJECT:
            self._compare_objects(left, right, path_left, path_right, recorder)
            return

        self._compare_leaves(
            left, right, left_kind, right_kind, path_left, path_right, recorder
        )

    # ------------------------------------------------------------------
    # Per-shape comparison
    # ------------------------------------------------------------------

    def _compare_arrays(
        self,
        left: Any,
        right: Any,
        path_left: str,
        path_right: str,
        recorder: ChangeRecorder,
    ) -> None:
        operations = 0
        for change, a_index, b_index in align_sequences(
            left, right, oracle=self._oracle
        ):
            operations += 1
            if change == Change.CREATE:
                recorder.record(
                    right[b_index], extend(path_right, b_index), Change.CREATE, Side.RIGHT
                )
            elif change == Change.DELETE:
                recorder.record(
                    left[a_index], extend(path_left, a_index), Change.DELETE, Side.LEFT
                )
            else:
                self._compare(
                    left[a_index],
                    right[b_index],
                    extend(path_left, a_index),
                    extend(path_right, b_index),
                    recorder,
                )

        if operations:
            logger.debug(
                "aligned arrays %r (%d items) and %r (%d items): %d operations",
                path_left,
                len(left),
                path_right,
                len(right),
                operations,
            )

    def _compare_objects(
        self,
        left: dict[str, Any],
        right: dict[str, Any],
        path_left: str,
        path_right: str,
        recorder: ChangeRecorder,
    ) -> None:
        # dict preserves insertion order: left keys first, then right-only keys
        keys = dict.fromkeys(left) | dict.fromkeys(right)
        for key in keys:
            self._compare(
                left.get(key, MISSING),
                right.get(key, MISSING),
                extend(path_left, key),
                extend(path_right, key),
                recorder,
            )

    def _compare_leaves(
        self,
        left: Any,
        right: Any,
        left_kind: ValueKind,
        right_kind: ValueKind,
        path_left: str,
        path_right: str,
        recorder: ChangeRecorder,
    ) -> None:
        if left is right or (
            left_kind == ValueKind.SCALAR
            and right_kind == ValueKind.SCALAR
            and json_equal(left, right)
        ):
            return

        # Only reached when the two sides are not both arrays or both objects,
        # so a container on either side means the value changed shape.
        switched = left_kind in _CONTAINERS or right_kind in _CONTAINERS

        if left_kind != ValueKind.MISSING:
            change = (
                Change.DELETE
                if right_kind == ValueKind.MISSING or switched
                else Change.UPDATE
            )
            recorder.record(left, path_left, change, Side.LEFT)

        if right_kind != ValueKind.MISSING:
            change = (
                Change.CREATE
                if left_kind == ValueKind.MISSING or switched
                else Change.UPDATE
            )
            recorder.record(right, path_right, change, Side.RIGHT)
