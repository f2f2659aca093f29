"""Array alignment into create/update/delete operations.

Turns the common runs reported by a ``CommonSubsequenceOracle`` into a stream
of ``(change, a_index, b_index)`` operations.  Inside each gap between two
common runs, the first ``min(a_count, b_count)`` unmatched elements are paired
in place as UPDATE; surplus left elements become DELETE and surplus right
elements become CREATE.  A gap with as many elements on both sides is all
UPDATE, never a DELETE + CREATE pair.

Example::

    list(align_sequences([1, 2, 3], [1, 5, 3, 4]))
    # [(Change.UPDATE, 1, 1), (Change.CREATE, 3, 3)]
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING, Any

from json_structural_diff.algorithm.lcs import LCSOracle
from json_structural_diff.result import Change
from json_structural_diff.tree.values import json_equal

if TYPE_CHECKING:
    from json_structural_diff.protocols import CommonSubsequenceOracle

__all__ = ["align_sequences"]

Operation = tuple[Change, int, int]


def align_sequences(
    a: Sequence[Any],
    b: Sequence[Any],
    equals: Callable[[Any, Any], bool] = json_equal,
    oracle: CommonSubsequenceOracle | None = None,
) -> Iterator[Operation]:
    """Lazily yield the operations aligning ``a`` with ``b``.

    CREATE operations carry the current left cursor as ``a_index`` and
    DELETE operations the current right cursor as ``b_index``; only the
    index of the side that holds the element is meaningful for them.

    Args:
        a: Left sequence.
        b: Right sequence.
        equals: Element equality.  Defaults to JSON deep equality.
        oracle: Common-subsequence oracle.  Defaults to ``LCSOracle()``.

    Yields:
        ``(change, a_index, b_index)`` with change in CREATE, UPDATE, DELETE.

    Raises:
        ValueError: If the oracle reports runs out of order or out of range.
    """
    if oracle is None:
        oracle = LCSOracle()

    a_length = len(a)
    b_length = len(b)

    def is_common(a_index: int, b_index: int) -> bool:
        return equals(a[a_index], b[b_index])

    runs = itertools.chain(
        oracle.common_runs(a_length, b_length, is_common),
        [(0, a_length, b_length)],
    )

    a_index = 0
    b_index = 0
    for n_common, a_common, b_common in runs:
        if (
            n_common < 0
            or a_common < a_index
            or b_common < b_index
            or a_common + n_common > a_length
            or b_common + n_common > b_length
        ):
            msg = (
                f"common run (n={n_common}, a={a_common}, b={b_common}) is out of "
                f"order or range at cursor (a={a_index}, b={b_index}) "
                f"for lengths ({a_length}, {b_length})"
            )
            raise ValueError(msg)

        update_count = min(a_common - a_index, b_common - b_index)
        for _ in range(update_count):
            yield Change.UPDATE, a_index, b_index
            a_index += 1
            b_index += 1

        while a_index < a_common:
            yield Change.DELETE, a_index, b_index
            a_index += 1

        while b_index < b_common:
            yield Change.CREATE, a_index, b_index
            b_index += 1

        a_index += n_common
        b_index += n_common
