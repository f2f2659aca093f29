"""CommonSubsequenceOracle Protocol for the sequence-alignment extension point.

Defines the structural interface any longest-common-subsequence or
edit-distance algorithm must satisfy to drive array alignment.  Users can plug
in a custom oracle without inheriting from any base class; any class with a
conformant ``common_runs`` method passes ``isinstance`` checks.

Example::

    from json_structural_diff.protocols import CommonSubsequenceOracle

    class NoMatches:
        def common_runs(self, a_length, b_length, is_common):
            return []

    assert isinstance(NoMatches(), CommonSubsequenceOracle)  # True, structural conformance
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

__all__ = ["CommonSubsequenceOracle", "IndexPredicate"]

IndexPredicate = Callable[[int, int], bool]


@runtime_checkable
class CommonSubsequenceOracle(Protocol):
    """Structural protocol for common-subsequence oracles.

    Any class implementing ``common_runs(self, a_length, b_length, is_common)``
    satisfies this protocol at runtime, no inheritance required.

    The ``common_runs`` method must:
    - Only call ``is_common(a_index, b_index)`` with indices in range.
    - Return ``(n_common, a_start, b_start)`` triples in chronological order:
      runs never overlap and start after the previous run ends in both
      sequences.
    - Cover a longest common subsequence when minimal alignment is wanted
      (the aligner checks ordering, not optimality).
    """

    def common_runs(
        self,
        a_length: int,
        b_length: int,
        is_common: IndexPredicate,
    ) -> Iterable[tuple[int, int, int]]: ...
