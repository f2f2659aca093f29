"""LCSOracle: longest-common-subsequence runs for array alignment.

Default ``CommonSubsequenceOracle``.  Common leading and trailing elements are
matched directly; the remaining window is split with Myers' middle-snake
search and both halves are solved recursively.

The search walks the edit graph from both corners at once, one edit at a
time, keeping for every diagonal ``k = x - y`` the furthest ``x`` reached.
Equality is only asked along the diagonals being extended (the "snakes"), so
two sequences ``D`` edits apart cost ``O((N + M) * D)`` predicate calls and
``O(N + M)`` memory::

    forward  x = V[k + 1]          if k == -d or V[k - 1] < V[k + 1]  (insert)
               = V[k - 1] + 1      otherwise                          (delete)

When the forward and reverse frontiers meet on a diagonal, the forward
endpoint there lies on a shortest edit path and becomes the split point.
"""

from __future__ import annotations

import numpy as np

from json_structural_diff.protocols import IndexPredicate

__all__ = ["LCSOracle"]

Run = tuple[int, int, int]


class LCSOracle:
    """Common-subsequence oracle backed by Myers' O(ND) difference search.

    The result is deterministic.  Where several longest common subsequences
    exist, the forward search prefers skipping a left element over skipping
    a right one.

    Example::

        oracle = LCSOracle()
        a, b = "abcd", "axcd"
        oracle.common_runs(len(a), len(b), lambda i, j: a[i] == b[j])
        # [(1, 0, 0), (2, 2, 2)]
    """

    def common_runs(
        self,
        a_length: int,
        b_length: int,
        is_common: IndexPredicate,
    ) -> list[Run]:
        """Return maximal common runs ``(n_common, a_start, b_start)`` in order.

        Args:
            a_length: Length of the left sequence.
            b_length: Length of the right sequence.
            is_common: ``is_common(a_index, b_index)`` is True when the two
                elements are equal.  Called lazily, only for index pairs on
                the diagonals being explored.

        Returns:
            Runs covering one longest common subsequence.  Empty when the
            sequences share no element.
        """
        runs: list[Run] = []
        self._solve(0, a_length, 0, b_length, is_common, runs)
        return _merge_adjacent(runs)

    # ------------------------------------------------------------------
    # Divide and conquer
    # ------------------------------------------------------------------

    def _solve(
        self,
        a_start: int,
        a_end: int,
        b_start: int,
        b_end: int,
        is_common: IndexPredicate,
        runs: list[Run],
    ) -> None:
        """Append the runs of ``a[a_start:a_end]`` against ``b[b_start:b_end]``."""
        limit = min(a_end - a_start, b_end - b_start)

        prefix = 0
        while prefix < limit and is_common(a_start + prefix, b_start + prefix):
            prefix += 1

        suffix = 0
        while suffix < limit - prefix and is_common(
            a_end - 1 - suffix, b_end - 1 - suffix
        ):
            suffix += 1

        if prefix:
            runs.append((prefix, a_start, b_start))

        a_low, a_high = a_start + prefix, a_end - suffix
        b_low, b_high = b_start + prefix, b_end - suffix
        if a_low < a_high and b_low < b_high:
            x, y = self._split_point(a_low, a_high, b_low, b_high, is_common)
            self._solve(a_low, a_low + x, b_low, b_low + y, is_common, runs)
            self._solve(a_low + x, a_high, b_low + y, b_high, is_common, runs)

        if suffix:
            runs.append((suffix, a_high, b_high))

    # ------------------------------------------------------------------
    # Middle snake
    # ------------------------------------------------------------------

    def _split_point(
        self,
        a_start: int,
        a_end: int,
        b_start: int,
        b_end: int,
        is_common: IndexPredicate,
    ) -> tuple[int, int]:
        """Return a window-relative point ``(x, y)`` on a shortest edit path.

        The window must be non-empty on both sides and must not start or end
        with a common element, so the point is never ``(0, 0)`` nor the far
        corner and both halves are strictly smaller.
        """
        n = a_end - a_start
        m = b_end - b_start
        delta = n - m
        # With an odd delta the frontiers can only meet on a forward step
        front = delta % 2 != 0

        max_d = (n + m + 1) // 2
        offset = max_d
        size = 2 * max_d + 2
        forward = np.full(size, -1, dtype=np.int64)
        reverse = np.full(size, -1, dtype=np.int64)
        forward[offset + 1] = 0
        reverse[offset + 1] = 0

        # Diagonals that ran off the grid are trimmed from both ends
        f_low = f_high = r_low = r_high = 0

        for d in range(max_d):
            for k in range(-d + f_low, d + 1 - f_high, 2):
                i = offset + k
                if k == -d or (k != d and forward[i - 1] < forward[i + 1]):
                    x = int(forward[i + 1])
                else:
                    x = int(forward[i - 1]) + 1
                y = x - k
                while x < n and y < m and is_common(a_start + x, b_start + y):
                    x += 1
                    y += 1
                forward[i] = x
                if x > n:
                    f_high += 2
                elif y > m:
                    f_low += 2
                elif front:
                    j = offset + delta - k
                    if 0 <= j < size and reverse[j] != -1 and x >= n - reverse[j]:
                        return x, y

            for k in range(-d + r_low, d + 1 - r_high, 2):
                i = offset + k
                if k == -d or (k != d and reverse[i - 1] < reverse[i + 1]):
                    x = int(reverse[i + 1])
                else:
                    x = int(reverse[i - 1]) + 1
                y = x - k
                while (
                    x < n
                    and y < m
                    and is_common(a_end - 1 - x, b_end - 1 - y)
                ):
                    x += 1
                    y += 1
                reverse[i] = x
                if x > n:
                    r_high += 2
                elif y > m:
                    r_low += 2
                elif not front:
                    j = offset + delta - k
                    if 0 <= j < size and forward[j] != -1:
                        forward_x = int(forward[j])
                        if forward_x >= n - x:
                            return forward_x, forward_x - (delta - k)

        # The frontiers only fail to meet when nothing in the window matches
        return n, 0


def _merge_adjacent(runs: list[Run]) -> list[Run]:
    """Merge runs that continue each other in both sequences."""
    merged: list[Run] = []
    for n_common, a_start, b_start in runs:
        if merged:
            prev_n, prev_a, prev_b = merged[-1]
            if prev_a + prev_n == a_start and prev_b + prev_n == b_start:
                merged[-1] = (prev_n + n_common, prev_a, prev_b)
                continue
        merged.append((n_common, a_start, b_start))
    return merged
