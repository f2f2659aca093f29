"""ChangeRecorder: per-comparison accumulator for diff maps and counts.

One recorder is created per top-level comparison and passed explicitly down
the recursion.  Each ``record`` call:

1. writes the change at its path in the left or right map,
2. bumps the count (1 for create/delete, 0.5 for update since every update
   is recorded once per side),
3. marks every ancestor path "child-update" unless it already has an entry,
4. for a created/deleted container, marks every descendant with the same
   change and counts each of them.

The tally always mirrors the map entries: a write that leaves a path
unchanged is not counted again, and overwriting a counted entry takes the
old change off the tally.  Keys containing "/" can make two nodes share a
path, and the counts then still match the maps.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

from json_structural_diff.result import Change, DiffCount, DiffMap, DiffResult
from json_structural_diff.tree.paths import ancestors_of
from json_structural_diff.tree.values import iter_descendants

__all__ = ["ChangeRecorder", "Side"]

_WEIGHTS: dict[Change, float] = {
    Change.CREATE: 1.0,
    Change.UPDATE: 0.5,
    Change.DELETE: 1.0,
}
_CASCADING = frozenset({Change.CREATE, Change.DELETE})


class Side(StrEnum):
    """Which document a change belongs to."""

    LEFT = auto()
    RIGHT = auto()


class ChangeRecorder:
    """Accumulates the left/right diff maps and the change tally.

    Example::

        recorder = ChangeRecorder()
        recorder.record({"b": 1}, "/a", Change.DELETE, Side.LEFT)
        recorder.diff_map(Side.LEFT)
        # {"/a": "delete", "": "child-update", "/a/b": "delete"}
    """

    def __init__(self) -> None:
        self._maps: dict[Side, DiffMap] = {Side.LEFT: {}, Side.RIGHT: {}}
        self._counts: dict[Change, float] = {
            Change.CREATE: 0.0,
            Change.UPDATE: 0.0,
            Change.DELETE: 0.0,
        }

    def record(self, value: Any, path: str, change: Change, side: Side) -> None:
        """Record ``change`` for ``value`` at ``path`` in the ``side`` map.

        Raises:
            ValueError: If ``change`` is CHILD_UPDATE, which is only ever
                derived from descendants.
        """
        if change not in _WEIGHTS:
            msg = f"cannot record {change!r} directly; use create, update or delete"
            raise ValueError(msg)

        target = self._maps[side]
        self._write(target, path, change)

        for ancestor in ancestors_of(path):
            target.setdefault(ancestor, Change.CHILD_UPDATE)

        if change in _CASCADING:
            for child_path, _ in iter_descendants(value, path):
                self._write(target, child_path, change)

    def _write(self, target: DiffMap, path: str, change: Change) -> None:
        previous = target.get(path)
        if previous == change:
            return
        if previous is not None and previous in _WEIGHTS:
            self._counts[previous] -= _WEIGHTS[previous]
        target[path] = change
        self._counts[change] += _WEIGHTS[change]

    def diff_map(self, side: Side) -> DiffMap:
        """Return a copy of the map recorded so far for ``side``."""
        return dict(self._maps[side])

    @property
    def count(self) -> DiffCount:
        return DiffCount(
            create=self._counts[Change.CREATE],
            update=self._counts[Change.UPDATE],
            delete=self._counts[Change.DELETE],
        )

    def result(self) -> DiffResult:
        """Snapshot the accumulated state as a DiffResult."""
        return DiffResult(
            diff_left=self.diff_map(Side.LEFT),
            diff_right=self.diff_map(Side.RIGHT),
            count=self.count,
        )
