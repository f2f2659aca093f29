"""Change tags and the DiffResult dataclass returned by compare() calls.

This module provides the rich result type returned by compare() calls and
its rendering into the plain-JSON wire shape consumed by UI highlighters::

    {
        "diffLeft":  {"/path": "delete" | "update" | "child-update", ...},
        "diffRight": {"/path": "create" | "update" | "child-update", ...},
        "count":     {"create": n, "update": n, "delete": n},
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

__all__ = ["Change", "DiffCount", "DiffMap", "DiffResult"]


class Change(StrEnum):
    """Classification of a difference at a path.

    - CREATE       -> "create"       : value exists only on this side
    - DELETE       -> "delete"       : value exists only on the other side
    - UPDATE       -> "update"       : value exists on both sides but differs
    - CHILD_UPDATE -> "child-update" : value unchanged but a descendant differs
    """

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    CHILD_UPDATE = "child-update"


DiffMap = dict[str, Change]


def _as_number(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


@dataclass(frozen=True, slots=True)
class DiffCount:
    """Aggregate tally of changes across both diff maps.

    Attributes:
        create: Number of created nodes (cascaded descendants included).
        update: Number of logical updates.  Each update is recorded once per
            side and counted 0.5 each time, so it contributes exactly 1.
        delete: Number of deleted nodes (cascaded descendants included).

    The tally is kept equal to the map entries: ``create`` is the number of
    "create" paths on the right, ``delete`` the number of "delete" paths on
    the left and ``update`` half the "update" paths of both sides.  Nodes
    whose paths collide (keys containing "/") are therefore counted once.
    """

    create: float = 0.0
    update: float = 0.0
    delete: float = 0.0

    @property
    def total(self) -> float:
        """Sum of creates, updates and deletes."""
        return self.create + self.update + self.delete

    def to_dict(self) -> dict[str, int | float]:
        return {
            "create": _as_number(self.create),
            "update": _as_number(self.update),
            "delete": _as_number(self.delete),
        }


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Result of a compare() call.

    Attributes:
        diff_left: Path -> Change for the left document.  Holds "delete",
            "update" and "child-update" entries.
        diff_right: Path -> Change for the right document.  Holds "create",
            "update" and "child-update" entries.
        count: Aggregate create/update/delete tally.
    """

    diff_left: DiffMap
    diff_right: DiffMap
    count: DiffCount

    @property
    def is_empty(self) -> bool:
        """True when both documents are identical."""
        return not self.diff_left and not self.diff_right

    def changed_paths(self) -> list[str]:
        """Sorted paths carrying a change other than "child-update" on either side."""
        paths = {
            path
            for diff_map in (self.diff_left, self.diff_right)
            for path, change in diff_map.items()
            if change != Change.CHILD_UPDATE
        }
        return sorted(paths)

    def to_dict(self) -> dict[str, Any]:
        """Render the result with plain string tags under camelCase keys."""
        return {
            "diffLeft": {path: str(change) for path, change in self.diff_left.items()},
            "diffRight": {
                path: str(change) for path, change in self.diff_right.items()
            },
            "count": self.count.to_dict(),
        }
