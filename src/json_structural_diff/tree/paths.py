"""Slash-delimited paths addressing nodes inside a JSON value tree.

Paths follow the same convention as JSON Pointer without escaping:
- Root is "" (empty string)
- Each level appends "/{key_or_index}"

Paths are plain immutable strings; they are only ever extended, never edited.
"""

from __future__ import annotations

ROOT: str = ""
SEPARATOR: str = "/"


def extend(path: str, segment: str | int) -> str:
    """Return the child path of ``path`` for a mapping key or sequence index.

    Example::

        extend("", "foo")      # "/foo"
        extend("/foo", 2)      # "/foo/2"
    """
    return f"{path}{SEPARATOR}{segment}"


def ancestors_of(path: str) -> list[str]:
    """Return the strict ancestors of ``path``, nearest first, root last.

    Each step strips the trailing segment.  The root has no ancestors.

    Example::

        ancestors_of("/foo/2/bar")  # ["/foo/2", "/foo", ""]
        ancestors_of("")            # []
    """
    ancestors: list[str] = []
    while path:
        index = path.rfind(SEPARATOR)
        path = path[:index] if index >= 0 else ROOT
        ancestors.append(path)
    return ancestors


def split(path: str) -> list[str]:
    """Return the segments of ``path`` (``[]`` for the root)."""
    if not path:
        return []
    return path.split(SEPARATOR)[1:]
