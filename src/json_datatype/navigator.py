"""Path Navigator: resolves key/index path segments against a Document.

For each segment, starting at the document's root:

- Array node: the segment must be a base-10 integer index within bounds.
- Any other node: the segment is looked up as an exact object key.  Scalars
  have no named children, so every lookup on them misses.

Strict and nullable resolution share a single traversal routine; they differ
only in the miss strategy handed to it.  ``STRICT`` raises ``PathNotFound``;
``NULLABLE`` returns ``ABSENT``, which is distinct from a resolved Document
whose value is JSON null.

The resolved Document never carries verbatim text, except for the empty path,
which returns the input Document itself.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Union

from json_datatype.exceptions import PathNotFound
from json_datatype.tree.nodes import JsonArray, JsonObject, Node

if TYPE_CHECKING:
    from json_datatype.document import Document

__all__ = [
    "ABSENT",
    "Absent",
    "ResolveMode",
    "Resolution",
    "resolve",
    "resolve_node",
]

# Optional sign then ASCII digits only; int() alone would also accept
# whitespace, underscores and non-ASCII digits.
_INDEX = re.compile(r"[+-]?[0-9]+")


class ResolveMode(StrEnum):
    """How a path miss is signalled.

    - STRICT:   raise ``PathNotFound``.
    - NULLABLE: return ``ABSENT``.
    """

    STRICT = auto()
    NULLABLE = auto()


class Absent:
    """Singleton for a path that does not resolve in nullable mode."""

    _instance: Absent | None = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()

Resolution = Union["Document", Absent]

# A miss strategy either raises or returns the value to hand back to the caller.
MissStrategy = Callable[[str, Sequence[str]], Absent]


def _raise_missing(segment: str, resolved: Sequence[str]) -> Absent:
    raise PathNotFound(segment, resolved)


def _absent(segment: str, resolved: Sequence[str]) -> Absent:
    return ABSENT


_STRATEGIES: dict[ResolveMode, MissStrategy] = {
    ResolveMode.STRICT: _raise_missing,
    ResolveMode.NULLABLE: _absent,
}


def _child(node: Node, segment: str) -> Node | None:
    if isinstance(node, JsonArray):
        if not _INDEX.fullmatch(segment):
            return None
        index = int(segment)
        if 0 <= index < len(node.items):
            return node.items[index]
        return None
    if isinstance(node, JsonObject):
        return node.get(segment)
    return None


def resolve_node(
    root: Node, path: Sequence[str], on_miss: MissStrategy
) -> Node | Absent:
    """Walk *path* from *root*, returning the terminal node.

    Args:
        root: Node to start from.
        path: Ordered path segments.
        on_miss: Called with the failing segment and the segments resolved so
            far; its return value is returned (or it raises).

    Returns:
        The terminal Node, or whatever *on_miss* returns on a miss.
    """
    node = root
    for depth, segment in enumerate(path):
        child = _child(node, segment)
        if child is None:
            return on_miss(segment, path[:depth])
        node = child
    return node


def resolve(
    doc: Document,
    path: Sequence[str],
    mode: ResolveMode = ResolveMode.STRICT,
) -> Resolution:
    """Resolve *path* against *doc*.

    Args:
        doc:  Document to navigate.
        path: Ordered string segments; an empty path returns *doc* unchanged.
        mode: ``STRICT`` (default) or ``NULLABLE``.

    Returns:
        A new Document wrapping the resolved node (no verbatim text), or
        ``ABSENT`` in nullable mode when a segment does not resolve.

    Raises:
        PathNotFound: In strict mode, when a segment does not resolve.
        TypeError: If *path* is a bare string rather than a sequence of them.
    """
    if isinstance(path, str):
        raise TypeError("path must be a sequence of segments, not a str")
    if not path:
        return doc
    result = resolve_node(doc.root, tuple(path), _STRATEGIES[ResolveMode(mode)])
    if isinstance(result, Absent):
        return result
    return doc.from_node(result)
