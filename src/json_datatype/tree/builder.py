"""TreeBuilder: converts decoded JSON values into an immutable Node tree.

The decoding layer (see ``json_datatype.parser``) hands objects over as
``MemberPairs`` — the raw ``(key, value)`` pairs in source order, duplicates
included — so that duplicate-key collapse happens here, exactly once:

- the last occurrence of a key wins;
- keys are ordered by the position of their last occurrence.

Once collapsed, the discarded occurrences cannot be recovered from the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from json_datatype.tree.nodes import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Node,
)

__all__ = ["MemberPairs", "TreeBuilder", "collapse_duplicates"]

# Shared leaves; nodes are immutable so one instance serves every tree.
_NULL = JsonNull()
_TRUE = JsonBool(True)
_FALSE = JsonBool(False)


class MemberPairs(list[tuple[str, Any]]):
    """Object members exactly as they appeared in the source text."""


def collapse_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """Collapse repeated keys, keeping the last value of each.

    Keys come out ordered by their last occurrence:
    ``[("a", 1), ("b", 2), ("a", 3)]`` -> ``{"b": 2, "a": 3}``.
    """
    seen: dict[str, Any] = {}
    for key, value in reversed(pairs):
        if key not in seen:
            seen[key] = value
    return dict(reversed(seen.items()))


@dataclass
class TreeBuilder:
    """Converts decoded JSON values into a typed Node tree.

    Dispatch order matters: bool MUST be checked before int because bool is a
    subclass of int in Python (``isinstance(True, int)`` is True).

    Example::

        builder = TreeBuilder()
        node = builder.build(MemberPairs([("a", 1), ("a", 2)]))
        # node: JsonObject({"a": JsonNumber(2)})
    """

    def build(self, value: Any) -> Node:
        """Convert a decoded JSON value to a Node.

        Args:
            value: ``MemberPairs`` or ``dict`` for objects, ``list`` for arrays,
                ``str``, ``bool``, ``int``, ``Decimal`` or ``None``.

        Returns:
            The root Node of the converted tree.

        Raises:
            TypeError: If value (or anything nested in it) is not a
                supported decoded JSON type.
        """
        if value is None:
            return _NULL

        # CRITICAL: bool before int
        if isinstance(value, bool):
            return _TRUE if value else _FALSE

        if isinstance(value, str):
            return JsonString(value)

        if isinstance(value, (int, Decimal)):
            return JsonNumber(value)

        if isinstance(value, MemberPairs):
            return self._build_object(collapse_duplicates(value))

        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, list):
            return JsonArray(tuple(self.build(item) for item in value))

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _build_object(self, obj: dict[str, Any]) -> JsonObject:
        return JsonObject({key: self.build(val) for key, val in obj.items()})
