"""Immutable JSON value tree: NodeType StrEnum and the six node variants.

Every node is a frozen, slotted dataclass.  Containers hold their children in
immutable collections (``tuple`` for arrays, a read-only mapping for objects),
so a tree built once at parse time can be shared freely without copying.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum, auto
from types import MappingProxyType
from typing import ClassVar, Union

__all__ = [
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "Node",
    "NodeType",
]


class NodeType(StrEnum):
    """Enumeration of the six JSON node kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOL    -> "bool"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


@dataclass(frozen=True, slots=True)
class JsonNull:
    node_type: ClassVar[NodeType] = NodeType.NULL
    is_container: ClassVar[bool] = False

    @property
    def is_value(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class JsonBool:
    value: bool
    node_type: ClassVar[NodeType] = NodeType.BOOL
    is_container: ClassVar[bool] = False

    @property
    def is_value(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """A JSON number.

    Attributes:
        value: ``int`` for integral literals, ``Decimal`` for anything with a
            fraction or exponent.  Binary floats are never stored, so no
            precision is lost between parsing and rendering.

    Equality is by numeric value (``JsonNumber(1) == JsonNumber(Decimal("1.0"))``),
    and so is the hash, because ``hash(1) == hash(Decimal("1.0"))``.
    """

    value: int | Decimal
    node_type: ClassVar[NodeType] = NodeType.NUMBER
    is_container: ClassVar[bool] = False

    @property
    def is_value(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class JsonString:
    value: str
    node_type: ClassVar[NodeType] = NodeType.STRING
    is_container: ClassVar[bool] = False

    @property
    def is_value(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class JsonArray:
    """An ordered JSON array.  Element order is significant for equality."""

    items: tuple[Node, ...] = ()
    node_type: ClassVar[NodeType] = NodeType.ARRAY
    is_container: ClassVar[bool] = True

    @property
    def is_value(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)


@dataclass(frozen=True, slots=True, eq=False)
class JsonObject:
    """A JSON object with unique keys.

    ``members`` is wrapped in a read-only ``MappingProxyType`` on construction.
    Iteration follows insertion order, but equality and hashing ignore it:
    two objects are equal when they have the same key set and each key maps
    to an equal node.

    Attributes:
        members: Mapping from key to child node.
    """

    members: Mapping[str, Node] = field(default_factory=dict)
    node_type: ClassVar[NodeType] = NodeType.OBJECT
    is_container: ClassVar[bool] = True

    def __post_init__(self) -> None:
        # Private copy so later changes to the caller's dict cannot leak in.
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    @property
    def is_value(self) -> bool:
        return False

    def get(self, key: str) -> Node | None:
        return self.members.get(key)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        # dict equality is key-order independent
        return dict(self.members) == dict(other.members)

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))


Node = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]
