"""Document: an immutable JSON value as exposed to the query engine.

A Document pairs the root Node of a parsed tree with a text-form tag:
``Verbatim(text)`` for documents produced directly by the parser and
``DERIVED`` for everything else (navigation results, documents built from a
Node).  Serialization, equality and ordering all dispatch on that tag; see
``json_datatype.serializer`` and ``json_datatype.equality``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import total_ordering
from typing import cast

from json_datatype.equality import compare_documents, documents_equal, structural_hash
from json_datatype.navigator import Absent, Resolution, ResolveMode, resolve
from json_datatype.serializer import display_form, estimate_byte_size, extract_text
from json_datatype.textform import DERIVED, TextForm, Verbatim
from json_datatype.tree.nodes import Node, NodeType

__all__ = ["Document"]


@total_ordering
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Document:
    """Immutable JSON document.

    Attributes:
        root: Root node of the value tree.
        text_form: ``Verbatim(text)`` when the document came straight from the
            parser, ``DERIVED`` otherwise.

    Example::

        from json_datatype import parse

        doc = parse('{"f4":{"f6":{"f7":"2"}}}')
        str(doc.get("f4", "f6"))                          # '{"f7":"2"}'
        doc.get("f4", "f6", "f7").serialize_to_string()   # '2'
    """

    root: Node
    text_form: TextForm = DERIVED

    def __post_init__(self) -> None:
        if self.root is None:
            raise ValueError("root node cannot be None")

    @classmethod
    def from_node(cls, node: Node) -> Document:
        """Wrap *node* in a Document without verbatim text."""
        return cls(node, DERIVED)

    # -- Accessors ------------------------------------------------------

    @property
    def node_type(self) -> NodeType:
        return self.root.node_type

    @property
    def verbatim_text(self) -> str | None:
        """The original input text, or None for a derived document."""
        if isinstance(self.text_form, Verbatim):
            return self.text_form.text
        return None

    # -- Navigation -----------------------------------------------------

    def resolve(
        self, path: Sequence[str], mode: ResolveMode = ResolveMode.STRICT
    ) -> Resolution:
        return resolve(self, path, mode)

    def get(self, *path: str) -> Document:
        """Resolve *path* strictly; raises ``PathNotFound`` on a miss."""
        return cast(Document, resolve(self, path, ResolveMode.STRICT))

    def get_nullable(self, *path: str) -> Document | Absent:
        """Resolve *path*, returning ``ABSENT`` instead of raising on a miss."""
        return resolve(self, path, ResolveMode.NULLABLE)

    # -- Serialization --------------------------------------------------

    def serialize_to_string(self) -> str | None:
        return extract_text(self)

    def estimate_byte_size(self) -> int:
        return estimate_byte_size(self)

    def __str__(self) -> str:
        return display_form(self)

    def __repr__(self) -> str:
        return f"Document({display_form(self)!r}, {self.text_form!r})"

    # -- Equality & ordering --------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return documents_equal(self, other)

    def __hash__(self) -> int:
        return structural_hash(self.root)

    def compare_to(self, other: Document | Absent | None) -> int:
        return compare_documents(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return compare_documents(self, other) < 0
