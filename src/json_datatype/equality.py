"""Equality, hashing and ordering rules for Documents.

Equality precedence:
1. Same instance -> equal.
2. Both documents carry verbatim text and the texts are identical -> equal.
   Textual identity is authoritative and short-circuits the tree comparison.
3. Otherwise the trees are compared structurally (object key order ignored,
   array order significant, numbers by value).

The hash is derived from the tree alone, never from the verbatim text, so
structurally equal documents hash alike whatever their original text.

Ordering is total but purely textual: equal documents compare as 0, any
other pair is ordered by its display-form strings, compared by UTF-16
code unit.  A missing (``None`` or ``ABSENT``) comparison target sorts below
every document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_datatype.navigator import Absent
from json_datatype.serializer import display_form
from json_datatype.textform import Verbatim
from json_datatype.tree.nodes import Node

if TYPE_CHECKING:
    from json_datatype.document import Document

__all__ = ["compare_documents", "documents_equal", "structural_hash"]


def documents_equal(left: Document, right: Document) -> bool:
    if left is right:
        return True
    left_form, right_form = left.text_form, right.text_form
    if (
        isinstance(left_form, Verbatim)
        and isinstance(right_form, Verbatim)
        and left_form.text == right_form.text
    ):
        return True
    return left.root == right.root


def structural_hash(node: Node) -> int:
    return hash(node)


def _sort_key(doc: Document) -> bytes:
    # Big-endian UTF-16 bytes order strings by UTF-16 code unit.
    return display_form(doc).encode("utf-16-be", "surrogatepass")


def compare_documents(left: Document, right: Document | Absent | None) -> int:
    """Compare two documents.

    Args:
        left:  The document being compared.
        right: The comparison target; ``None`` or ``ABSENT`` when missing.

    Returns:
        ``1`` when *right* is missing; ``0`` when the documents are equal;
        otherwise ``-1`` or ``1`` from comparing the display forms by UTF-16
        code unit, which differs from code point order only between
        characters above U+FFFF and those in U+E000..U+FFFF.
    """
    if right is None or isinstance(right, Absent):
        return 1
    if documents_equal(left, right):
        return 0
    left_key, right_key = _sort_key(left), _sort_key(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0
