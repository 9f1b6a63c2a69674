"""Serializer: the two textual forms of a Document, plus its size estimate.

- Display form (``str(doc)``): the verbatim input text when there is one,
  otherwise the canonical compact rendering of the tree.
- Extracted scalar form (``doc.serialize_to_string()``): leaves lose their
  JSON quoting and escaping (``"2"`` -> ``2``) while arrays and objects are
  rendered as canonical JSON, so extracted containers stay parseable.
  JSON null extracts to ``None``.

The canonical rendering uses ``,`` and ``:`` separators with no whitespace,
standard JSON string escaping with non-ASCII characters left as-is, and
``canonical_number`` for numbers.
"""

from __future__ import annotations

import json
from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal
from typing import TYPE_CHECKING

from json_datatype.textform import Derived, Verbatim
from json_datatype.tree.nodes import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Node,
)

if TYPE_CHECKING:
    from json_datatype.document import Document

__all__ = [
    "canonical_json",
    "canonical_number",
    "display_form",
    "estimate_byte_size",
    "extract_text",
]

# Integral decimals with more digits than this keep their exponent.
_MAX_PLAIN_DIGITS = 21


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def canonical_number(value: int | Decimal) -> str:
    """Return the canonical decimal string of a JSON number.

    Integers, and integer literals too long for ``int`` that the parser keeps
    as ``Decimal``, render as plain base-10 digits.  Other decimals are
    normalized: trailing fractional zeros are dropped and integral values
    below 1e21 render as integers, so ``1.50`` -> ``1.5``, ``2.0`` -> ``2`` and
    ``1e2`` -> ``100``.  Larger magnitudes, and magnitudes below 1e-6, keep an
    exponent (``1E+21``, ``1.5E-7``).

    Numbers are held exactly rather than as binary doubles, so the rendering
    follows the decimal value and not a double's text (``2.0``, ``1.0E21``),
    and fractional literals that differ only in trailing zeros render alike.
    """
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            return format(Decimal(value), "f")
    if value.is_zero():
        return "0"
    if value.as_tuple().exponent == 0:
        return format(value, "f")
    normalized = value.normalize(_exact_context(value))
    if (
        normalized.adjusted() < _MAX_PLAIN_DIGITS
        and normalized == normalized.to_integral_value()
    ):
        return format(normalized, "f")
    return str(normalized)


def _exact_context(value: Decimal) -> Context:
    # Wide enough that normalize() never rounds or overflows.
    return Context(
        prec=max(len(value.as_tuple().digits), 1), Emax=MAX_EMAX, Emin=MIN_EMIN
    )


def canonical_json(node: Node) -> str:
    """Render *node* as compact canonical JSON text."""
    parts: list[str] = []
    _render(node, parts)
    return "".join(parts)


def _render(node: Node, parts: list[str]) -> None:
    if isinstance(node, JsonNull):
        parts.append("null")
    elif isinstance(node, JsonBool):
        parts.append("true" if node.value else "false")
    elif isinstance(node, JsonNumber):
        parts.append(canonical_number(node.value))
    elif isinstance(node, JsonString):
        parts.append(_quote(node.value))
    elif isinstance(node, JsonArray):
        parts.append("[")
        for idx, item in enumerate(node.items):
            if idx:
                parts.append(",")
            _render(item, parts)
        parts.append("]")
    elif isinstance(node, JsonObject):
        parts.append("{")
        for idx, (key, child) in enumerate(node.members.items()):
            if idx:
                parts.append(",")
            parts.append(_quote(key))
            parts.append(":")
            _render(child, parts)
        parts.append("}")
    else:
        raise TypeError(f"Unsupported node type: {type(node)!r}")


def display_form(doc: Document) -> str:
    """Return the verbatim input text if present, else the canonical rendering."""
    form = doc.text_form
    if isinstance(form, Verbatim):
        return form.text
    if isinstance(form, Derived):
        return canonical_json(doc.root)
    raise TypeError(f"Unsupported text form: {form!r}")


def extract_text(doc: Document) -> str | None:
    """Return the extracted scalar form of *doc*.

    Returns:
        ``None`` for JSON null; ``"true"``/``"false"`` for booleans; the
        canonical decimal string for numbers; the raw, unquoted content for
        strings; canonical JSON text for arrays and objects.  The verbatim
        text is never used here, even for containers.
    """
    node = doc.root
    if isinstance(node, JsonNull):
        return None
    if isinstance(node, JsonBool):
        return "true" if node.value else "false"
    if isinstance(node, JsonNumber):
        return canonical_number(node.value)
    if isinstance(node, JsonString):
        return node.value
    return canonical_json(node)


def estimate_byte_size(doc: Document) -> int:
    """Estimate the stored size of *doc*.

    Uses the length of the verbatim text when present, otherwise the length
    of the canonical rendering.  A Derived document whose root is JSON null
    has no extracted text and reports ``1``; the estimate is never ``0``.
    """
    form = doc.text_form
    if isinstance(form, Verbatim):
        return max(len(form.text), 1)
    if isinstance(doc.root, JsonNull):
        return 1
    return max(len(canonical_json(doc.root)), 1)
