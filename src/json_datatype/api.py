"""Public API functions for json-datatype.

Thin module-level entry points mirroring what the query engine calls:
parsing, strict path extraction, and nullable text extraction.  None of them
keep global state; ``ParseCache`` is the opt-in for reusing parse results.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from json_datatype.document import Document
from json_datatype.navigator import Absent, ResolveMode, resolve
from json_datatype.parser import parse, parse_bytes

__all__ = ["extract_path", "extract_path_text", "parse", "parse_bytes"]


def extract_path(doc: Document, path: Sequence[str]) -> Document:
    """Return the sub-document of *doc* at *path*.

    Args:
        doc:  Document to navigate.
        path: Ordered key/index segments, e.g. ``["f4", "f6"]``.

    Returns:
        The resolved Document (no verbatim text unless *path* is empty).

    Raises:
        PathNotFound: If any segment does not resolve.
    """
    return cast(Document, resolve(doc, path, ResolveMode.STRICT))


def extract_path_text(doc: Document, path: Sequence[str]) -> str | None:
    """Return the extracted scalar form of the value at *path*.

    Strings come back unquoted, numbers and booleans as their canonical text,
    arrays and objects as canonical JSON.

    Returns:
        The extracted text, or ``None`` when *path* does not resolve or
        resolves to JSON null.  Use ``Document.get_nullable`` when the two
        cases must be told apart.
    """
    result = resolve(doc, path, ResolveMode.NULLABLE)
    if isinstance(result, Absent):
        return None
    return result.serialize_to_string()
