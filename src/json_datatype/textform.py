"""Text-form tag attached to every Document.

A Document either carries the exact input text it was parsed from
(``Verbatim``) or has no original text and renders its tree on demand
(``Derived``).  Code that reads a Document's text must handle both cases
explicitly; there is no ``None`` to forget about.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = ["DERIVED", "Derived", "TextForm", "Verbatim"]


@dataclass(frozen=True, slots=True)
class Verbatim:
    """The exact input string, stored as received and never normalized."""

    text: str


class Derived:
    """No original text; the canonical rendering of the tree stands in."""

    _instance: Derived | None = None

    def __new__(cls) -> Derived:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DERIVED"


DERIVED = Derived()

TextForm = Union[Verbatim, Derived]
