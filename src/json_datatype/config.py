"""ParserConfig: immutable parser settings.

Infrastructure parameters such as cache sizes are constructor arguments of
the objects that own them and are deliberately not part of this config.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

__all__ = ["DEFAULT_CONFIG", "ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for ``json_datatype.parser``.

    Attributes:
        allow_comments: Tolerate ``//`` line and ``/* */`` block comments.
            Enabled by default.
        encoding: Text encoding used to decode byte input.  Must be a codec
            known to Python.  Defaults to ``"utf-8"``.
    """

    allow_comments: bool = True
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            msg = f"encoding must be a known codec, got {self.encoding!r}"
            raise ValueError(msg) from None


DEFAULT_CONFIG = ParserConfig()
