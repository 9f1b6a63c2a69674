"""ParseCache: LRU-backed cache of parse results keyed by input text.

A query engine sees the same JSON column values over and over; since a
Document is immutable, a parsed Document can be handed to every caller that
presents the same text.  Each ``ParseCache`` instance owns its own
``LRUCache``, so two instances never interfere with each other.  LRU eviction
is silent.  Failed parses are not cached: the ``InvalidJsonData`` propagates
and the next call with the same text parses again.

Example::

    from json_datatype.cache import ParseCache

    cache = ParseCache(max_size=1024)
    doc = cache.parse('{"a": 1}')
    assert cache.parse('{"a": 1}') is doc
"""

from __future__ import annotations

import threading

from cachetools import LRUCache

from json_datatype.config import DEFAULT_CONFIG, ParserConfig
from json_datatype.document import Document
from json_datatype.parser import parse

__all__ = ["ParseCache"]


class ParseCache:
    """LRU cache in front of ``json_datatype.parser.parse``.

    ``cachetools`` caches are not thread-safe on their own, so every access
    goes through a per-instance lock.  Parsing itself runs outside the lock.

    Args:
        max_size: Maximum number of distinct input texts held.  Defaults to 512.
        config: Parser settings used for every parse.  Defaults to
            ``ParserConfig()``.
    """

    def __init__(self, max_size: int = 512, config: ParserConfig | None = None) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._config = config if config is not None else DEFAULT_CONFIG
        self._cache: LRUCache[str, Document] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        with self._lock:
            return int(self._cache.currsize)

    @property
    def config(self) -> ParserConfig:
        return self._config

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, data: str) -> Document:
        """Return the Document for *data*, parsing it only on a cache miss.

        Raises:
            InvalidJsonData: If *data* is not well-formed JSON.
        """
        with self._lock:
            doc = self._cache.get(data)
        if doc is not None:
            return doc

        doc = parse(data, self._config)
        with self._lock:
            # Another thread may have parsed the same text meanwhile; keep the first.
            return self._cache.setdefault(data, doc)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __contains__(self, data: object) -> bool:
        with self._lock:
            return data in self._cache
