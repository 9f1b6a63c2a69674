"""Parser: turns JSON text (or a byte range) into a Document.

Decoding is done by the standard library ``json`` module with hooks that keep
the tree lossless where it matters:

- ``parse_float=Decimal`` keeps fractional and exponent literals exact;
- ``parse_int`` falls back to ``Decimal`` for integer literals too long for
  ``int()`` under the interpreter's digit limit;
- ``object_pairs_hook=MemberPairs`` hands every object's raw members,
  duplicates included, to ``TreeBuilder``, which collapses duplicate keys
  (last occurrence wins);
- ``parse_constant`` rejects ``NaN`` / ``Infinity`` / ``-Infinity``.

Comments (``//`` and ``/* */``) are blanked before decoding when the config
allows them, which it does by default.

The input text is kept as the Document's ``Verbatim`` text.  Duplicate-key
collapse is lossy, and the verbatim text is what lets equality and display
still tell such inputs apart.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import NoReturn

from json_datatype.config import DEFAULT_CONFIG, ParserConfig
from json_datatype.document import Document
from json_datatype.exceptions import InvalidJsonData
from json_datatype.textform import Verbatim
from json_datatype.tree.builder import MemberPairs, TreeBuilder
from json_datatype.tree.comments import strip_comments

__all__ = ["parse", "parse_bytes"]

logger = logging.getLogger(__name__)

_builder = TreeBuilder()


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-standard numeric constant: {name}")


def _parse_int(literal: str) -> int | Decimal:
    try:
        return int(literal)
    except ValueError:
        return Decimal(literal)


_decoder = json.JSONDecoder(
    object_pairs_hook=MemberPairs,
    parse_float=Decimal,
    parse_int=_parse_int,
    parse_constant=_reject_constant,
)


def parse(data: str, config: ParserConfig | None = None) -> Document:
    """Parse JSON text into a Document that keeps *data* as verbatim text.

    Args:
        data:   JSON text.  Comments are tolerated unless disabled in *config*.
        config: Parser settings.  Defaults to ``ParserConfig()`` when None.

    Returns:
        A Document whose text form is ``Verbatim(data)``.

    Raises:
        InvalidJsonData: If *data* is not well-formed JSON.  ``line`` and
            ``column`` are set when the decoder reports a position, and the
            decoder's exception is chained as ``__cause__``.
        TypeError: If *data* is not a str.
    """
    if not isinstance(data, str):
        raise TypeError(f"JSON data must be str, got {type(data)!r}")
    config = config if config is not None else DEFAULT_CONFIG

    source = strip_comments(data) if config.allow_comments else data
    try:
        decoded = _decoder.decode(source)
    except json.JSONDecodeError as exc:
        logger.debug(
            "Invalid JSON at line %d column %d: %s", exc.lineno, exc.colno, exc.msg
        )
        raise InvalidJsonData(exc.msg, line=exc.lineno, column=exc.colno) from exc
    except ValueError as exc:
        logger.debug("Invalid JSON: %s", exc)
        raise InvalidJsonData(str(exc)) from exc
    except RecursionError as exc:
        logger.debug("Invalid JSON: nesting too deep")
        raise InvalidJsonData("JSON nesting too deep") from exc

    try:
        root = _builder.build(decoded)
    except RecursionError as exc:
        logger.debug("Invalid JSON: nesting too deep")
        raise InvalidJsonData("JSON nesting too deep") from exc

    return Document(root, Verbatim(data))


def parse_bytes(
    data: bytes | bytearray | memoryview,
    offset: int = 0,
    length: int | None = None,
    config: ParserConfig | None = None,
) -> Document:
    """Parse ``data[offset:offset + length]`` as JSON.

    The byte range is decoded with ``config.encoding`` (UTF-8 by default) and
    then handed to ``parse``.

    Args:
        data:   Buffer holding the JSON bytes.
        offset: Index of the first byte to parse.
        length: Number of bytes to parse.  Defaults to the rest of the buffer.
        config: Parser settings.  Defaults to ``ParserConfig()`` when None.

    Returns:
        A Document whose verbatim text is the decoded range.

    Raises:
        ValueError: If the range falls outside the buffer.
        InvalidJsonData: If the range does not decode, or is not well-formed JSON.
    """
    config = config if config is not None else DEFAULT_CONFIG
    size = len(data)
    if length is None:
        length = size - offset
    if offset < 0 or length < 0 or offset + length > size:
        msg = (
            f"byte range offset={offset} length={length} "
            f"outside buffer of size {size}"
        )
        raise ValueError(msg)

    try:
        text = bytes(data[offset : offset + length]).decode(config.encoding)
    except UnicodeDecodeError as exc:
        logger.debug("Undecodable JSON bytes: %s", exc)
        msg = f"Cannot decode JSON bytes as {config.encoding}: {exc.reason}"
        raise InvalidJsonData(msg) from exc

    return parse(text, config)
