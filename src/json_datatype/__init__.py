"""json-datatype - an immutable JSON value type for SQL query engines."""

from __future__ import annotations

from json_datatype.api import extract_path, extract_path_text, parse, parse_bytes
from json_datatype.cache import ParseCache
from json_datatype.config import ParserConfig
from json_datatype.document import Document
from json_datatype.exceptions import (
    ErrorCode,
    InvalidJsonData,
    JsonDataTypeError,
    PathNotFound,
    UnsupportedOperation,
)
from json_datatype.navigator import ABSENT, Absent, ResolveMode
from json_datatype.textform import DERIVED, Derived, Verbatim

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "DERIVED",
    "Absent",
    "Derived",
    "Document",
    "ErrorCode",
    "InvalidJsonData",
    "JsonDataTypeError",
    "ParseCache",
    "ParserConfig",
    "PathNotFound",
    "ResolveMode",
    "UnsupportedOperation",
    "Verbatim",
    "extract_path",
    "extract_path_text",
    "parse",
    "parse_bytes",
]
