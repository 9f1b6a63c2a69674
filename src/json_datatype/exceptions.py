"""Domain errors raised by json-datatype.

Every error carries a stable ``ErrorCode`` alongside its human-readable
message, so the surrounding query engine can map it to its own error
reporting without parsing message text.  The underlying cause (for example
the decoder's ``json.JSONDecodeError``) is chained with ``raise ... from``
and is available as ``__cause__``.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

__all__ = [
    "ErrorCode",
    "InvalidJsonData",
    "JsonDataTypeError",
    "PathNotFound",
    "UnsupportedOperation",
]


class ErrorCode(StrEnum):
    INVALID_JSON_DATA = "INVALID_JSON_DATA"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"


class JsonDataTypeError(Exception):
    """Base class for all json-datatype errors.

    Attributes:
        code: Stable machine-readable error code.
        message: Human-readable description.
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InvalidJsonData(JsonDataTypeError):
    """Input text is not well-formed JSON.

    Attributes:
        line: 1-based line of the failure, when the decoder reported one.
        column: 1-based column of the failure, when the decoder reported one.
    """

    code = ErrorCode.INVALID_JSON_DATA

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class PathNotFound(JsonDataTypeError):
    """A strict path traversal could not resolve a segment.

    Attributes:
        segment: The path segment that failed to resolve.
        resolved: Segments successfully resolved before the failure.
    """

    code = ErrorCode.PATH_NOT_FOUND

    def __init__(self, segment: str, resolved: Sequence[str] = ()) -> None:
        super().__init__(f"path: {segment} not found")
        self.segment = segment
        self.resolved = tuple(resolved)


class UnsupportedOperation(JsonDataTypeError, NotImplementedError):
    code = ErrorCode.UNSUPPORTED_OPERATION
