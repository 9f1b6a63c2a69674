"""Tree subpackage for the immutable JSON value tree.

Re-exports the public API for the tree module:
- Node variants: JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject
- NodeType: StrEnum of the six node kinds
- TreeBuilder: converts decoded JSON values into a Node tree
- strip_comments: blanks // and /* */ comments ahead of decoding
"""

from json_datatype.tree.builder import MemberPairs, TreeBuilder, collapse_duplicates
from json_datatype.tree.comments import strip_comments
from json_datatype.tree.nodes import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Node,
    NodeType,
)

__all__ = [
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "MemberPairs",
    "Node",
    "NodeType",
    "TreeBuilder",
    "collapse_duplicates",
    "strip_comments",
]
