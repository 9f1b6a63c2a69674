"""Empty table-statistics sentinel and the variable-length int codec it writes.

``write_vint`` / ``read_vint`` use the Hadoop ``WritableUtils`` layout:

- values in [-112, 127] are a single signed byte;
- otherwise a marker byte encodes sign and payload length (1-8 bytes), and
  the payload follows big-endian.  Negative values are stored one's
  complemented.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import BinaryIO

from json_datatype.exceptions import UnsupportedOperation
from json_datatype.protocols import GuidePostsInfo

__all__ = ["EMPTY_STATS", "EmptyTableStats", "read_vint", "write_vint"]

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _signed(byte: int) -> int:
    return byte - 256 if byte > 127 else byte


def write_vint(output: BinaryIO, value: int) -> None:
    """Write *value* as a Hadoop variable-length integer.

    Raises:
        ValueError: If *value* does not fit in a signed 64-bit integer.
    """
    if not _INT64_MIN <= value <= _INT64_MAX:
        msg = f"value must fit in 64 bits, got {value}"
        raise ValueError(msg)

    if -112 <= value <= 127:
        output.write(bytes([value & 0xFF]))
        return

    marker = -112
    if value < 0:
        value = ~value
        marker = -120

    size = (value.bit_length() + 7) // 8
    marker -= size
    output.write(bytes([marker & 0xFF]))
    output.write(value.to_bytes(size, "big"))


def read_vint(source: BinaryIO) -> int:
    """Read one Hadoop variable-length integer from *source*.

    Raises:
        EOFError: If the stream ends before the value is complete.
    """
    head = source.read(1)
    if not head:
        raise EOFError("stream ended before variable-length int")
    first = _signed(head[0])
    if first >= -112:
        return first

    negative = first < -120
    size = (-120 - first) if negative else (-112 - first)
    payload = source.read(size)
    if len(payload) != size:
        raise EOFError("stream ended inside variable-length int")
    value = int.from_bytes(payload, "big")
    return ~value if negative else value


class EmptyTableStats:
    """Statistics for a table with no guide posts.

    Writes a zero entry count.  Reading into it is unsupported: it is a shared
    sentinel, not a container to populate.
    """

    _guide_posts: Mapping[bytes, GuidePostsInfo] = MappingProxyType({})

    @property
    def guide_posts(self) -> Mapping[bytes, GuidePostsInfo]:
        return self._guide_posts

    @property
    def estimated_size(self) -> int:
        return 0

    def write(self, output: BinaryIO) -> None:
        write_vint(output, 0)

    def read_fields(self, source: BinaryIO) -> None:
        raise UnsupportedOperation("cannot read statistics into the empty sentinel")

    def __repr__(self) -> str:
        return "EMPTY_STATS"


EMPTY_STATS = EmptyTableStats()
