"""Protocols for the table-statistics collaborator.

Statistics are gathered and owned by the surrounding query engine; this
package only consumes their contract.  Any class with the right members
passes ``isinstance`` checks, with no inheritance required.

Example::

    from json_datatype.protocols import TableStats
    from json_datatype.stats import EMPTY_STATS

    assert isinstance(EMPTY_STATS, TableStats)  # True: structural conformance
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import BinaryIO, Protocol, runtime_checkable

__all__ = ["GuidePostsInfo", "TableStats"]


@runtime_checkable
class GuidePostsInfo(Protocol):
    """Opaque statistics record bounding a row-key range of one column family."""

    def write(self, output: BinaryIO) -> None: ...


@runtime_checkable
class TableStats(Protocol):
    """Read-only per-column-family statistics.

    - ``guide_posts`` maps column-family keys (bytes) to their guide-post
      record and iterates in ascending key order.
    - ``estimated_size`` is the estimated in-memory size in bytes.
    - ``write`` emits the entry count (as a variable-length int) followed by
      each entry; ``read_fields`` rebuilds the mapping from that same layout.
    """

    @property
    def guide_posts(self) -> Mapping[bytes, GuidePostsInfo]: ...

    @property
    def estimated_size(self) -> int: ...

    def write(self, output: BinaryIO) -> None: ...

    def read_fields(self, source: BinaryIO) -> None: ...
