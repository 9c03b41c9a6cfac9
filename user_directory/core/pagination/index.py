"""Position lookup for cursor resolution.

The paginator asks a ``PositionIndex`` where the record named by a cursor
sits in the ordered sequence. Two implementations are provided:

- ``LinearPositionIndex``: scans the sequence per lookup, no setup cost
- ``MappingPositionIndex``: builds an ``id -> position`` dict once, for
  callers that paginate the same snapshot many times
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

RecordKey = Callable[[Any], int]


def record_id(record: Any) -> int:
    """Read the identifier of a record.

    Works for objects exposing an ``id`` attribute and for mappings with
    an ``"id"`` key.
    """
    if isinstance(record, Mapping):
        return record["id"]
    return record.id


class PositionIndex(Protocol):
    """Resolve a record id to its position in the ordered sequence."""

    def position_of(self, record_id: int) -> int | None: ...


class LinearPositionIndex:
    """Scan the sequence for the record id. O(N) per lookup."""

    def __init__(self, records: Sequence[Any], key: RecordKey = record_id) -> None:
        self._records = records
        self._key = key

    def position_of(self, record_id: int) -> int | None:
        for position, record in enumerate(self._records):
            if self._key(record) == record_id:
                return position
        return None


class MappingPositionIndex:
    """Precomputed ``id -> position`` lookup. O(1) per lookup.

    The index describes the snapshot it was built from; rebuild it when
    the underlying sequence changes.

    Usage:
        index = MappingPositionIndex(users)
        paginate(users, request, index=index)
    """

    def __init__(self, records: Sequence[Any], key: RecordKey = record_id) -> None:
        self._positions = {key(record): position for position, record in enumerate(records)}

    def __len__(self) -> int:
        return len(self._positions)

    def position_of(self, record_id: int) -> int | None:
        return self._positions.get(record_id)


__all__ = [
    "LinearPositionIndex",
    "MappingPositionIndex",
    "PositionIndex",
    "RecordKey",
    "record_id",
]
