"""Relay cursor pagination over an ordered, in-memory record sequence.

Implements the pagination algorithm of the Relay Cursor Connections
specification for a sequence sorted ascending by record id:

    records = [User(id=1), ..., User(id=10)]
    page = paginate(records, PaginationRequest(first=2, after=encode_cursor(1)))
    [edge.node.id for edge in page.edges]  # [2, 3]

The function is pure: it never mutates the sequence and returns the same
connection for the same inputs. Stale or tampered cursors are not errors;
they fall back to the sequence boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from user_directory.core.pagination.cursor import CursorCodec
from user_directory.core.pagination.index import (
    LinearPositionIndex,
    PositionIndex,
    RecordKey,
    record_id,
)
from user_directory.core.pagination.schemas import (
    BackwardArgs,
    Connection,
    Edge,
    ForwardArgs,
    PageInfo,
    PaginationArgs,
    PaginationRequest,
)
from user_directory.core.settings import PaginationSettings, get_pagination_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Window:
    """Half-open index range ``[start, end)`` before clamping.

    ``start`` may be negative and ``end`` may exceed the sequence length;
    page flags are computed from these unclamped bounds.
    """

    start: int
    end: int

    def has_next_page(self, size: int) -> bool:
        return self.end < size

    def has_previous_page(self) -> bool:
        return self.start > 0

    def clamp(self, size: int) -> slice:
        return slice(max(self.start, 0), min(self.end, size))


def paginate(
    records: Sequence[Any],
    request: PaginationRequest | PaginationArgs,
    *,
    key: RecordKey = record_id,
    index: PositionIndex | None = None,
    settings: PaginationSettings | None = None,
) -> Connection:
    """Return one page of ``records`` as a Relay connection.

    Args:
        records: Records sorted ascending by id
        request: Raw request or an already validated forward/backward window
        key: Function reading the id of a record
        index: Position lookup; defaults to a linear scan of ``records``
        settings: Pagination settings; defaults to the cached settings

    Returns:
        Connection with edges in input order and page info

    Raises:
        InvalidRequestException: If the request arguments are malformed
    """
    args = request.resolve() if isinstance(request, PaginationRequest) else request
    if settings is None:
        settings = get_pagination_settings()
    codec = CursorCodec(prefix=settings.cursor_prefix)
    if index is None:
        index = LinearPositionIndex(records, key=key)

    window = compute_window(args, len(records), index, codec, max_limit=settings.max_limit)
    selected = records[window.clamp(len(records))]

    logger.debug(
        "Resolved pagination window",
        extra={
            "direction": "forward" if isinstance(args, ForwardArgs) else "backward",
            "window_start": window.start,
            "window_end": window.end,
            "total": len(records),
            "returned": len(selected),
        },
    )

    edges = [Edge(node=record, cursor=codec.encode(key(record))) for record in selected]
    page_info = PageInfo(
        has_next_page=window.has_next_page(len(records)),
        has_previous_page=window.has_previous_page(),
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
    )
    return Connection(edges=edges, page_info=page_info)


def compute_window(
    args: PaginationArgs,
    size: int,
    index: PositionIndex,
    codec: CursorCodec,
    *,
    max_limit: int | None = None,
) -> Window:
    """Resolve the request's cursor and count to an unclamped window."""
    if isinstance(args, ForwardArgs):
        after_position = _resolve(args.after, index, codec, default=-1)
        start = after_position + 1
        return Window(start=start, end=start + _capped(args.first, max_limit))

    if isinstance(args, BackwardArgs):
        end = _resolve(args.before, index, codec, default=size)
        return Window(start=end - _capped(args.last, max_limit), end=end)

    raise TypeError(f"Unsupported pagination arguments: {type(args).__name__}")


def _resolve(cursor: str, index: PositionIndex, codec: CursorCodec, *, default: int) -> int:
    """Map a cursor to a sequence position, or ``default`` if it names nothing."""
    target = codec.decode(cursor)
    if target is None:
        return default

    position = index.position_of(target)
    if position is None:
        logger.info("Cursor refers to a missing record", extra={"record_id": target})
        return default
    return position


def _capped(count: int, max_limit: int | None) -> int:
    if max_limit is not None and count > max_limit:
        return max_limit
    return count


__all__ = ["Window", "compute_window", "paginate"]
