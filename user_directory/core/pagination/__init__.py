"""Relay cursor pagination over ordered record sequences.

Usage:
    from user_directory.core.pagination import PaginationRequest, paginate

    page = paginate(users, PaginationRequest(first=10, after=cursor))
    page.page_info.has_next_page

Cursors are opaque base64 strings naming one record id. Clients pass them
back unchanged; anything that does not decode resets to the sequence
boundary instead of failing.
"""

from user_directory.core.pagination.cursor import (
    CursorCodec,
    decode_cursor,
    encode_cursor,
)
from user_directory.core.pagination.index import (
    LinearPositionIndex,
    MappingPositionIndex,
    PositionIndex,
    record_id,
)
from user_directory.core.pagination.paginator import Window, compute_window, paginate
from user_directory.core.pagination.schemas import (
    BackwardArgs,
    Connection,
    Edge,
    ForwardArgs,
    PageInfo,
    PaginationArgs,
    PaginationRequest,
)

__all__ = [
    "BackwardArgs",
    "Connection",
    "CursorCodec",
    "Edge",
    "ForwardArgs",
    "LinearPositionIndex",
    "MappingPositionIndex",
    "PageInfo",
    "PaginationArgs",
    "PaginationRequest",
    "PositionIndex",
    "Window",
    "compute_window",
    "decode_cursor",
    "encode_cursor",
    "paginate",
    "record_id",
]
