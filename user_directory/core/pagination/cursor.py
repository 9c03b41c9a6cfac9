"""Cursor encoding and decoding for pagination.

A cursor is an opaque string naming exactly one record by its id. The
wire format is fixed so cursors stay valid across processes and releases:

1. Text tag ``user_<decimal id>``
2. Standard base64 (with padding) over the ASCII bytes of the tag

Example:
    >>> CursorCodec().encode(1)
    'dXNlcl8x'
    >>> CursorCodec().decode("dXNlcl8x")
    1

Decoding never raises. Anything that does not decode to the tag pattern
yields ``None`` and the paginator treats it as an absent cursor.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_CURSOR_PREFIX = "user_"


class CursorCodec:
    """Encode and decode record-id cursors.

    Usage:
        codec = CursorCodec()
        cursor = codec.encode(42)        # "dXNlcl80Mg=="
        record_id = codec.decode(cursor)  # 42
        codec.decode("garbage")           # None
    """

    def __init__(self, prefix: str = DEFAULT_CURSOR_PREFIX) -> None:
        self.prefix = prefix
        self._pattern = re.compile(rf"^{re.escape(prefix)}(\d+)", re.ASCII)

    def encode(self, record_id: int) -> str:
        """Encode a record id to an opaque cursor.

        Args:
            record_id: Identifier of the record the cursor points at

        Returns:
            Base64 encoded cursor string
        """
        text = f"{self.prefix}{record_id}"
        return base64.b64encode(text.encode("ascii")).decode("ascii")

    def decode(self, cursor: str | None) -> int | None:
        """Decode a cursor back to the record id it names.

        Args:
            cursor: Cursor string as received from a client

        Returns:
            The record id, or None if the cursor is empty or malformed
        """
        if not cursor:
            return None

        text = self._to_text(cursor)
        if text is None:
            logger.warning("Invalid cursor: not base64", extra={"cursor": cursor})
            return None

        match = self._pattern.match(text)
        if match is None:
            logger.warning("Invalid cursor: unexpected payload", extra={"cursor": cursor})
            return None

        try:
            return int(match.group(1))
        except ValueError:
            # digit runs beyond the interpreter's int conversion limit
            logger.warning("Invalid cursor: id out of range", extra={"cursor": cursor[:64]})
            return None

    @staticmethod
    def _to_text(cursor: str) -> str | None:
        """Decode base64 leniently.

        Accepts the URL-safe alphabet and missing padding, matching how
        permissive base64 decoders in other runtimes read client input.
        """
        normalized = cursor.strip().replace("-", "+").replace("_", "/")
        normalized += "=" * (-len(normalized) % 4)
        try:
            raw = base64.b64decode(normalized, validate=True)
        except (binascii.Error, ValueError):
            return None
        return raw.decode("ascii", errors="replace")


_default_codec = CursorCodec()


def encode_cursor(record_id: int) -> str:
    """Encode a record id with the default ``user_`` prefix."""
    return _default_codec.encode(record_id)


def decode_cursor(cursor: str | None) -> int | None:
    """Decode a cursor with the default ``user_`` prefix."""
    return _default_codec.decode(cursor)


__all__ = ["DEFAULT_CURSOR_PREFIX", "CursorCodec", "decode_cursor", "encode_cursor"]
