"""Unit tests for cursor encoding and decoding."""
from __future__ import annotations

import base64

import pytest

from user_directory.core.pagination.cursor import CursorCodec, decode_cursor, encode_cursor


class TestEncodeCursor:
    """Tests for the cursor wire format."""

    def test_encodes_user_tag_as_standard_base64(self):
        """Cursor should be base64 of the ASCII tag user_<id>."""
        assert encode_cursor(1) == "dXNlcl8x"
        assert encode_cursor(10) == base64.b64encode(b"user_10").decode()

    def test_keeps_padding(self):
        """Cursors should carry standard '=' padding."""
        assert encode_cursor(42) == "dXNlcl80Mg=="

    def test_custom_prefix(self):
        """A codec with another prefix should tag ids with it."""
        codec = CursorCodec(prefix="post_")
        assert base64.b64decode(codec.encode(7)) == b"post_7"


class TestDecodeCursor:
    """Tests for decoding client-supplied cursors."""

    @pytest.mark.parametrize("record_id", [0, 1, 9, 10, 12345, 2**40])
    def test_decodes_encoded_ids(self, record_id: int):
        """decode should invert encode, and re-encoding gives the same cursor."""
        cursor = encode_cursor(record_id)
        assert decode_cursor(cursor) == record_id
        assert encode_cursor(decode_cursor(cursor)) == cursor

    @pytest.mark.parametrize(
        "cursor",
        [
            "",
            None,
            "garbage",
            "a",
            "!!!not base64!!!",
            "ümlaut",
            base64.b64encode(b"fds").decode(),
            base64.b64encode(b"user_").decode(),
            base64.b64encode(b"post_1").decode(),
            base64.b64encode(b" user_1").decode(),
            # oversized payloads
            base64.b64encode(b"user_" + b"1" * 5000).decode(),
            "!" * 8192,
            "A" * 8191,
        ],
    )
    def test_invalid_cursor_decodes_to_none(self, cursor: str | None):
        """Malformed or empty cursors should yield None without raising."""
        assert decode_cursor(cursor) is None

    def test_accepts_missing_padding(self):
        """Unpadded cursors should still decode."""
        assert decode_cursor("dXNlcl80Mg") == 42

    def test_accepts_urlsafe_alphabet(self):
        """URL-safe base64 characters should be accepted."""
        cursor = base64.urlsafe_b64encode(b"user_1023?").decode()
        assert decode_cursor(cursor) == 1023

    def test_prefix_match_ignores_trailing_text(self):
        """Only the leading user_<digits> part is read."""
        cursor = base64.b64encode(b"user_12abc").decode()
        assert decode_cursor(cursor) == 12

    def test_other_prefix_is_invalid_for_default_codec(self):
        """A cursor tagged for another prefix should not name a user."""
        cursor = CursorCodec(prefix="post_").encode(3)
        assert decode_cursor(cursor) is None
        assert CursorCodec(prefix="post_").decode(cursor) == 3

    def test_id_beyond_int_conversion_limit_is_logged(self, caplog: pytest.LogCaptureFixture):
        """An absurdly long digit run should be reported, not raised."""
        cursor = base64.b64encode(b"user_" + b"9" * 10000).decode()

        with caplog.at_level("WARNING", logger="user_directory.core.pagination.cursor"):
            assert decode_cursor(cursor) is None

        assert any("id out of range" in record.getMessage() for record in caplog.records)

    def test_invalid_cursor_is_logged(self, caplog: pytest.LogCaptureFixture):
        """Malformed cursors should be reported at warning level."""
        with caplog.at_level("WARNING", logger="user_directory.core.pagination.cursor"):
            decode_cursor("garbage")

        assert any("Invalid cursor" in record.getMessage() for record in caplog.records)
