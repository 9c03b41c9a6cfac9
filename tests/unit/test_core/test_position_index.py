"""Unit tests for cursor position lookup."""
from __future__ import annotations

from types import SimpleNamespace

from user_directory.core.pagination.index import (
    LinearPositionIndex,
    MappingPositionIndex,
    record_id,
)


class TestRecordId:
    """Tests for the default record key."""

    def test_attribute(self):
        assert record_id(SimpleNamespace(id=7)) == 7

    def test_mapping(self):
        assert record_id({"id": 3, "name": "x"}) == 3


class TestLinearPositionIndex:
    """Tests for the scanning lookup."""

    def test_finds_position(self, users):
        index = LinearPositionIndex(users)

        assert index.position_of(1) == 0
        assert index.position_of(10) == 9

    def test_missing_id(self, users):
        assert LinearPositionIndex(users).position_of(11) is None

    def test_sees_later_appends(self, users):
        """The scan reads the live sequence on every lookup."""
        index = LinearPositionIndex(users)
        users.append(SimpleNamespace(id=11))

        assert index.position_of(11) == 10


class TestMappingPositionIndex:
    """Tests for the precomputed lookup."""

    def test_matches_linear_scan(self, users):
        linear = LinearPositionIndex(users)
        mapping = MappingPositionIndex(users)

        for user_id in range(0, 13):
            assert mapping.position_of(user_id) == linear.position_of(user_id)

    def test_len(self, users):
        assert len(MappingPositionIndex(users)) == 10

    def test_custom_key(self):
        index = MappingPositionIndex([("a", 5), ("b", 8)], key=lambda record: record[1])

        assert index.position_of(8) == 1
        assert index.position_of(1) is None
