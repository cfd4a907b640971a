"""
Unit tests for statistics snapshot decoding and effective usage extraction.
"""

import io

import pytest

from dockmem.accounting.extractor import (
    decode_snapshot,
    effective_memory_usage,
    parse_snapshot,
)
from dockmem.models.records import ContainerStatSnapshot
from dockmem.validation import SnapshotDecodeError


@pytest.mark.unit
class TestEffectiveMemoryUsage:
    """Test cases for the usage - cache computation."""

    def test_without_cache_returns_usage(self):
        snapshot = ContainerStatSnapshot(usage=4096, stats={"rss": 1024})
        assert effective_memory_usage(snapshot) == 4096

    def test_empty_stats_returns_usage(self):
        assert effective_memory_usage(ContainerStatSnapshot(usage=777)) == 777

    @pytest.mark.parametrize(
        "usage, cache, expected",
        [
            (1000, 0, 1000),
            (1000, 400, 600),
            (1000, 1000, 0),
            (2**64 - 1, 1, 2**64 - 2),
        ],
    )
    def test_subtracts_cache(self, usage, cache, expected):
        snapshot = ContainerStatSnapshot(usage=usage, stats={"cache": cache})
        assert effective_memory_usage(snapshot) == expected

    def test_cache_larger_than_usage_clamps_to_zero(self):
        snapshot = ContainerStatSnapshot(usage=100, stats={"cache": 5000})
        assert effective_memory_usage(snapshot) == 0

    def test_cache_with_zero_usage(self):
        snapshot = ContainerStatSnapshot(usage=0, stats={"cache": 1})
        assert effective_memory_usage(snapshot) == 0


@pytest.mark.unit
class TestDecodeSnapshot:
    """Test cases for decoding the stats JSON document."""

    def test_decode_usage_and_stats(self, make_payload):
        snapshot = decode_snapshot(io.BytesIO(make_payload(usage=2048, cache=512, rss=1024)))

        assert snapshot.usage == 2048
        assert snapshot.stats == {"cache": 512, "rss": 1024}

    def test_decode_without_stats(self, make_payload):
        snapshot = decode_snapshot(io.BytesIO(make_payload(usage=2048)))

        assert snapshot.usage == 2048
        assert snapshot.stats == {}

    def test_missing_memory_section_counts_as_zero(self):
        snapshot = decode_snapshot(io.BytesIO(b'{"memory_stats": {}}'))

        assert snapshot.usage == 0
        assert effective_memory_usage(snapshot) == 0

    def test_does_not_close_stream(self, make_payload):
        stream = io.BytesIO(make_payload(usage=1))
        decode_snapshot(stream)
        assert not stream.closed

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            b"not json",
            b'{"memory_stats": ',
            b"\xff\xfe\x00garbage",
        ],
    )
    def test_malformed_json(self, raw):
        with pytest.raises(SnapshotDecodeError) as exc_info:
            decode_snapshot(io.BytesIO(raw), container_id="abc")
        assert exc_info.value.container_id == "abc"

    @pytest.mark.parametrize(
        "document",
        [
            [],
            "text",
            {"memory_stats": [1, 2]},
            {"memory_stats": {"usage": "big"}},
            {"memory_stats": {"usage": -5}},
            {"memory_stats": {"usage": 1.5}},
            {"memory_stats": {"usage": True}},
            {"memory_stats": {"usage": 10, "stats": "cache"}},
            {"memory_stats": {"usage": 10, "stats": {"cache": None}}},
        ],
    )
    def test_malformed_structure(self, document):
        with pytest.raises(SnapshotDecodeError):
            parse_snapshot(document)
