"""Tests for the in-memory sink adapter."""

import threading
from datetime import UTC, datetime

import pytest

from gelfkit.adapters.sinks.in_memory import InMemoryGelfSink
from gelfkit.core.models import GelfRecord


def _record(message: str) -> GelfRecord:
    return GelfRecord(
        host="h",
        short_message=message,
        full_message=message,
        timestamp=datetime(2024, 1, 1, tzinfo=UTC),
        level=6,
    )


class TestInMemoryGelfSink:
    """Tests for InMemoryGelfSink."""

    @pytest.mark.adapter
    def test_read_returns_empty_when_no_records(self) -> None:
        sink = InMemoryGelfSink()
        assert list(sink.read()) == []
        assert len(sink) == 0

    @pytest.mark.adapter
    def test_read_returns_records_in_write_order(self) -> None:
        sink = InMemoryGelfSink()
        records = [_record(f"msg {i}") for i in range(3)]

        for record in records:
            sink.write(record)

        assert list(sink.read()) == records
        assert len(sink) == 3

    @pytest.mark.adapter
    def test_clear_discards_records(self) -> None:
        sink = InMemoryGelfSink()
        sink.write(_record("a"))

        sink.clear()

        assert list(sink.read()) == []

    @pytest.mark.adapter
    def test_concurrent_writes_are_all_kept(self) -> None:
        sink = InMemoryGelfSink()

        def writer(n: int) -> None:
            for i in range(100):
                sink.write(_record(f"{n}-{i}"))

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(sink) == 400
