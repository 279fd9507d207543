"""In-memory sink adapter for GELF records."""

import threading
from collections.abc import Iterator

from gelfkit.core.models import GelfRecord


class InMemoryGelfSink:
    """In-memory implementation of GelfSinkPort.

    Keeps records in a list. Suitable for testing and for inspecting
    output where no transport is configured.
    """

    def __init__(self) -> None:
        self._records: list[GelfRecord] = []
        self._lock = threading.Lock()

    def write(self, record: GelfRecord) -> None:
        """Append a record."""
        with self._lock:
            self._records.append(record)

    def read(self) -> Iterator[GelfRecord]:
        """Iterate over written records in write order."""
        with self._lock:
            records = list(self._records)
        yield from records

    def clear(self) -> None:
        """Discard all records."""
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
