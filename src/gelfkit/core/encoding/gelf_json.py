"""GELF JSON encoder for GELF records."""

import json
from datetime import UTC, datetime
from typing import Any

from gelfkit.core.models import GelfRecord


def epoch_seconds(timestamp: datetime) -> float:
    """Return a timestamp as Unix epoch seconds.

    Naive datetimes are taken to be UTC.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return timestamp.timestamp()


def encode_record(record: GelfRecord) -> dict[str, Any]:
    """Build the GELF JSON object for a record.

    Args:
        record: The record to encode.

    Returns:
        Dict with the fixed GELF fields followed by the additional fields.
        The timestamp is a Unix epoch in seconds, fractional for sub-second
        precision.
    """
    obj: dict[str, Any] = {
        "version": record.version,
        "host": record.host,
        "short_message": record.short_message,
        "full_message": record.full_message,
        "timestamp": epoch_seconds(record.timestamp),
        "level": record.level,
        "facility": record.facility,
        "line": record.line,
        "file": record.file,
    }
    obj.update(record.additional_fields)
    return obj


def encode_gelf(record: GelfRecord) -> str:
    """Encode a record as a GELF JSON document."""
    return json.dumps(encode_record(record))
