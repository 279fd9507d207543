"""gelfkit: convert log events into GELF 1.0 records."""

from gelfkit.adapters.logging import GelfHandler, event_from_record
from gelfkit.adapters.logging_context import (
    ContextVarAmbientContext,
    clear_log_context,
    get_log_context,
    log_context,
    set_log_context,
)
from gelfkit.adapters.sinks.in_memory import InMemoryGelfSink
from gelfkit.core.converter import GelfConverter
from gelfkit.core.encoding.gelf_json import encode_gelf, encode_record
from gelfkit.core.errors import AmbientContextError, GelfError, HostResolutionError
from gelfkit.core.fields import add_additional_field, normalize_field_key
from gelfkit.core.models import (
    ExceptionInfo,
    GelfRecord,
    LogEvent,
    LogLevel,
    SourceLocation,
)
from gelfkit.core.ports import AmbientContextPort, ContextUnavailable, GelfSinkPort
from gelfkit.core.severity import level_from_levelno, severity_level

__all__ = [
    "AmbientContextError",
    "AmbientContextPort",
    "ContextUnavailable",
    "ContextVarAmbientContext",
    "ExceptionInfo",
    "GelfConverter",
    "GelfError",
    "GelfHandler",
    "GelfRecord",
    "GelfSinkPort",
    "HostResolutionError",
    "InMemoryGelfSink",
    "LogEvent",
    "LogLevel",
    "SourceLocation",
    "add_additional_field",
    "clear_log_context",
    "encode_gelf",
    "encode_record",
    "event_from_record",
    "get_log_context",
    "level_from_levelno",
    "log_context",
    "normalize_field_key",
    "set_log_context",
    "severity_level",
]
