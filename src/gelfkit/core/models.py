"""Core domain models for GELF conversion."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

GELF_VERSION = "1.0"
DEFAULT_FACILITY = "GELF"


class LogLevel(Enum):
    """Severity taxonomy of the host logging framework."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"


@dataclass(frozen=True)
class ExceptionInfo:
    """Exception details attached to a log event.

    Attributes:
        source: Where the exception originated (e.g. a module name).
        message: The exception message.
        stack_trace: The formatted stack trace.
    """

    source: str
    message: str
    stack_trace: str


@dataclass(frozen=True)
class SourceLocation:
    """File and line that emitted a log event."""

    file: str
    line: int


@dataclass(frozen=True)
class LogEvent:
    """A log event as emitted by the host logging framework.

    Attributes:
        message: The formatted message. None means there is nothing to send.
        timestamp: When the event occurred. Naive values are taken to be UTC.
        level: Host severity level.
        logger_name: Name of the logger that emitted the event.
        exception: Exception details, if any.
        source_location: Emitting file and line, if known.
        properties: Per-event key/value properties, in insertion order.
    """

    message: str | None
    timestamp: datetime
    level: LogLevel
    logger_name: str = ""
    exception: ExceptionInfo | None = None
    source_location: SourceLocation | None = None
    properties: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class GelfRecord:
    """A GELF 1.0 record ready to be handed to a transport.

    Attributes:
        host: Host identifier of the emitting machine.
        short_message: Message truncated to the GELF preview length.
        full_message: The complete message.
        timestamp: When the event occurred.
        level: Syslog severity (0-7).
        facility: Facility name, never empty.
        file: Emitting file, or empty string.
        line: Emitting line as a string, or empty string.
        additional_fields: Underscore-prefixed extra fields.
        version: GELF schema version.
    """

    host: str
    short_message: str
    full_message: str
    timestamp: datetime
    level: int
    facility: str = DEFAULT_FACILITY
    file: str = ""
    line: str = ""
    additional_fields: dict[str, str] = field(default_factory=dict)
    version: str = GELF_VERSION
