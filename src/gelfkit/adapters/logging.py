"""Python logging handler adapter for gelfkit.

This adapter bridges Python's standard library logging module to the
GELF converter, handing each converted record to a GelfSinkPort.
"""

import logging
import traceback
from datetime import UTC, datetime
from types import TracebackType

from gelfkit.adapters.logging_context import ContextVarAmbientContext
from gelfkit.core.converter import GelfConverter
from gelfkit.core.models import ExceptionInfo, LogEvent, SourceLocation
from gelfkit.core.ports import GelfSinkPort
from gelfkit.core.severity import level_from_levelno

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def _exception_source(exc_type: type[BaseException], exc_tb: TracebackType | None) -> str:
    """Name the module the exception was raised in."""
    if exc_tb is not None:
        while exc_tb.tb_next is not None:
            exc_tb = exc_tb.tb_next
        module = exc_tb.tb_frame.f_globals.get("__name__")
        if isinstance(module, str):
            return module
    return exc_type.__module__


def _exception_info(record: logging.LogRecord) -> ExceptionInfo | None:
    if not record.exc_info:
        return None
    exc_type, exc_value, exc_tb = record.exc_info
    if exc_type is None or exc_value is None:
        return None
    return ExceptionInfo(
        source=_exception_source(exc_type, exc_tb),
        message=str(exc_value),
        stack_trace="".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
    )


def event_from_record(record: logging.LogRecord, include_extra: bool = True) -> LogEvent:
    """Build a LogEvent from a standard library LogRecord.

    Args:
        record: The log record.
        include_extra: Whether attributes passed via ``extra=`` become
            event properties. Only str, int, float and bool values are kept.

    Returns:
        The equivalent LogEvent.
    """
    properties: dict[str, str] = {}
    if include_extra:
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                properties[key] = str(value)

    location = None
    if record.pathname:
        location = SourceLocation(file=record.pathname, line=record.lineno)

    return LogEvent(
        message=record.getMessage(),
        timestamp=datetime.fromtimestamp(record.created, tz=UTC),
        level=level_from_levelno(record.levelno),
        logger_name=record.name,
        exception=_exception_info(record),
        source_location=location,
        properties=properties,
    )


class GelfHandler(logging.Handler):
    """Logging handler that converts log records to GELF and writes them to a sink.

    Example:
        ```python
        from gelfkit import GelfHandler, InMemoryGelfSink

        sink = InMemoryGelfSink()
        handler = GelfHandler(sink, facility="billing")
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        sink: GelfSinkPort,
        facility: str = "",
        converter: GelfConverter | None = None,
        include_extra: bool = True,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a sink.

        Args:
            sink: Transport adapter implementing GelfSinkPort.
            facility: GELF facility. Empty means "GELF".
            converter: Converter to use. Defaults to one reading the
                ambient context set via set_log_context / log_context.
            include_extra: Whether ``extra=`` attributes become additional fields.
            level: Minimum level handled.
        """
        super().__init__(level)
        self._sink = sink
        self._facility = facility
        self._converter = converter or GelfConverter(
            ambient_context=ContextVarAmbientContext()
        )
        self._include_extra = include_extra

    @property
    def facility(self) -> str:
        """GELF facility passed to the converter for every record."""
        return self._facility

    def emit(self, record: logging.LogRecord) -> None:
        """Convert a log record and write it to the sink.

        Args:
            record: The log record to emit.
        """
        try:
            event = event_from_record(record, include_extra=self._include_extra)
            gelf = self._converter.convert(event, facility=self._facility)
            if gelf is not None:
                self._sink.write(gelf)
        except Exception:
            self.handleError(record)
