"""Conversion of log events into GELF 1.0 records.

The converter extracts the fixed GELF fields from a LogEvent, maps its level
onto the syslog scale and merges ambient context and event properties into
the record's additional fields. Ambient entries are merged first, so event
properties win when both produce the same field name.
"""

import socket
from collections.abc import Callable, Iterable

from gelfkit.core.errors import AmbientContextError, HostResolutionError
from gelfkit.core.fields import add_additional_field
from gelfkit.core.models import DEFAULT_FACILITY, GelfRecord, LogEvent
from gelfkit.core.ports import AmbientContextPort, ContextUnavailable
from gelfkit.core.severity import severity_level

SHORT_MESSAGE_MAX_LENGTH = 250

EXCEPTION_SOURCE_KEY = "ExceptionSource"
EXCEPTION_MESSAGE_KEY = "ExceptionMessage"
STACK_TRACE_KEY = "StackTrace"
LOGGER_NAME_KEY = "LoggerName"

HostResolver = Callable[[], str]


def short_message(message: str) -> str:
    """Truncate a message to the GELF short message length."""
    if len(message) > SHORT_MESSAGE_MAX_LENGTH:
        return message[:SHORT_MESSAGE_MAX_LENGTH]
    return message


def resolve_facility(facility: str | None) -> str:
    """Return the facility to send, substituting the default when empty."""
    return facility or DEFAULT_FACILITY


class GelfConverter:
    """Converts LogEvent objects into GelfRecord objects.

    The converter keeps no state between calls and may be shared across
    threads.

    Example:
        ```python
        from gelfkit import ContextVarAmbientContext, GelfConverter

        converter = GelfConverter(ambient_context=ContextVarAmbientContext())
        record = converter.convert(event, facility="billing")
        ```
    """

    def __init__(
        self,
        host_resolver: HostResolver = socket.gethostname,
        ambient_context: AmbientContextPort | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            host_resolver: Callable returning the local host identifier.
                Defaults to socket.gethostname.
            ambient_context: Accessor for the ambient per-call context.
                When None, no ambient fields are added.
        """
        if not callable(host_resolver):
            raise TypeError("host_resolver must be callable")
        self._host_resolver = host_resolver
        self._ambient_context = ambient_context

    def convert(self, event: LogEvent, facility: str | None = "") -> GelfRecord | None:
        """Convert a log event into a GELF record.

        Args:
            event: The event to convert. It is not modified.
            facility: Facility name. Empty or None becomes "GELF".

        Returns:
            The assembled record, or None if the event has no message.

        Raises:
            HostResolutionError: If the host identifier cannot be resolved.
        """
        message = event.message
        if message is None:
            return None

        properties: list[tuple[object, object]] = list(event.properties.items())
        if event.exception is not None:
            properties.append((EXCEPTION_SOURCE_KEY, event.exception.source))
            properties.append((EXCEPTION_MESSAGE_KEY, event.exception.message))
            properties.append((STACK_TRACE_KEY, event.exception.stack_trace))

        location = event.source_location
        host = self._resolve_host()

        properties.append((LOGGER_NAME_KEY, event.logger_name))

        additional_fields: dict[str, str] = {}
        for key, value in self._ambient_items():
            add_additional_field(additional_fields, key, value)
        for key, value in properties:
            add_additional_field(additional_fields, key, value)

        return GelfRecord(
            host=host,
            short_message=short_message(message),
            full_message=message,
            timestamp=event.timestamp,
            level=severity_level(event.level),
            facility=resolve_facility(facility),
            file=location.file if location is not None else "",
            line=str(location.line) if location is not None else "",
            additional_fields=additional_fields,
        )

    def _resolve_host(self) -> str:
        try:
            return self._host_resolver()
        except OSError as exc:
            raise HostResolutionError(f"could not resolve host name: {exc}") from exc

    def _ambient_items(self) -> Iterable[tuple[str, str]]:
        """Read the ambient context, treating an unavailable store as empty."""
        if self._ambient_context is None:
            return ()
        try:
            context = self._ambient_context.get_ambient_context()
        except (AmbientContextError, LookupError):
            return ()
        if context is None or isinstance(context, ContextUnavailable):
            return ()
        return tuple(context.items())
