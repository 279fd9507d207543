"""Port interfaces for the collaborators of the conversion core.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from gelfkit.core.models import GelfRecord


@dataclass(frozen=True)
class ContextUnavailable:
    """Result returned when the ambient context cannot be read.

    Attributes:
        reason: Human readable description of why the context is missing.
    """

    reason: str = ""


@runtime_checkable
class AmbientContextPort(Protocol):
    """Port for read-only access to the ambient per-call context.

    Examples: ContextVarAmbientContext.
    """

    def get_ambient_context(self) -> Mapping[str, str] | ContextUnavailable:
        """Return the ambient key/value pairs for the current call context.

        Returns:
            Mapping of ambient fields in the store's iteration order, or
            ContextUnavailable if the store cannot be read.
        """
        ...


@runtime_checkable
class GelfSinkPort(Protocol):
    """Port for handing finished records to a transport.

    Delivery, batching and retry are the adapter's concern.
    Examples: InMemoryGelfSink.
    """

    def write(self, record: GelfRecord) -> None:
        """Accept a finished GELF record for delivery."""
        ...
