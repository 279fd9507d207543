"""Ambient log context backed by contextvars.

Fields set here are visible to every log call made from the same thread or
asyncio task, and are merged into GELF records as additional fields by
ContextVarAmbientContext.
"""

from collections.abc import Generator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar

from gelfkit.core.ports import ContextUnavailable

_log_context: ContextVar[Mapping[str, str]] = ContextVar("gelfkit_log_context")


def set_log_context(**fields: str | int | float | bool) -> None:
    """Add fields to the ambient log context of the current thread or task.

    Existing fields with the same name are replaced. The stored mapping is
    replaced rather than mutated, so contexts copied into other tasks are
    unaffected.
    """
    merged = dict(_log_context.get({}))
    merged.update({key: str(value) for key, value in fields.items()})
    _log_context.set(merged)


def clear_log_context() -> None:
    """Remove every field from the ambient log context."""
    _log_context.set({})


def get_log_context() -> dict[str, str]:
    """Return a copy of the ambient log context."""
    return dict(_log_context.get({}))


@contextmanager
def log_context(**fields: str | int | float | bool) -> Generator[None, None, None]:
    """Context manager that adds fields for the duration of a block.

    The previous context is restored on exit, including on error.

    Example:
        ```python
        with log_context(request_id="abc"):
            logger.info("handled")
        ```
    """
    token = _log_context.set(dict(_log_context.get({})))
    try:
        set_log_context(**fields)
        yield
    finally:
        _log_context.reset(token)


class ContextVarAmbientContext:
    """AmbientContextPort implementation reading a ContextVar.

    Reports ContextUnavailable when the variable has never been set in the
    current context.
    """

    def __init__(self, var: ContextVar[Mapping[str, str]] | None = None) -> None:
        """Initialize the accessor.

        Args:
            var: Context variable to read. Defaults to the module's log
                context used by set_log_context and log_context.
        """
        self._var = var if var is not None else _log_context

    def get_ambient_context(self) -> Mapping[str, str] | ContextUnavailable:
        """Return the ambient fields of the current thread or task."""
        try:
            return dict(self._var.get())
        except LookupError:
            return ContextUnavailable(f"context variable {self._var.name!r} is not set")
