"""Sink adapters implementing GelfSinkPort."""

from gelfkit.adapters.sinks.in_memory import InMemoryGelfSink

__all__ = ["InMemoryGelfSink"]
