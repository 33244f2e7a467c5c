"""
Observability Module.

Adaptation-decision events and the sinks that consume them.
"""

from auraplay.observability.events import (
    AdaptationEvent,
    EventSink,
    NullEventSink,
    ConsoleEventSink,
    JsonlEventSink,
    CollectingEventSink,
    NULL_SINK,
    make_event_sink,
)

__all__ = [
    "AdaptationEvent",
    "EventSink",
    "NullEventSink",
    "ConsoleEventSink",
    "JsonlEventSink",
    "CollectingEventSink",
    "NULL_SINK",
    "make_event_sink",
]
