"""
Streaming timelines: typed events pushed by the server.
"""

from tootwire.streaming.channel import (
    Channel,
    PingMessage,
    SseChannel,
    TextMessage,
    WebSocketChannel,
)
from tootwire.streaming.events import (
    DeleteEvent,
    FiltersChangedEvent,
    NotificationEvent,
    PingEvent,
    StreamEvent,
    UnknownEvent,
    UpdateEvent,
    classify_event,
)
from tootwire.streaming.stream_type import StreamType
from tootwire.streaming.timeline import EventListener, StreamingTimeline, dispatch_event

__all__ = [
    "Channel",
    "DeleteEvent",
    "EventListener",
    "FiltersChangedEvent",
    "NotificationEvent",
    "PingEvent",
    "PingMessage",
    "SseChannel",
    "StreamEvent",
    "StreamType",
    "StreamingTimeline",
    "TextMessage",
    "UnknownEvent",
    "UpdateEvent",
    "WebSocketChannel",
    "classify_event",
    "dispatch_event",
]
