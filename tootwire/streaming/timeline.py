"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Streaming timeline: an iterator of typed events over a channel.
"""

from typing import Iterator, Optional

from tootwire.entities.notification import Notification
from tootwire.entities.status import Status
from tootwire.exceptions import TootwireError
from tootwire.logging_config import get_logger, log_stream_event
from tootwire.streaming.channel import Channel, PingMessage
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

logger = get_logger(__name__)


class EventListener:
    """
    Callbacks for events of a streaming timeline.

    Override the callbacks of interest; the defaults ignore the event.
    An exception raised by a callback stops ``StreamingTimeline.attach()``.
    """

    def update(self, status: Status) -> None:
        pass

    def notification(self, notification: Notification) -> None:
        pass

    def delete(self, status_id: str) -> None:
        pass

    def filters_changed(self) -> None:
        pass

    def ping(self, data: bytes) -> None:
        pass

    def unknown(self, event: str, payload: Optional[str]) -> None:
        pass


class StreamingTimeline:
    """
    Lazy, forward-only sequence of streaming events.

    Each message read from the channel is classified independently. A ping is
    answered with a pong carrying the same data before its PingEvent is
    yielded. The sequence ends when the server closes the channel; after an
    error the timeline is closed and cannot be resumed.

    Example:
        >>> with streaming.get(conn, StreamType.public()).send() as timeline:
        ...     for event in timeline:
        ...         if isinstance(event, UpdateEvent):
        ...             print(event.status.content)
    """

    def __init__(self, channel: Channel):
        self._channel = channel
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[StreamEvent]:
        return self

    def __next__(self) -> StreamEvent:
        if self._closed:
            raise StopIteration

        try:
            message = self._channel.receive()
            if message is None:
                logger.debug("Streaming channel closed by server")
                self.close()
                raise StopIteration

            if isinstance(message, PingMessage):
                self._channel.pong(message.data)
                log_stream_event(logger, "ping")
                return PingEvent(message.data)

            event = classify_event(message.event, message.payload)
        except TootwireError:
            self.close()
            raise

        log_stream_event(logger, message.event)
        return event

    def attach(self, listener: EventListener) -> None:
        """
        Drive the timeline until it ends, dispatching each event to ``listener``.

        Raises:
            TootwireError: If reading or decoding fails
        """
        logger.debug(f"Attached {type(listener).__name__} to streaming timeline")
        try:
            for event in self:
                dispatch_event(listener, event)
        finally:
            self.close()

    def close(self) -> None:
        """Close the underlying channel. Safe to call more than once."""
        if not self._closed:
            self._closed = True
            self._channel.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def dispatch_event(listener: EventListener, event: StreamEvent) -> None:
    """Call the listener callback matching ``event``."""
    if isinstance(event, UpdateEvent):
        listener.update(event.status)
    elif isinstance(event, NotificationEvent):
        listener.notification(event.notification)
    elif isinstance(event, DeleteEvent):
        listener.delete(event.status_id)
    elif isinstance(event, FiltersChangedEvent):
        listener.filters_changed()
    elif isinstance(event, PingEvent):
        listener.ping(event.data)
    elif isinstance(event, UnknownEvent):
        listener.unknown(event.event, event.payload)
