"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Events pushed on a streaming timeline and their classification.
"""

import json
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from tootwire.entities.notification import Notification
from tootwire.entities.status import Status
from tootwire.exceptions import DecodeError
from tootwire.methods.base import decode_entity

UPDATE = "update"
NOTIFICATION = "notification"
DELETE = "delete"
FILTERS_CHANGED = "filters_changed"


@dataclass
class UpdateEvent:
    """A new status appeared on the timeline."""
    status: Status


@dataclass
class NotificationEvent:
    notification: Notification


@dataclass
class DeleteEvent:
    """A status was deleted."""
    status_id: str


@dataclass
class FiltersChangedEvent:
    """The user's keyword filters changed; cached filters should be refetched."""
    pass


@dataclass
class PingEvent:
    """Keep-alive ping; the pong has already been sent when this is yielded."""
    data: bytes


@dataclass
class UnknownEvent:
    """An event this client does not recognise, kept verbatim."""
    event: str
    payload: Optional[str] = None


StreamEvent = Union[
    UpdateEvent,
    NotificationEvent,
    DeleteEvent,
    FiltersChangedEvent,
    PingEvent,
    UnknownEvent,
]


def _require_payload(event: str, payload: Optional[str]) -> str:
    if payload is None:
        raise DecodeError(f"'{event}' event has no payload")
    return payload


def classify_event(event: str, payload: Optional[str]) -> StreamEvent:
    """
    Turn one pushed message into a typed event.

    Args:
        event: Event name
        payload: Event data, a JSON document for update and notification

    Returns:
        The typed event; unrecognised names give an UnknownEvent

    Raises:
        DecodeError: If a recognised event carries a malformed payload
    """
    if event == UPDATE:
        return UpdateEvent(decode_entity(_require_payload(event, payload), Status))
    if event == NOTIFICATION:
        return NotificationEvent(decode_entity(_require_payload(event, payload), Notification))
    if event == DELETE:
        status_id = _require_payload(event, payload).strip()
        if not status_id:
            raise DecodeError("'delete' event has an empty status ID")
        return DeleteEvent(status_id)
    if event == FILTERS_CHANGED:
        return FiltersChangedEvent()
    return UnknownEvent(event, payload)


def parse_envelope(text: str) -> Tuple[str, Optional[str]]:
    """
    Split a WebSocket message ``{"event": ..., "payload": ...}``.

    The payload is usually a JSON document encoded as a string; a payload
    sent as a nested object is re-encoded.

    Raises:
        DecodeError: If the message is not a JSON object with an event name
    """
    try:
        envelope = json.loads(text)
    except ValueError as e:
        raise DecodeError(f"Streaming message is not JSON: {e}") from e

    if not isinstance(envelope, dict) or not isinstance(envelope.get("event"), str):
        raise DecodeError(f"Streaming message has no event name: {text[:200]}")

    payload = envelope.get("payload")
    if payload is not None and not isinstance(payload, str):
        payload = json.dumps(payload)
    return envelope["event"], payload
