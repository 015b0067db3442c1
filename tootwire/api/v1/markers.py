"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Read position markers shared across sessions.
"""

from typing import Any, Dict, List

from tootwire.connection import Connection
from tootwire.entities.lists import Marker
from tootwire.exceptions import NoTimelineError
from tootwire.methods.base import GET, POST, Method

HOME = "home"
NOTIFICATIONS = "notifications"


class GetMarkers(Method):
    """
    GET ``/api/v1/markers``.

    Both the home and notifications markers are requested unless one is
    excluded; excluding both is rejected.
    """
    ENDPOINT = "/api/v1/markers"
    HTTP_METHOD = GET
    ENTITY = Dict[str, Marker]

    def __init__(self, connection: Connection):
        super().__init__(connection)
        self._timelines: List[str] = [HOME, NOTIFICATIONS]

    def without_home(self) -> "GetMarkers":
        self._timelines = [tl for tl in self._timelines if tl != HOME]
        return self

    def without_notifications(self) -> "GetMarkers":
        self._timelines = [tl for tl in self._timelines if tl != NOTIFICATIONS]
        return self

    def validate(self) -> None:
        if not self._timelines:
            raise NoTimelineError()

    def payload(self) -> Dict[str, Any]:
        payload = super().payload()
        payload["timeline"] = list(self._timelines)
        return payload


class PostMarkers(Method):
    """POST ``/api/v1/markers``: save the last read status or notification ID."""
    ENDPOINT = "/api/v1/markers"
    HTTP_METHOD = POST
    ENTITY = Dict[str, Marker]

    def home(self, last_read_id: str) -> "PostMarkers":
        self.params[HOME] = {"last_read_id": last_read_id}
        return self

    def notifications(self, last_read_id: str) -> "PostMarkers":
        self.params[NOTIFICATIONS] = {"last_read_id": last_read_id}
        return self

    def validate(self) -> None:
        if HOME not in self.params and NOTIFICATIONS not in self.params:
            raise NoTimelineError()


def get(connection: Connection) -> GetMarkers:
    return GetMarkers(connection)


def post(connection: Connection) -> PostMarkers:
    return PostMarkers(connection)
