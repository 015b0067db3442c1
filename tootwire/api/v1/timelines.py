"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Timelines: home, public, hashtag and list.
"""

from typing import List

from tootwire.connection import Connection
from tootwire.entities.status import Status
from tootwire.methods.base import GET, PagedMethod


class TimelineMethod(PagedMethod):
    HTTP_METHOD = GET
    ENTITY = List[Status]

    def local(self) -> "TimelineMethod":
        """Only statuses from this server."""
        self.params["local"] = True
        return self

    def only_media(self) -> "TimelineMethod":
        self.params["only_media"] = True
        return self


class GetHomeTimeline(PagedMethod):
    """GET ``/api/v1/timelines/home``."""
    ENDPOINT = "/api/v1/timelines/home"
    HTTP_METHOD = GET
    ENTITY = List[Status]


class GetPublicTimeline(TimelineMethod):
    """GET ``/api/v1/timelines/public``."""
    ENDPOINT = "/api/v1/timelines/public"
    AUTHORIZED = False

    def remote(self) -> "GetPublicTimeline":
        """Only statuses from other servers."""
        self.params["remote"] = True
        return self


class GetTagTimeline(TimelineMethod):
    """GET ``/api/v1/timelines/tag/:hashtag``."""
    ENDPOINT = "/api/v1/timelines/tag/:id"
    AUTHORIZED = False


class GetListTimeline(PagedMethod):
    """GET ``/api/v1/timelines/list/:list_id``."""
    ENDPOINT = "/api/v1/timelines/list/:id"
    HTTP_METHOD = GET
    ENTITY = List[Status]


def home(connection: Connection) -> GetHomeTimeline:
    return GetHomeTimeline(connection)


def public(connection: Connection) -> GetPublicTimeline:
    return GetPublicTimeline(connection)


def tag(connection: Connection, hashtag: str) -> GetTagTimeline:
    return GetTagTimeline(connection, hashtag.lstrip("#"))


def list_timeline(connection: Connection, list_id: str) -> GetListTimeline:
    return GetListTimeline(connection, list_id)
