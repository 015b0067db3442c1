"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Statuses: posting, fetching and acting on statuses.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import requests

from tootwire.connection import Connection
from tootwire.entities.account import Account
from tootwire.entities.status import Context, ScheduledStatus, Status, Visibility
from tootwire.exceptions import InvalidStatusError
from tootwire.methods.base import DELETE, GET, POST, Method, PagedMethod, decode_entity
from tootwire.validation import (
    check_characters,
    check_language,
    check_schedule,
    clean_media_ids,
    clean_poll_options,
    clean_text,
)

IDEMPOTENCY_HEADER = "Idempotency-Key"


class PostStatus(Method):
    """
    POST ``/api/v1/statuses``: publish or schedule a status.

    Checked before sending:

    - the status has non-blank text or media attachments
    - text plus spoiler text fits ``status_max_characters``
    - 1 to ``status_max_medias`` unique media IDs (blank IDs are dropped)
    - 2 to ``poll_max_options`` unique poll options (trimmed, blank ones dropped)
    - the language is ISO 639-1
    - a scheduled time is at least LEAST_SCHEDULABLE_PERIOD seconds ahead

    Returns a Status, or a ScheduledStatus when ``scheduled_at`` is set.

    Example:
        >>> statuses.post(conn).status("Hello").unlisted().send()
    """
    ENDPOINT = "/api/v1/statuses"
    HTTP_METHOD = POST
    ENTITY = Status

    def __init__(self, connection: Connection, status: Optional[str] = None):
        super().__init__(connection)
        self.params["status"] = clean_text(status)
        self.params["language"] = connection.default_language
        self._idempotency_key: Optional[str] = None

    def status(self, status: str) -> "PostStatus":
        self.params["status"] = clean_text(status)
        return self

    def media_ids(self, media_ids: Sequence[str]) -> "PostStatus":
        self.params["media_ids"] = list(media_ids)
        return self

    def in_reply_to_id(self, status_id: str) -> "PostStatus":
        self.params["in_reply_to_id"] = status_id
        return self

    def sensitive(self, sensitive: bool = True) -> "PostStatus":
        self.params["sensitive"] = sensitive
        return self

    def spoiler_text(self, spoiler_text: str) -> "PostStatus":
        self.params["spoiler_text"] = clean_text(spoiler_text)
        return self

    def visibility(self, visibility: Visibility) -> "PostStatus":
        self.params["visibility"] = Visibility(visibility)
        return self

    def public(self) -> "PostStatus":
        return self.visibility(Visibility.PUBLIC)

    def unlisted(self) -> "PostStatus":
        return self.visibility(Visibility.UNLISTED)

    def private(self) -> "PostStatus":
        return self.visibility(Visibility.PRIVATE)

    def direct(self) -> "PostStatus":
        return self.visibility(Visibility.DIRECT)

    def language(self, language: str) -> "PostStatus":
        self.params["language"] = language
        return self

    def poll(
        self,
        options: Sequence[str],
        expires_in: int,
        multiple: bool = False,
        hide_totals: bool = False,
    ) -> "PostStatus":
        """
        Attach a poll.

        Args:
            options: Choice texts
            expires_in: Seconds the poll stays open
            multiple: Allow several choices per voter
            hide_totals: Hide vote counts until the poll ends
        """
        self.params["poll"] = {
            "options": list(options),
            "expires_in": expires_in,
            "multiple": multiple,
            "hide_totals": hide_totals,
        }
        return self

    def scheduled_at(self, scheduled_at: datetime) -> "PostStatus":
        self.params["scheduled_at"] = scheduled_at
        return self

    def idempotency_key(self, key: str) -> "PostStatus":
        """Send an ``Idempotency-Key`` header so a resent request posts once."""
        self._idempotency_key = key
        return self

    @property
    def is_scheduled(self) -> bool:
        return self.params.get("scheduled_at") is not None

    def validate(self) -> None:
        text = self.params.get("status")
        media_ids = self.params.get("media_ids")

        if media_ids is not None:
            media_ids = clean_media_ids(media_ids, self.connection.status_max_medias)
        if not text and not media_ids:
            raise InvalidStatusError()

        check_characters(text, self.params.get("spoiler_text"), self.connection.status_max_characters)

        language = self.params.get("language")
        if language is not None:
            check_language(language)

        poll = self.params.get("poll")
        if poll is not None:
            clean_poll_options(poll["options"], self.connection.poll_max_options)

        if self.is_scheduled:
            check_schedule(self.params["scheduled_at"])

    def payload(self) -> Dict[str, Any]:
        payload = super().payload()
        if "media_ids" in payload:
            payload["media_ids"] = clean_media_ids(payload["media_ids"], self.connection.status_max_medias)
        if "poll" in payload:
            payload["poll"]["options"] = clean_poll_options(
                payload["poll"]["options"], self.connection.poll_max_options
            )
        return payload

    def prepare(self) -> requests.Request:
        request = super().prepare()
        if self._idempotency_key:
            request.headers[IDEMPOTENCY_HEADER] = self._idempotency_key
        return request

    def decode(self, response: requests.Response) -> Any:
        if self.is_scheduled:
            return decode_entity(response.text, ScheduledStatus)
        return decode_entity(response.text, Status)


class GetStatus(Method):
    """GET ``/api/v1/statuses/:id``."""
    ENDPOINT = "/api/v1/statuses/:id"
    HTTP_METHOD = GET
    ENTITY = Status
    AUTHORIZED = False


class DeleteStatus(Method):
    """DELETE ``/api/v1/statuses/:id``: the deleted status, with its source text."""
    ENDPOINT = "/api/v1/statuses/:id"
    HTTP_METHOD = DELETE
    ENTITY = Status


class GetContext(Method):
    """GET ``/api/v1/statuses/:id/context``."""
    ENDPOINT = "/api/v1/statuses/:id/context"
    HTTP_METHOD = GET
    ENTITY = Context
    AUTHORIZED = False


class StatusAction(Method):
    """POST to a ``/api/v1/statuses/:id/<action>`` endpoint; returns the updated Status."""
    HTTP_METHOD = POST
    ENTITY = Status


class Favourite(StatusAction):
    ENDPOINT = "/api/v1/statuses/:id/favourite"


class Unfavourite(StatusAction):
    ENDPOINT = "/api/v1/statuses/:id/unfavourite"


class Reblog(StatusAction):
    ENDPOINT = "/api/v1/statuses/:id/reblog"

    def visibility(self, visibility: Visibility) -> "Reblog":
        self.params["visibility"] = Visibility(visibility)
        return self


class Unreblog(StatusAction):
    ENDPOINT = "/api/v1/statuses/:id/unreblog"


class Bookmark(StatusAction):
    ENDPOINT = "/api/v1/statuses/:id/bookmark"


class Unbookmark(StatusAction):
    ENDPOINT = "/api/v1/statuses/:id/unbookmark"


class Pin(StatusAction):
    ENDPOINT = "/api/v1/statuses/:id/pin"


class Unpin(StatusAction):
    ENDPOINT = "/api/v1/statuses/:id/unpin"


class GetFavouritedBy(PagedMethod):
    """GET ``/api/v1/statuses/:id/favourited_by``."""
    ENDPOINT = "/api/v1/statuses/:id/favourited_by"
    HTTP_METHOD = GET
    ENTITY = List[Account]
    AUTHORIZED = False


class GetRebloggedBy(PagedMethod):
    """GET ``/api/v1/statuses/:id/reblogged_by``."""
    ENDPOINT = "/api/v1/statuses/:id/reblogged_by"
    HTTP_METHOD = GET
    ENTITY = List[Account]
    AUTHORIZED = False


def post(connection: Connection, status: Optional[str] = None) -> PostStatus:
    return PostStatus(connection, status)


def get(connection: Connection, status_id: str) -> GetStatus:
    return GetStatus(connection, status_id)


def delete(connection: Connection, status_id: str) -> DeleteStatus:
    return DeleteStatus(connection, status_id)


def context(connection: Connection, status_id: str) -> GetContext:
    return GetContext(connection, status_id)


def favourite(connection: Connection, status_id: str) -> Favourite:
    return Favourite(connection, status_id)


def unfavourite(connection: Connection, status_id: str) -> Unfavourite:
    return Unfavourite(connection, status_id)


def reblog(connection: Connection, status_id: str) -> Reblog:
    return Reblog(connection, status_id)


def unreblog(connection: Connection, status_id: str) -> Unreblog:
    return Unreblog(connection, status_id)


def bookmark(connection: Connection, status_id: str) -> Bookmark:
    return Bookmark(connection, status_id)


def unbookmark(connection: Connection, status_id: str) -> Unbookmark:
    return Unbookmark(connection, status_id)


def pin(connection: Connection, status_id: str) -> Pin:
    return Pin(connection, status_id)


def unpin(connection: Connection, status_id: str) -> Unpin:
    return Unpin(connection, status_id)


def favourited_by(connection: Connection, status_id: str) -> GetFavouritedBy:
    return GetFavouritedBy(connection, status_id)


def reblogged_by(connection: Connection, status_id: str) -> GetRebloggedBy:
    return GetRebloggedBy(connection, status_id)
