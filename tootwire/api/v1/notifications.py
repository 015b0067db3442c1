"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Notifications of the authorized user.
"""

from typing import List, Sequence

from tootwire.connection import Connection
from tootwire.entities.base import Nothing
from tootwire.entities.notification import Notification
from tootwire.methods.base import GET, POST, Method, PagedMethod


class GetNotifications(PagedMethod):
    """GET ``/api/v1/notifications``."""
    ENDPOINT = "/api/v1/notifications"
    HTTP_METHOD = GET
    ENTITY = List[Notification]

    def types(self, types: Sequence[str]) -> "GetNotifications":
        self.params["types"] = list(types)
        return self

    def exclude_types(self, types: Sequence[str]) -> "GetNotifications":
        self.params["exclude_types"] = list(types)
        return self

    def account_id(self, account_id: str) -> "GetNotifications":
        self.params["account_id"] = account_id
        return self


class GetNotification(Method):
    """GET ``/api/v1/notifications/:id``."""
    ENDPOINT = "/api/v1/notifications/:id"
    HTTP_METHOD = GET
    ENTITY = Notification


class DismissNotification(Method):
    """POST ``/api/v1/notifications/:id/dismiss``."""
    ENDPOINT = "/api/v1/notifications/:id/dismiss"
    HTTP_METHOD = POST
    ENTITY = Nothing


class ClearNotifications(Method):
    """POST ``/api/v1/notifications/clear``."""
    ENDPOINT = "/api/v1/notifications/clear"
    HTTP_METHOD = POST
    ENTITY = Nothing


def get(connection: Connection) -> GetNotifications:
    return GetNotifications(connection)


def get_by_id(connection: Connection, notification_id: str) -> GetNotification:
    return GetNotification(connection, notification_id)


def dismiss(connection: Connection, notification_id: str) -> DismissNotification:
    return DismissNotification(connection, notification_id)


def clear(connection: Connection) -> ClearNotifications:
    return ClearNotifications(connection)
