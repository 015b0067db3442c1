"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Scheduled statuses: ``/api/v1/scheduled_statuses``.
"""

from datetime import datetime
from typing import List

from tootwire.connection import Connection
from tootwire.entities.base import Nothing
from tootwire.entities.status import ScheduledStatus
from tootwire.methods.base import DELETE, GET, PUT, Method, PagedMethod
from tootwire.validation import check_schedule


class GetScheduledStatuses(PagedMethod):
    """GET ``/api/v1/scheduled_statuses``."""
    ENDPOINT = "/api/v1/scheduled_statuses"
    HTTP_METHOD = GET
    ENTITY = List[ScheduledStatus]


class GetScheduledStatus(Method):
    """GET ``/api/v1/scheduled_statuses/:id``."""
    ENDPOINT = "/api/v1/scheduled_statuses/:id"
    HTTP_METHOD = GET
    ENTITY = ScheduledStatus


class PutScheduledStatus(Method):
    """PUT ``/api/v1/scheduled_statuses/:id``: move a scheduled status to a new time."""
    ENDPOINT = "/api/v1/scheduled_statuses/:id"
    HTTP_METHOD = PUT
    ENTITY = ScheduledStatus

    def __init__(self, connection: Connection, scheduled_status_id: str, scheduled_at: datetime):
        super().__init__(connection, scheduled_status_id)
        self.params["scheduled_at"] = scheduled_at

    def validate(self) -> None:
        check_schedule(self.params["scheduled_at"])


class DeleteScheduledStatus(Method):
    """DELETE ``/api/v1/scheduled_statuses/:id``."""
    ENDPOINT = "/api/v1/scheduled_statuses/:id"
    HTTP_METHOD = DELETE
    ENTITY = Nothing


def get(connection: Connection) -> GetScheduledStatuses:
    return GetScheduledStatuses(connection)


def get_by_id(connection: Connection, scheduled_status_id: str) -> GetScheduledStatus:
    return GetScheduledStatus(connection, scheduled_status_id)


def put(connection: Connection, scheduled_status_id: str, scheduled_at: datetime) -> PutScheduledStatus:
    return PutScheduledStatus(connection, scheduled_status_id, scheduled_at)


def delete(connection: Connection, scheduled_status_id: str) -> DeleteScheduledStatus:
    return DeleteScheduledStatus(connection, scheduled_status_id)
