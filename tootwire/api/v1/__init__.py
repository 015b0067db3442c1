"""
Endpoints under ``/api/v1`` (and the ``/api/v2/media`` upload).

Each module exposes factory functions returning request builders:

    >>> from tootwire.api.v1 import statuses
    >>> statuses.post(conn, "Hello").send()
"""

from tootwire.api.v1 import (
    accounts,
    apps,
    custom_emojis,
    instance,
    lists,
    markers,
    media,
    notifications,
    polls,
    reports,
    scheduled_statuses,
    statuses,
    streaming,
    timelines,
)

__all__ = [
    "accounts",
    "apps",
    "custom_emojis",
    "instance",
    "lists",
    "markers",
    "media",
    "notifications",
    "polls",
    "reports",
    "scheduled_statuses",
    "statuses",
    "streaming",
    "timelines",
]
