"""
Entities returned by the Mastodon API.
"""

from tootwire.entities.account import Account, Field, Relationship
from tootwire.entities.application import Application
from tootwire.entities.attachment import Attachment, AttachmentMeta, Focus
from tootwire.entities.base import Entity, Nothing
from tootwire.entities.emoji import Emoji
from tootwire.entities.instance import Instance, InstanceStats, InstanceUrls
from tootwire.entities.lists import AccountList, Marker, Report
from tootwire.entities.notification import Notification
from tootwire.entities.page_navigation import PageNavigation
from tootwire.entities.poll import Poll, PollOption
from tootwire.entities.status import (
    Card,
    Context,
    Mention,
    ScheduledStatus,
    ScheduledStatusParams,
    Status,
    Tag,
    TagHistory,
    Visibility,
)

__all__ = [
    "Account",
    "AccountList",
    "Application",
    "Attachment",
    "AttachmentMeta",
    "Card",
    "Context",
    "Emoji",
    "Entity",
    "Field",
    "Focus",
    "Instance",
    "InstanceStats",
    "InstanceUrls",
    "Marker",
    "Mention",
    "Nothing",
    "Notification",
    "PageNavigation",
    "Poll",
    "PollOption",
    "Relationship",
    "Report",
    "ScheduledStatus",
    "ScheduledStatusParams",
    "Status",
    "Tag",
    "TagHistory",
    "Visibility",
]
