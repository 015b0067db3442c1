"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Status entities and the types embedded in them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field as ModelField
from pydantic import field_validator

from tootwire.entities.account import Account
from tootwire.entities.application import Application
from tootwire.entities.attachment import Attachment
from tootwire.entities.base import Entity
from tootwire.entities.emoji import Emoji
from tootwire.entities.poll import Poll


class Visibility(str, Enum):
    """Who can see a status."""
    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
    DIRECT = "direct"

    def __str__(self) -> str:
        return self.value


_VISIBILITIES = {visibility.value: visibility for visibility in Visibility}


def known_visibility(value: Any) -> Any:
    """Map a known visibility name to Visibility; other names stay plain text."""
    if isinstance(value, str) and not isinstance(value, Visibility):
        return _VISIBILITIES.get(value, value)
    return value


class Mention(Entity):
    """An account mentioned in a status."""
    id: str
    username: str
    acct: str
    url: str


class TagHistory(Entity):
    """Daily usage statistics of a hashtag."""
    day: str
    uses: str
    accounts: str


class Tag(Entity):
    """A hashtag used within a status."""
    name: str
    url: str
    history: List[TagHistory] = ModelField(default_factory=list)
    following: Optional[bool] = None


class Card(Entity):
    """Rich preview card generated from a link in a status."""
    url: str
    title: str = ""
    description: str = ""
    type: str = "link"
    author_name: str = ""
    author_url: str = ""
    provider_name: str = ""
    provider_url: str = ""
    html: str = ""
    width: int = 0
    height: int = 0
    image: Optional[str] = None
    embed_url: str = ""
    blurhash: Optional[str] = None


class Status(Entity):
    """
    A status posted by an account.

    ``visibility`` is a Visibility, or plain text for values some servers
    add (such as ``local``).
    """
    id: str
    uri: str
    created_at: datetime
    account: Account
    content: str = ""
    visibility: Union[Visibility, str] = Visibility.PUBLIC
    sensitive: bool = False
    spoiler_text: str = ""
    media_attachments: List[Attachment] = ModelField(default_factory=list)
    application: Optional[Application] = None
    mentions: List[Mention] = ModelField(default_factory=list)
    tags: List[Tag] = ModelField(default_factory=list)
    emojis: List[Emoji] = ModelField(default_factory=list)
    reblogs_count: int = 0
    favourites_count: int = 0
    replies_count: int = 0
    url: Optional[str] = None
    in_reply_to_id: Optional[str] = None
    in_reply_to_account_id: Optional[str] = None
    reblog: Optional["Status"] = None
    poll: Optional[Poll] = None
    card: Optional[Card] = None
    language: Optional[str] = None
    text: Optional[str] = None
    edited_at: Optional[datetime] = None
    favourited: Optional[bool] = None
    reblogged: Optional[bool] = None
    muted: Optional[bool] = None
    bookmarked: Optional[bool] = None
    pinned: Optional[bool] = None

    @field_validator("visibility", mode="before")
    @classmethod
    def _known_visibility(cls, v: Any) -> Any:
        return known_visibility(v)


class Context(Entity):
    """Statuses above and below a status in its thread."""
    ancestors: List[Status] = ModelField(default_factory=list)
    descendants: List[Status] = ModelField(default_factory=list)


class ScheduledStatusParams(Entity):
    """Parameters a scheduled status will be posted with."""
    text: str = ""
    visibility: Optional[Union[Visibility, str]] = None
    poll: Optional[Dict[str, Any]] = None
    media_ids: Optional[List[str]] = None
    sensitive: Optional[bool] = None
    spoiler_text: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    in_reply_to_id: Optional[str] = None
    language: Optional[str] = None
    application_id: Optional[int] = None
    idempotency: Optional[str] = None
    with_rate_limit: bool = False

    @field_validator("visibility", mode="before")
    @classmethod
    def _known_visibility(cls, v: Any) -> Any:
        return known_visibility(v)


class ScheduledStatus(Entity):
    """A status that will be published at a future time."""
    id: str
    scheduled_at: datetime
    params: ScheduledStatusParams
    media_attachments: List[Attachment] = ModelField(default_factory=list)


Status.model_rebuild()
