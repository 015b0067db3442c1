"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Account related entities.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field as ModelField

from tootwire.entities.base import Entity
from tootwire.entities.emoji import Emoji


class Field(Entity):
    """Profile metadata name/value pair."""
    name: str
    value: str
    verified_at: Optional[datetime] = None


class Account(Entity):
    """A user of Mastodon and their profile."""
    id: str
    username: str
    acct: str
    url: Optional[str] = None
    display_name: str = ""
    note: str = ""
    avatar: Optional[str] = None
    avatar_static: Optional[str] = None
    header: Optional[str] = None
    header_static: Optional[str] = None
    locked: bool = False
    bot: bool = False
    discoverable: Optional[bool] = None
    group: bool = False
    created_at: Optional[datetime] = None
    last_status_at: Optional[str] = None
    statuses_count: int = 0
    followers_count: int = 0
    following_count: int = 0
    emojis: List[Emoji] = ModelField(default_factory=list)
    fields: List[Field] = ModelField(default_factory=list)
    moved: Optional["Account"] = None


class Relationship(Entity):
    """Relationship between the authorized user and another account."""
    id: str
    following: bool = False
    showing_reblogs: bool = False
    notifying: bool = False
    followed_by: bool = False
    blocking: bool = False
    blocked_by: bool = False
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    domain_blocking: bool = False
    endorsed: bool = False
    note: Optional[str] = None


Account.model_rebuild()
