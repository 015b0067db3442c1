"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Instance entity.
"""

from typing import List, Optional

from pydantic import Field as ModelField

from tootwire.entities.account import Account
from tootwire.entities.base import Entity


class InstanceUrls(Entity):
    streaming_api: Optional[str] = None


class InstanceStats(Entity):
    user_count: int = 0
    status_count: int = 0
    domain_count: int = 0


class Instance(Entity):
    """Information about the server."""
    uri: str
    title: str = ""
    short_description: str = ""
    description: str = ""
    email: str = ""
    version: str = ""
    urls: InstanceUrls = ModelField(default_factory=InstanceUrls)
    stats: InstanceStats = ModelField(default_factory=InstanceStats)
    thumbnail: Optional[str] = None
    languages: List[str] = ModelField(default_factory=list)
    registrations: bool = False
    approval_required: bool = False
    invites_enabled: bool = False
    contact_account: Optional[Account] = None
