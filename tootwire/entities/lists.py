"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

List, marker and report entities.
"""

from datetime import datetime
from typing import Optional

from tootwire.entities.account import Account
from tootwire.entities.base import Entity


class AccountList(Entity):
    """A list of accounts the user follows."""
    id: str
    title: str
    replies_policy: Optional[str] = None


class Marker(Entity):
    """Last read position in a timeline."""
    last_read_id: str
    version: int = 0
    updated_at: Optional[datetime] = None


class Report(Entity):
    """A report filed against an account."""
    id: str
    action_taken: bool = False
    category: Optional[str] = None
    comment: str = ""
    forwarded: bool = False
    created_at: Optional[datetime] = None
    target_account: Optional[Account] = None
