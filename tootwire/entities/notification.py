"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Notification entity.
"""

from datetime import datetime
from typing import Optional

from tootwire.entities.account import Account
from tootwire.entities.base import Entity
from tootwire.entities.status import Status


class Notification(Entity):
    """
    Something that happened involving the authorized user.

    ``type`` is kept as plain text (mention, reblog, favourite, follow, poll,
    follow_request, status, update, ...) so new notification kinds decode.
    """
    id: str
    type: str
    created_at: datetime
    account: Account
    status: Optional[Status] = None
