"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Poll entities.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field as ModelField

from tootwire.entities.base import Entity
from tootwire.entities.emoji import Emoji


class PollOption(Entity):
    """One choice of a poll."""
    title: str
    votes_count: Optional[int] = None


class Poll(Entity):
    """A poll attached to a status."""
    id: str
    expires_at: Optional[datetime] = None
    expired: bool = False
    multiple: bool = False
    votes_count: int = 0
    voters_count: Optional[int] = None
    options: List[PollOption] = ModelField(default_factory=list)
    emojis: List[Emoji] = ModelField(default_factory=list)
    voted: Optional[bool] = None
    own_votes: Optional[List[int]] = None
