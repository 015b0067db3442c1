"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Custom emoji entity.
"""

from typing import Optional

from tootwire.entities.base import Entity


class Emoji(Entity):
    """Custom emoji usable in statuses and profiles."""
    shortcode: str
    url: str
    static_url: str
    visible_in_picker: bool = True
    category: Optional[str] = None
