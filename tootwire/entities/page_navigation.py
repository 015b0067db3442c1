"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Pagination cursors parsed from the ``Link`` response header.
"""

import re
from typing import Optional

LINK_PATTERN = re.compile(r'[?&](?:min|max|since)_id=(\w+)[^>]*>\s*;\s*rel="(next|prev)"')


class PageNavigation:
    """
    Cursors for walking a paginated collection.

    The ``next`` link points to older items and the ``prev`` link to newer
    ones. Parsing is lenient: a missing or unrecognised header leaves both
    cursors unset.

    Attributes:
        raw: Header value exactly as received
        newest: ID of the newest item (from the ``prev`` link)
        oldest: ID of the oldest item (from the ``next`` link)
    """

    def __init__(
        self,
        raw: Optional[str] = None,
        newest: Optional[str] = None,
        oldest: Optional[str] = None,
    ):
        self.raw = raw
        self.newest = newest
        self.oldest = oldest

    @classmethod
    def parse(cls, header: Optional[str]) -> "PageNavigation":
        """
        Parse a ``Link`` header value.

        Args:
            header: Header value, or None if the response had no such header

        Returns:
            PageNavigation with whichever cursors were found
        """
        if header is None:
            return cls()

        newest = None
        oldest = None
        for match in LINK_PATTERN.finditer(header):
            cursor, rel = match.group(1), match.group(2)
            if rel == "next":
                oldest = cursor
            else:
                newest = cursor

        return cls(raw=header, newest=newest, oldest=oldest)

    @property
    def since_id(self) -> Optional[str]:
        return self.newest

    @property
    def min_id(self) -> Optional[str]:
        return self.newest

    @property
    def max_id(self) -> Optional[str]:
        return self.oldest

    @property
    def has_next(self) -> bool:
        return self.oldest is not None

    @property
    def has_prev(self) -> bool:
        return self.newest is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageNavigation):
            return NotImplemented
        return (self.raw, self.newest, self.oldest) == (other.raw, other.newest, other.oldest)

    def __repr__(self) -> str:
        return f"PageNavigation(newest={self.newest!r}, oldest={self.oldest!r})"
