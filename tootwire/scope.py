"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

OAuth scopes requested when registering an application.
"""

from enum import Enum
from typing import Dict, Iterable, List


class Scope(str, Enum):
    """OAuth scope granted to an application token."""

    READ = "read"
    READ_ACCOUNTS = "read:accounts"
    READ_BLOCKS = "read:blocks"
    READ_BOOKMARKS = "read:bookmarks"
    READ_FAVOURITES = "read:favourites"
    READ_FILTERS = "read:filters"
    READ_FOLLOWS = "read:follows"
    READ_LISTS = "read:lists"
    READ_MUTES = "read:mutes"
    READ_NOTIFICATIONS = "read:notifications"
    READ_SEARCH = "read:search"
    READ_STATUSES = "read:statuses"
    WRITE = "write"
    WRITE_ACCOUNTS = "write:accounts"
    WRITE_BLOCKS = "write:blocks"
    WRITE_BOOKMARKS = "write:bookmarks"
    WRITE_CONVERSATIONS = "write:conversations"
    WRITE_FAVOURITES = "write:favourites"
    WRITE_FILTERS = "write:filters"
    WRITE_FOLLOWS = "write:follows"
    WRITE_LISTS = "write:lists"
    WRITE_MEDIA = "write:media"
    WRITE_MUTES = "write:mutes"
    WRITE_NOTIFICATIONS = "write:notifications"
    WRITE_REPORTS = "write:reports"
    WRITE_STATUSES = "write:statuses"
    FOLLOW = "follow"
    PUSH = "push"
    ADMIN_READ = "admin:read"
    ADMIN_READ_ACCOUNTS = "admin:read:accounts"
    ADMIN_READ_REPORTS = "admin:read:reports"
    ADMIN_WRITE = "admin:write"
    ADMIN_WRITE_ACCOUNTS = "admin:write:accounts"
    ADMIN_WRITE_REPORTS = "admin:write:reports"

    def __str__(self) -> str:
        return self.value


# Lookup table built once at import time
_SCOPES_BY_NAME: Dict[str, Scope] = {scope.value: scope for scope in Scope}


def parse_scope(name: str) -> Scope:
    """
    Parse a scope name such as ``"read:statuses"``.

    Raises:
        ValueError: If the name is not a known scope
    """
    try:
        return _SCOPES_BY_NAME[name]
    except KeyError:
        raise ValueError(f"'{name}' is not a valid scope") from None


def parse_scopes(text: str) -> List[Scope]:
    """Parse a space separated scope string as returned by the server."""
    return [parse_scope(name) for name in text.split()]


def join_scopes(scopes: Iterable[Scope]) -> str:
    """Format scopes as the space separated string the server expects."""
    return " ".join(scope.value for scope in scopes)
