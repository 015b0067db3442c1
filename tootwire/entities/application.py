"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Application entity.
"""

from typing import Optional

from tootwire.entities.base import Entity


class Application(Entity):
    """
    An application registered with the server.

    ``client_id`` and ``client_secret`` are only present in the response to
    an application registration.
    """
    name: str
    website: Optional[str] = None
    vapid_key: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
