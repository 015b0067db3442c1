"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Custom emojis available on the server.
"""

from typing import List

from tootwire.connection import Connection
from tootwire.entities.emoji import Emoji
from tootwire.methods.base import GET, Method


class GetCustomEmojis(Method):
    """GET ``/api/v1/custom_emojis``."""
    ENDPOINT = "/api/v1/custom_emojis"
    HTTP_METHOD = GET
    ENTITY = List[Emoji]
    AUTHORIZED = False


def get(connection: Connection) -> GetCustomEmojis:
    return GetCustomEmojis(connection)
