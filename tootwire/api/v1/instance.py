"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Server information: ``/api/v1/instance``.
"""

from typing import List

from tootwire.connection import Connection
from tootwire.entities.instance import Instance
from tootwire.methods.base import GET, Method


class GetInstance(Method):
    """GET ``/api/v1/instance``."""
    ENDPOINT = "/api/v1/instance"
    HTTP_METHOD = GET
    ENTITY = Instance
    AUTHORIZED = False


class GetPeers(Method):
    """GET ``/api/v1/instance/peers``: domains this server is aware of."""
    ENDPOINT = "/api/v1/instance/peers"
    HTTP_METHOD = GET
    ENTITY = List[str]
    AUTHORIZED = False


def get(connection: Connection) -> GetInstance:
    return GetInstance(connection)


def peers(connection: Connection) -> GetPeers:
    return GetPeers(connection)
