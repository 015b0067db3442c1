"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Application registration: ``/api/v1/apps``.
"""

from typing import Any, Dict, Iterable

from tootwire.connection import Connection
from tootwire.entities.application import Application
from tootwire.methods.base import GET, POST, Method
from tootwire.scope import Scope, join_scopes

OUT_OF_BAND_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"


class PostApps(Method):
    """
    POST ``/api/v1/apps``: register a client application.

    The response carries ``client_id`` and ``client_secret`` for the OAuth
    flow. Scopes default to ``read``.
    """
    ENDPOINT = "/api/v1/apps"
    HTTP_METHOD = POST
    ENTITY = Application
    AUTHORIZED = False

    def __init__(self, connection: Connection, client_name: str):
        super().__init__(connection)
        self.params["client_name"] = client_name
        self.params["redirect_uris"] = OUT_OF_BAND_REDIRECT_URI
        self._scopes = [Scope.READ]

    def redirect_uris(self, redirect_uris: str) -> "PostApps":
        self.params["redirect_uris"] = redirect_uris
        return self

    def scopes(self, scopes: Iterable[Scope]) -> "PostApps":
        self._scopes = list(scopes)
        return self

    def website(self, website: str) -> "PostApps":
        self.params["website"] = website
        return self

    def payload(self) -> Dict[str, Any]:
        payload = super().payload()
        payload["scopes"] = join_scopes(self._scopes)
        return payload


class VerifyAppCredentials(Method):
    """GET ``/api/v1/apps/verify_credentials``."""
    ENDPOINT = "/api/v1/apps/verify_credentials"
    HTTP_METHOD = GET
    ENTITY = Application


def post(connection: Connection, client_name: str) -> PostApps:
    return PostApps(connection, client_name)


def verify_credentials(connection: Connection) -> VerifyAppCredentials:
    return VerifyAppCredentials(connection)
