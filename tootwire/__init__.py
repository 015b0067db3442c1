"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Tootwire - Typed client for the Mastodon REST and streaming APIs

Tootwire builds Mastodon API requests with chainable builders, validates
them against the server's limits before sending, maps error responses to
typed exceptions and decodes responses into typed entities.
"""

from tootwire._version import __version__
from tootwire.connection import Connection
from tootwire.entities.page_navigation import PageNavigation
from tootwire.exceptions import (
    DecodeError,
    FileError,
    HttpClientStatusError,
    HttpError,
    HttpRequestError,
    HttpServerStatusError,
    HttpUnexpectedStatusError,
    RequestValidationError,
    StreamingError,
    TootwireError,
)
from tootwire.scope import Scope

__all__ = [
    "__version__",
    "Connection",
    "DecodeError",
    "FileError",
    "HttpClientStatusError",
    "HttpError",
    "HttpRequestError",
    "HttpServerStatusError",
    "HttpUnexpectedStatusError",
    "PageNavigation",
    "RequestValidationError",
    "Scope",
    "StreamingError",
    "TootwireError",
]
