"""
Request builders and the dispatch they share.
"""

from tootwire.methods.base import (
    DELETE,
    GET,
    POST,
    PUT,
    Method,
    PagedMethod,
    build_request,
    check_response,
    decode_entity,
    execute,
    send_request,
)
from tootwire.methods.upload import FileForm, UploadMethod

__all__ = [
    "DELETE",
    "GET",
    "POST",
    "PUT",
    "FileForm",
    "Method",
    "PagedMethod",
    "UploadMethod",
    "build_request",
    "check_response",
    "decode_entity",
    "execute",
    "send_request",
]
