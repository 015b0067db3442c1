"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Media attachments: uploading files and updating their metadata.
"""

from typing import Any, Dict, Optional, Tuple

from tootwire.connection import Connection
from tootwire.entities.attachment import Attachment
from tootwire.methods.base import PUT, Method
from tootwire.methods.upload import FileForm, UploadMethod
from tootwire.validation import check_focus

FILE_FORM_NAME = "file"


def _format_focus(focus: Tuple[float, float]) -> str:
    return f"{focus[0]},{focus[1]}"


class _FocusMixin:
    """Description and focal point setters shared by upload and update."""

    params: Dict[str, Any]
    _focus: Optional[Tuple[float, float]]

    def description(self, description: str):
        self.params["description"] = description
        return self

    def focus(self, x: float, y: float):
        """Set the focal point; each coordinate must be within [-1.0, 1.0]."""
        self._focus = (x, y)
        return self

    def _check_focus(self) -> None:
        if self._focus is not None:
            check_focus(*self._focus)

    def _with_focus(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if self._focus is not None:
            payload["focus"] = _format_focus(self._focus)
        return payload


class PostMedia(_FocusMixin, UploadMethod):
    """
    POST ``/api/v1/media``: upload a file to attach to a status.

    The file is sent as the ``file`` part of a multipart body along with the
    description and focal point text parts.
    """
    ENDPOINT = "/api/v1/media"
    ENTITY = Attachment

    def __init__(self, connection: Connection, file_name: str):
        super().__init__(connection)
        self.file_name = file_name
        self._focus = None

    def file_form(self) -> FileForm:
        return FileForm(form_name=FILE_FORM_NAME, file_name=self.file_name)

    def validate(self) -> None:
        self._check_focus()

    def payload(self) -> Dict[str, Any]:
        return self._with_focus(super().payload())


class PostMediaV2(PostMedia):
    """
    POST ``/api/v2/media``: asynchronous upload.

    Large files may still be processing when the response arrives, in which
    case the returned attachment has no ``url`` yet.
    """
    ENDPOINT = "/api/v2/media"


class PutMedia(_FocusMixin, Method):
    """PUT ``/api/v1/media/:id``: update description or focal point."""
    ENDPOINT = "/api/v1/media/:id"
    HTTP_METHOD = PUT
    ENTITY = Attachment

    def __init__(self, connection: Connection, media_id: str):
        super().__init__(connection, media_id)
        self._focus = None

    def validate(self) -> None:
        self._check_focus()

    def payload(self) -> Dict[str, Any]:
        return self._with_focus(super().payload())


def post(connection: Connection, file_name: str) -> PostMedia:
    return PostMedia(connection, file_name)


def post_v2(connection: Connection, file_name: str) -> PostMediaV2:
    return PostMediaV2(connection, file_name)


def put(connection: Connection, media_id: str) -> PutMedia:
    return PutMedia(connection, media_id)
