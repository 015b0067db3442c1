"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Multipart file uploads.
"""

import os
from dataclasses import dataclass
from typing import List, Tuple

import requests

from tootwire.exceptions import BlankFileError, FileIoError, NotFileError
from tootwire.methods.base import POST, Method


@dataclass
class FileForm:
    """The file part of a multipart request."""
    form_name: str
    file_name: str


class UploadMethod(Method):
    """
    Method sending a local file as ``multipart/form-data``.

    Subclasses implement ``file_form()`` and may override ``text_forms()``.
    The file is read fully into memory when the request is prepared; text
    parts are sent before the file part. Uploads are always POST.
    """

    HTTP_METHOD = POST

    def file_form(self) -> FileForm:
        raise NotImplementedError

    def text_forms(self) -> List[Tuple[str, str]]:
        """Text parts as ``(name, value)`` pairs, built from ``payload()``."""
        forms = []
        for name, value in self.payload().items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            forms.append((name, str(value)))
        return forms

    def read_file(self) -> bytes:
        """
        Read the whole file to upload.

        Raises:
            NotFileError: If the path is not a regular file
            BlankFileError: If the file is empty
            FileIoError: If reading the file fails
        """
        path = self.file_form().file_name
        if not os.path.isfile(path):
            raise NotFileError(path)
        try:
            if os.path.getsize(path) == 0:
                raise BlankFileError(path)
            with open(path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise FileIoError(f"Failed to read '{path}': {e}") from e

    def prepare(self) -> requests.Request:
        form = self.file_form()
        content = self.read_file()

        files = [(name, (None, value)) for name, value in self.text_forms()]
        files.append((form.form_name, (os.path.basename(form.file_name), content)))

        url = self.connection.endpoint_url(self.path())
        return requests.Request(POST, url, files=files)
