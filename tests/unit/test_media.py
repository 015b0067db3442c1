"""
Unit tests for media uploads and multipart requests.
"""

import json
import os

import pytest
import responses

from conftest import SERVER_URL
from tootwire.api.v1 import media
from tootwire.entities import Attachment
from tootwire.exceptions import (
    BlankFileError,
    FileIoError,
    InvalidFocalPointError,
    NotFileError,
)
from tootwire.methods.base import build_request


ATTACHMENT = {
    "id": "22",
    "type": "image",
    "url": f"{SERVER_URL}/media/22.png",
    "preview_url": f"{SERVER_URL}/media/22_small.png",
    "description": "A cat",
    "meta": {"focus": {"x": 0.5, "y": -0.25}},
}


@pytest.fixture
def image_file(temp_dir):
    path = temp_dir / "cat.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake image data")
    return path


class TestUploadValidation:
    """Test file checks before upload."""

    def test_not_a_file(self, connection, temp_dir):
        """Test a directory is rejected with NotFileError."""
        with pytest.raises(NotFileError) as exc_info:
            media.post(connection, str(temp_dir)).send()
        assert exc_info.value.path == str(temp_dir)

    def test_missing_file(self, connection, temp_dir):
        """Test a missing path is rejected with NotFileError."""
        with pytest.raises(NotFileError):
            media.post(connection, str(temp_dir / "missing.png")).send()

    def test_empty_file(self, connection, temp_dir, mocked_responses):
        """Test an empty file is rejected and nothing is sent."""
        path = temp_dir / "empty.png"
        path.write_bytes(b"")

        with pytest.raises(BlankFileError):
            media.post(connection, str(path)).send()

        assert len(mocked_responses.calls) == 0

    @pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs unreadable files")
    def test_unreadable_file(self, connection, image_file):
        """Test read failures become FileIoError."""
        image_file.chmod(0)
        try:
            with pytest.raises(FileIoError):
                media.post(connection, str(image_file)).send()
        finally:
            image_file.chmod(0o644)

    @pytest.mark.parametrize("x,y", [(1.01, 0.0), (0.0, -1.5), (2.0, 2.0)])
    def test_focus_out_of_range(self, connection, image_file, x, y):
        """Test focal points outside [-1, 1] are rejected."""
        with pytest.raises(InvalidFocalPointError):
            media.post(connection, str(image_file)).focus(x, y).send()

    @pytest.mark.parametrize("x,y", [(1.0, -1.0), (0.0, 0.0), (-1.0, 1.0)])
    def test_focus_on_bounds(self, connection, image_file, mocked_responses, x, y):
        """Test focal points on the bounds are accepted."""
        mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v1/media", json=ATTACHMENT)

        media.post(connection, str(image_file)).focus(x, y).send()

        assert len(mocked_responses.calls) == 1


class TestUploadRequest:
    """Test the multipart body."""

    def test_multipart_body(self, connection, image_file):
        """Test text parts precede the file part, which carries the base name."""
        prepared = build_request(media.post(connection, str(image_file)).description("A cat").focus(0.5, -0.25))

        assert prepared.method == "POST"
        assert prepared.headers["Content-Type"].startswith("multipart/form-data")
        assert prepared.headers["Authorization"].startswith("Bearer ")

        body = prepared.body
        description_at = body.index(b'name="description"')
        focus_at = body.index(b'name="focus"')
        file_at = body.index(b'name="file"; filename="cat.png"')
        assert description_at < file_at
        assert focus_at < file_at
        assert b"0.5,-0.25" in body
        assert b"fake image data" in body
        assert str(image_file.parent).encode() not in body

    def test_upload_decodes_attachment(self, connection, image_file, mocked_responses):
        """Test the response decodes to an Attachment."""
        mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v1/media", json=ATTACHMENT)

        attachment = media.post(connection, str(image_file)).description("A cat").send()

        assert isinstance(attachment, Attachment)
        assert attachment.meta.focus.x == 0.5

    def test_v2_upload_endpoint(self, connection, image_file, mocked_responses):
        """Test the v2 upload posts to /api/v2/media."""
        processing = dict(ATTACHMENT, url=None)
        mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v2/media", json=processing, status=202)

        attachment = media.post_v2(connection, str(image_file)).send()

        assert attachment.url is None


class TestUpdateMedia:
    """Test PUT /api/v1/media/:id."""

    def test_update_sends_json(self, connection, mocked_responses):
        """Test description and focus are sent as JSON."""
        mocked_responses.add(responses.PUT, f"{SERVER_URL}/api/v1/media/22", json=ATTACHMENT)

        media.put(connection, "22").description("A cat").focus(0.5, -0.25).send()

        body = json.loads(mocked_responses.calls[0].request.body)
        assert body == {"description": "A cat", "focus": "0.5,-0.25"}

    def test_update_focus_out_of_range(self, connection, mocked_responses):
        """Test invalid focus is rejected before sending."""
        with pytest.raises(InvalidFocalPointError):
            media.put(connection, "22").focus(-1.1, 0).send()
        assert len(mocked_responses.calls) == 0
