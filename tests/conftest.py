"""
Pytest configuration and shared fixtures for Tootwire tests.
"""

import tempfile
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
import responses

from tootwire.connection import Connection


SERVER_URL = "https://mastodon.example"
ACCESS_TOKEN = "test-access-token"


def account_json(account_id: str = "1", username: str = "alice") -> Dict[str, Any]:
    """Minimal account document as returned by the server."""
    return {
        "id": account_id,
        "username": username,
        "acct": username,
        "url": f"{SERVER_URL}/@{username}",
        "display_name": username.title(),
        "created_at": "2022-11-01T00:00:00.000Z",
    }


def status_json(status_id: str = "109", content: str = "<p>Hello</p>") -> Dict[str, Any]:
    """Minimal status document as returned by the server."""
    return {
        "id": status_id,
        "uri": f"{SERVER_URL}/users/alice/statuses/{status_id}",
        "created_at": "2022-11-02T10:20:30.000Z",
        "account": account_json(),
        "content": content,
        "visibility": "public",
        "sensitive": False,
        "spoiler_text": "",
        "media_attachments": [],
        "mentions": [],
        "tags": [],
        "emojis": [],
    }


def notification_json(notification_id: str = "500", kind: str = "mention") -> Dict[str, Any]:
    """Minimal notification document as returned by the server."""
    return {
        "id": notification_id,
        "type": kind,
        "created_at": "2022-11-02T10:20:30.000Z",
        "account": account_json("2", "bob"),
        "status": status_json(),
    }


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def connection() -> Generator[Connection, None, None]:
    """Connection to a fake server with default limits."""
    conn = Connection(SERVER_URL, ACCESS_TOKEN)
    yield conn
    conn.close()


@pytest.fixture
def whitelist_connection() -> Generator[Connection, None, None]:
    """Connection in whitelist mode, where public endpoints are authorized too."""
    conn = Connection(SERVER_URL, ACCESS_TOKEN, whitelist_mode=True)
    yield conn
    conn.close()


@pytest.fixture
def mocked_responses() -> Generator[responses.RequestsMock, None, None]:
    """Intercept every request made through requests."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps
