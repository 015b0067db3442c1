"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Unit tests for posting and acting on statuses.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
import responses

from conftest import SERVER_URL, status_json
from tootwire.api.v1 import statuses
from tootwire.connection import Connection
from tootwire.entities import ScheduledStatus, Status, Visibility
from tootwire.exceptions import (
    DuplicateMediaError,
    DuplicatePollOptionError,
    InvalidLanguageError,
    InvalidStatusError,
    NoAttachmentMediaError,
    PastDateTimeError,
    ScheduleTooCloseError,
    TooLittlePollOptionsError,
    TooManyAttachmentMediasError,
    TooManyCharactersError,
    TooManyPollOptionsError,
)


SCHEDULED = {
    "id": "3221",
    "scheduled_at": "2030-01-01T00:00:00.000Z",
    "params": {"text": "later", "visibility": "public", "with_rate_limit": False},
    "media_attachments": [],
}


@pytest.fixture
def post_ok(mocked_responses):
    mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v1/statuses", json=status_json())
    return mocked_responses


def _sent_body(mocked_responses):
    return json.loads(mocked_responses.calls[0].request.body)


class TestStatusContent:
    """Test text and media requirements."""

    def test_requires_text_or_media(self, connection, mocked_responses):
        """Test a status with neither text nor media raises InvalidStatusError."""
        with pytest.raises(InvalidStatusError):
            statuses.post(connection).send()
        assert len(mocked_responses.calls) == 0

    def test_empty_text_without_media(self, connection):
        """Test empty text counts as no text."""
        with pytest.raises(InvalidStatusError):
            statuses.post(connection, "").send()

    def test_blank_text_without_media(self, connection, mocked_responses):
        """Test whitespace-only text counts as no text."""
        with pytest.raises(InvalidStatusError):
            statuses.post(connection, "   ").send()
        assert len(mocked_responses.calls) == 0

    def test_text_trimmed(self, connection, post_ok):
        """Test text and spoiler text are sent trimmed, blank spoiler text dropped."""
        statuses.post(connection, "  hello \n").spoiler_text("  ").send()
        body = _sent_body(post_ok)
        assert body["status"] == "hello"
        assert "spoiler_text" not in body

    def test_blank_text_with_media(self, connection, post_ok):
        """Test blank text is dropped when media carries the status."""
        statuses.post(connection, " \t").media_ids(["1"]).send()
        assert _sent_body(post_ok) == {"media_ids": ["1"]}

    def test_media_only(self, connection, post_ok):
        """Test a status with only media is accepted."""
        statuses.post(connection).media_ids(["1"]).send()
        assert _sent_body(post_ok) == {"media_ids": ["1"]}

    def test_exact_character_limit(self, connection, post_ok):
        """Test text plus spoiler text exactly at the limit passes."""
        statuses.post(connection, "a" * 490).spoiler_text("b" * 10).send()
        assert len(post_ok.calls) == 1

    def test_one_character_over(self, connection, mocked_responses):
        """Test one character over the limit fails."""
        with pytest.raises(TooManyCharactersError) as exc_info:
            statuses.post(connection, "a" * 491).spoiler_text("b" * 10).send()
        assert exc_info.value.count == 501
        assert exc_info.value.max_count == 500
        assert len(mocked_responses.calls) == 0

    def test_custom_character_limit(self, post_ok):
        """Test the limit comes from the connection."""
        with Connection(SERVER_URL, "token", status_max_characters=1000) as conn:
            statuses.post(conn, "a" * 1000).send()
        assert len(post_ok.calls) == 1


class TestMediaIds:
    """Test media ID checks."""

    def test_max_media(self, connection, post_ok):
        """Test exactly status_max_medias IDs pass."""
        statuses.post(connection, "x").media_ids(["1", "2", "3", "4"]).send()
        assert _sent_body(post_ok)["media_ids"] == ["1", "2", "3", "4"]

    def test_too_many_media(self, connection):
        """Test one ID over the limit fails."""
        with pytest.raises(TooManyAttachmentMediasError) as exc_info:
            statuses.post(connection, "x").media_ids(["1", "2", "3", "4", "5"]).send()
        assert exc_info.value.count == 5

    def test_duplicate_media(self, connection):
        """Test repeated IDs fail."""
        with pytest.raises(DuplicateMediaError) as exc_info:
            statuses.post(connection, "x").media_ids(["1", "2", "1"]).send()
        assert exc_info.value.media_id == "1"

    def test_duplicate_after_trim(self, connection):
        """Test IDs are compared after trimming."""
        with pytest.raises(DuplicateMediaError):
            statuses.post(connection, "x").media_ids(["1", " 1 "]).send()

    def test_blank_ids_dropped(self, connection, post_ok):
        """Test blank IDs are dropped and others trimmed."""
        statuses.post(connection, "x").media_ids([" 7 ", "", "  ", "8"]).send()
        assert _sent_body(post_ok)["media_ids"] == ["7", "8"]

    def test_empty_media_list(self, connection):
        """Test an explicitly empty media list fails."""
        with pytest.raises(NoAttachmentMediaError):
            statuses.post(connection, "x").media_ids([]).send()


class TestPoll:
    """Test poll checks."""

    def test_poll_payload(self, connection, post_ok):
        """Test the poll is sent as a nested object."""
        statuses.post(connection, "Pick one").poll(["a", "b"], 3600, multiple=True).send()
        assert _sent_body(post_ok)["poll"] == {
            "options": ["a", "b"],
            "expires_in": 3600,
            "multiple": True,
            "hide_totals": False,
        }

    def test_max_options(self, connection, post_ok):
        """Test exactly poll_max_options options pass."""
        statuses.post(connection, "?").poll(["a", "b", "c", "d"], 60).send()
        assert len(post_ok.calls) == 1

    def test_too_many_options(self, connection):
        """Test one option over the limit fails."""
        with pytest.raises(TooManyPollOptionsError):
            statuses.post(connection, "?").poll(["a", "b", "c", "d", "e"], 60).send()

    def test_too_little_options(self, connection):
        """Test a single option fails."""
        with pytest.raises(TooLittlePollOptionsError) as exc_info:
            statuses.post(connection, "?").poll(["a"], 60).send()
        assert exc_info.value.min_count == 2

    def test_duplicate_options(self, connection):
        """Test repeated options fail."""
        with pytest.raises(DuplicatePollOptionError) as exc_info:
            statuses.post(connection, "?").poll(["yes", "no", "yes"], 60).send()
        assert exc_info.value.option == "yes"

    def test_duplicate_after_trim(self, connection, mocked_responses):
        """Test options are compared after trimming."""
        with pytest.raises(DuplicatePollOptionError) as exc_info:
            statuses.post(connection, "?").poll(["yes", "yes "], 3600).send()
        assert exc_info.value.option == "yes"
        assert len(mocked_responses.calls) == 0

    def test_blank_option_not_counted(self, connection, mocked_responses):
        """Test blank options are dropped before counting."""
        with pytest.raises(TooLittlePollOptionsError) as exc_info:
            statuses.post(connection, "?").poll(["yes", "", "  "], 3600).send()
        assert exc_info.value.count == 1
        assert len(mocked_responses.calls) == 0

    def test_options_sent_trimmed(self, connection, post_ok):
        """Test the cleaned options are what the server receives."""
        statuses.post(connection, "?").poll([" a ", "", "b"], 60).send()
        assert _sent_body(post_ok)["poll"]["options"] == ["a", "b"]


class TestLanguageAndVisibility:
    """Test language and visibility settings."""

    def test_invalid_language(self, connection):
        """Test a non ISO 639-1 language fails."""
        with pytest.raises(InvalidLanguageError):
            statuses.post(connection, "x").language("jpn").send()

    def test_default_language(self, post_ok):
        """Test the connection default language is sent."""
        with Connection(SERVER_URL, "token", default_language="ja") as conn:
            statuses.post(conn, "こんにちは").send()
        assert _sent_body(post_ok)["language"] == "ja"

    @pytest.mark.parametrize("setter,expected", [
        ("public", "public"),
        ("unlisted", "unlisted"),
        ("private", "private"),
        ("direct", "direct"),
    ])
    def test_visibility_helpers(self, connection, post_ok, setter, expected):
        """Test each visibility helper sets the visibility."""
        getattr(statuses.post(connection, "x"), setter)().send()
        assert _sent_body(post_ok)["visibility"] == expected

    def test_visibility_value(self, connection, post_ok):
        """Test visibility accepts the enum."""
        statuses.post(connection, "x").visibility(Visibility.PRIVATE).send()
        assert _sent_body(post_ok)["visibility"] == "private"


class TestScheduledStatus:
    """Test scheduled posting."""

    def test_scheduled_post_returns_scheduled_status(self, connection, mocked_responses):
        """Test a scheduled post decodes to ScheduledStatus."""
        mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v1/statuses", json=SCHEDULED)
        scheduled_at = datetime.now(timezone.utc) + timedelta(hours=1)

        result = statuses.post(connection, "later").scheduled_at(scheduled_at).send()

        assert isinstance(result, ScheduledStatus)
        assert result.params.text == "later"
        assert _sent_body(mocked_responses)["scheduled_at"] == scheduled_at.isoformat()

    def test_unscheduled_post_returns_status(self, connection, post_ok):
        """Test an immediate post decodes to Status."""
        assert isinstance(statuses.post(connection, "now").send(), Status)

    def test_past_time(self, connection):
        """Test a past time raises PastDateTimeError."""
        with pytest.raises(PastDateTimeError):
            statuses.post(connection, "x").scheduled_at(datetime.now(timezone.utc) - timedelta(minutes=1)).send()

    def test_too_close(self, connection):
        """Test a time less than five minutes ahead raises ScheduleTooCloseError."""
        with pytest.raises(ScheduleTooCloseError):
            statuses.post(connection, "x").scheduled_at(datetime.now(timezone.utc) + timedelta(minutes=4)).send()


class TestIdempotency:
    """Test the Idempotency-Key header."""

    def test_header_sent(self, connection, post_ok):
        """Test the idempotency key is sent as a header."""
        statuses.post(connection, "x").idempotency_key("abc-123").send()
        assert post_ok.calls[0].request.headers["Idempotency-Key"] == "abc-123"

    def test_header_absent_by_default(self, connection, post_ok):
        """Test no idempotency header is sent unless set."""
        statuses.post(connection, "x").send()
        assert "Idempotency-Key" not in post_ok.calls[0].request.headers


class TestStatusActions:
    """Test per-status endpoints."""

    @pytest.mark.parametrize("factory,action", [
        (statuses.favourite, "favourite"),
        (statuses.unfavourite, "unfavourite"),
        (statuses.reblog, "reblog"),
        (statuses.unreblog, "unreblog"),
        (statuses.bookmark, "bookmark"),
        (statuses.unbookmark, "unbookmark"),
        (statuses.pin, "pin"),
        (statuses.unpin, "unpin"),
    ])
    def test_actions(self, connection, mocked_responses, factory, action):
        """Test each action posts to its endpoint and returns the status."""
        mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v1/statuses/109/{action}", json=status_json())

        result = factory(connection, "109").send()

        assert isinstance(result, Status)
        assert mocked_responses.calls[0].request.headers["Authorization"] == "Bearer test-access-token"

    def test_delete(self, connection, mocked_responses):
        """Test DELETE /api/v1/statuses/:id."""
        mocked_responses.add(responses.DELETE, f"{SERVER_URL}/api/v1/statuses/109", json=status_json())

        assert statuses.delete(connection, "109").send().id == "109"

    def test_context(self, connection, mocked_responses):
        """Test the context decodes ancestors and descendants."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/statuses/109/context",
            json={"ancestors": [status_json("100")], "descendants": []},
        )

        context = statuses.context(connection, "109").send()

        assert [status.id for status in context.ancestors] == ["100"]
        assert context.descendants == []

    def test_favourited_by_is_paged(self, connection, mocked_responses):
        """Test favourited_by returns cursors with the accounts."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/statuses/109/favourited_by",
            json=[],
            headers={"Link": f'<{SERVER_URL}/api/v1/statuses/109/favourited_by?max_id=5>; rel="next"'},
        )

        nav, accounts = statuses.favourited_by(connection, "109").send()

        assert nav.max_id == "5"
        assert accounts == []


class TestStatusVisibility:
    """Test decoding of status visibility."""

    def test_known_visibility(self, connection, mocked_responses):
        """Test known values decode to Visibility members."""
        body = status_json()
        body["visibility"] = "unlisted"
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/statuses/109", json=body)

        status = statuses.get(connection, "109").send()

        assert status.visibility is Visibility.UNLISTED

    def test_unknown_visibility_kept_as_text(self, connection, mocked_responses):
        """Test a server specific visibility still decodes."""
        body = status_json()
        body["visibility"] = "local"
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/statuses/109", json=body)

        status = statuses.get(connection, "109").send()

        assert status.visibility == "local"
        assert not isinstance(status.visibility, Visibility)
