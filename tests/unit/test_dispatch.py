"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Unit tests for request dispatch.

Tests request building, authorization, status classification, decoding and
pagination through the shared Method base class.
"""

import json
from typing import List
from urllib.parse import parse_qsl, urlparse

import pytest
import requests
import responses

from conftest import SERVER_URL, ACCESS_TOKEN, account_json, status_json
from tootwire.api.v1 import accounts, instance, notifications, statuses, timelines
from tootwire.entities import Account, Nothing, PageNavigation, Status
from tootwire.exceptions import (
    DecodeError,
    HttpClientStatusError,
    HttpRequestError,
    HttpServerStatusError,
    HttpUnexpectedStatusError,
    ReceivedMessage,
)
from tootwire.methods.base import GET, Method, build_request, decode_entity, to_query_params


def _query(request) -> List:
    return parse_qsl(urlparse(request.url).query)


class TestMethodBasics:
    """Test path, authorization and payload of Method."""

    def test_path_without_param(self, connection):
        """Test the endpoint template is used as-is without a parameter."""
        assert instance.get(connection).path() == "/api/v1/instance"

    def test_path_param_is_substituted(self, connection):
        """Test the :id placeholder is replaced."""
        assert statuses.get(connection, "109").path() == "/api/v1/statuses/109"

    def test_path_param_is_quoted(self, connection):
        """Test path parameters are URL quoted."""
        assert timelines.tag(connection, "#café au lait").path() == "/api/v1/timelines/tag/caf%C3%A9%20au%20lait"

    def test_authorization(self, connection):
        """Test authorized endpoints return the token and public ones do not."""
        assert accounts.verify_credentials(connection).authorization() == ACCESS_TOKEN
        assert instance.get(connection).authorization() is None

    def test_whitelist_mode_authorizes_public_endpoints(self, whitelist_connection):
        """Test public endpoints send the token in whitelist mode."""
        assert instance.get(whitelist_connection).authorization() == ACCESS_TOKEN

    def test_payload_drops_unset_values(self, connection):
        """Test None values are not part of the payload."""
        method = accounts.search(connection, "alice")
        assert method.payload() == {"q": "alice"}

    def test_to_query_params(self):
        """Test lists become key[] pairs and booleans true/false."""
        pairs = to_query_params({"id": ["1", "2"], "resolve": True, "following": False, "limit": 5, "x": None})
        assert pairs == [("id[]", "1"), ("id[]", "2"), ("resolve", "true"), ("following", "false"), ("limit", "5")]


class TestBuildRequest:
    """Test build_request."""

    def test_get_uses_query_string(self, connection):
        """Test GET parameters are sent in the query string."""
        prepared = build_request(accounts.search(connection, "alice").limit(5).resolve())
        assert prepared.method == "GET"
        assert prepared.body is None
        assert dict(parse_qsl(urlparse(prepared.url).query)) == {"q": "alice", "limit": "5", "resolve": "true"}

    def test_post_uses_json_body(self, connection):
        """Test POST parameters are sent as JSON."""
        prepared = build_request(statuses.post(connection, "Hello").sensitive().spoiler_text("cw"))
        assert prepared.method == "POST"
        assert prepared.headers["Content-Type"] == "application/json"
        assert json.loads(prepared.body) == {"status": "Hello", "sensitive": True, "spoiler_text": "cw"}

    def test_bearer_header_when_authorized(self, connection):
        """Test the Authorization header is attached for authorized endpoints."""
        prepared = build_request(accounts.verify_credentials(connection))
        assert prepared.headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"

    def test_no_bearer_header_when_anonymous(self, connection):
        """Test the Authorization header is absent for public endpoints."""
        prepared = build_request(instance.get(connection))
        assert "Authorization" not in prepared.headers

    def test_user_agent_header(self, connection):
        """Test the session user agent is merged into requests."""
        prepared = build_request(instance.get(connection))
        assert prepared.headers["User-Agent"] == connection.user_agent

    def test_send_does_not_mutate_builder(self, connection, mocked_responses):
        """Test sending leaves the builder parameters untouched."""
        mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v1/statuses", json=status_json())
        method = statuses.post(connection, "Hello").media_ids([" 1 ", "", "2"])
        before = dict(method.params)

        method.send()

        assert method.params == before


class TestSendRequest:
    """Test the round trip through the session."""

    def test_get_decodes_entity(self, connection, mocked_responses):
        """Test a 200 response decodes into the entity type."""
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/statuses/109", json=status_json())

        status = statuses.get(connection, "109").send()

        assert isinstance(status, Status)
        assert status.id == "109"
        assert status.account.username == "alice"
        assert len(mocked_responses.calls) == 1

    def test_get_list_entity(self, connection, mocked_responses):
        """Test list responses decode into lists of entities."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/accounts/search",
            json=[account_json("1", "alice"), account_json("2", "bob")],
        )

        found = accounts.search(connection, "a").send()

        assert [account.username for account in found] == ["alice", "bob"]
        assert all(isinstance(account, Account) for account in found)
        assert _query(mocked_responses.calls[0].request) == [("q", "a")]

    def test_unknown_fields_are_kept(self, connection, mocked_responses):
        """Test fields unknown to the model survive decoding."""
        body = status_json()
        body["quote_id"] = "77"
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/statuses/109", json=body)

        status = statuses.get(connection, "109").send()

        assert status.model_extra["quote_id"] == "77"

    def test_post_sends_json(self, connection, mocked_responses):
        """Test POST sends the payload as a JSON body with a bearer token."""
        mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v1/statuses", json=status_json())

        statuses.post(connection, "Hello").unlisted().send()

        request = mocked_responses.calls[0].request
        assert json.loads(request.body) == {"status": "Hello", "visibility": "unlisted"}
        assert request.headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"

    def test_empty_object_decodes_to_nothing(self, connection, mocked_responses):
        """Test an empty {} body decodes to Nothing."""
        mocked_responses.add(responses.POST, f"{SERVER_URL}/api/v1/notifications/clear", json={})

        assert isinstance(notifications.clear(connection).send(), Nothing)

    def test_client_error_with_json_body(self, connection, mocked_responses):
        """Test a 4xx JSON error body becomes HttpClientStatusError."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/statuses/0",
            json={"error": "Record not found"},
            status=404,
        )

        with pytest.raises(HttpClientStatusError) as exc_info:
            statuses.get(connection, "0").send()

        assert exc_info.value.status_code == 404
        assert exc_info.value.received == ReceivedMessage("Record not found", None)

    def test_client_error_with_description(self, connection, mocked_responses):
        """Test error_description is captured."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/accounts/verify_credentials",
            json={"error": "invalid_token", "error_description": "The access token is invalid"},
            status=401,
        )

        with pytest.raises(HttpClientStatusError) as exc_info:
            accounts.verify_credentials(connection).send()

        assert exc_info.value.received.error_description == "The access token is invalid"

    def test_client_error_without_json_body(self, connection, mocked_responses):
        """Test a 4xx HTML body becomes HttpUnexpectedStatusError."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/statuses/0",
            body="<html>Not Found</html>",
            status=404,
            content_type="text/html",
        )

        with pytest.raises(HttpUnexpectedStatusError) as exc_info:
            statuses.get(connection, "0").send()

        assert exc_info.value.status_code == 404

    def test_client_error_with_unparsable_json(self, connection, mocked_responses):
        """Test a 4xx with a broken JSON body is an unexpected status."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/statuses/0",
            body="{not json",
            status=422,
            content_type="application/json",
        )

        with pytest.raises(HttpUnexpectedStatusError):
            statuses.get(connection, "0").send()

    def test_server_error(self, connection, mocked_responses):
        """Test a 5xx response becomes HttpServerStatusError."""
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/instance", body="oops", status=503)

        with pytest.raises(HttpServerStatusError) as exc_info:
            instance.get(connection).send()

        assert exc_info.value.status_code == 503

    def test_network_error(self, connection, mocked_responses):
        """Test connection failures become HttpRequestError."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/instance",
            body=requests.exceptions.ConnectionError("refused"),
        )

        with pytest.raises(HttpRequestError):
            instance.get(connection).send()

    def test_no_retry(self, connection, mocked_responses):
        """Test a failing request is sent exactly once."""
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/instance", status=502)

        with pytest.raises(HttpServerStatusError):
            instance.get(connection).send()

        assert len(mocked_responses.calls) == 1

    def test_schema_mismatch(self, connection, mocked_responses):
        """Test a body missing required fields raises DecodeError."""
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/statuses/109", json={"id": "109"})

        with pytest.raises(DecodeError):
            statuses.get(connection, "109").send()

    def test_invalid_json(self, connection, mocked_responses):
        """Test a non-JSON 200 body raises DecodeError."""
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/statuses/109",
            body="<html></html>",
            content_type="text/html",
        )

        with pytest.raises(DecodeError):
            statuses.get(connection, "109").send()


class TestPagedRequests:
    """Test endpoints returning PageNavigation with the entity."""

    def test_link_header_is_parsed(self, connection, mocked_responses):
        """Test the Link header is returned as a PageNavigation."""
        link = (
            f'<{SERVER_URL}/api/v1/timelines/home?max_id=100>; rel="next", '
            f'<{SERVER_URL}/api/v1/timelines/home?min_id=109>; rel="prev"'
        )
        mocked_responses.add(
            responses.GET,
            f"{SERVER_URL}/api/v1/timelines/home",
            json=[status_json("109"), status_json("100")],
            headers={"Link": link},
        )

        nav, page = timelines.home(connection).limit(2).send()

        assert isinstance(nav, PageNavigation)
        assert nav.max_id == "100"
        assert nav.since_id == "109"
        assert [status.id for status in page] == ["109", "100"]
        assert _query(mocked_responses.calls[0].request) == [("limit", "2")]

    def test_missing_link_header(self, connection, mocked_responses):
        """Test a page without Link header has empty cursors."""
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/timelines/home", json=[])

        nav, page = timelines.home(connection).send()

        assert page == []
        assert nav.raw is None
        assert nav.max_id is None

    def test_cursor_parameters(self, connection, mocked_responses):
        """Test cursor setters are sent as query parameters."""
        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/accounts/1/statuses", json=[])

        accounts.statuses(connection, "1").max_id("50").since_id("10").exclude_replies().send()

        assert _query(mocked_responses.calls[0].request) == [
            ("max_id", "50"),
            ("since_id", "10"),
            ("exclude_replies", "true"),
        ]


class TestDecodeEntity:
    """Test decode_entity directly."""

    def test_decode_list_of_strings(self):
        """Test typing constructs are accepted as entity types."""
        assert decode_entity('["a.example", "b.example"]', List[str]) == ["a.example", "b.example"]

    def test_decode_error_is_chained(self):
        """Test the pydantic error is kept as the cause."""
        with pytest.raises(DecodeError) as exc_info:
            decode_entity("[]", Status)
        assert exc_info.value.__cause__ is not None


class TestCustomMethod:
    """Test a Method subclass declared outside the package."""

    def test_subclass_dispatch(self, connection, mocked_responses):
        """Test ENDPOINT, ENTITY and AUTHORIZED are honoured."""

        class GetTrends(Method):
            ENDPOINT = "/api/v1/trends/tags"
            HTTP_METHOD = GET
            ENTITY = List[str]
            AUTHORIZED = False

        mocked_responses.add(responses.GET, f"{SERVER_URL}/api/v1/trends/tags", json=["python"])

        assert GetTrends(connection).send() == ["python"]
        assert "Authorization" not in mocked_responses.calls[0].request.headers
