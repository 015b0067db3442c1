"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Request dispatch shared by every API endpoint.

An endpoint is a Method subclass declaring its path template, HTTP verb and
the entity type its response decodes into. Builder setters fill the request
parameters; send() validates them, performs exactly one round trip through
the connection's session, maps non-2xx responses to typed errors and decodes
the body.
"""

import time
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests
from pydantic import TypeAdapter, ValidationError

from tootwire.connection import Connection
from tootwire.entities.base import Nothing
from tootwire.entities.page_navigation import PageNavigation
from tootwire.exceptions import (
    DecodeError,
    HttpClientStatusError,
    HttpRequestError,
    HttpServerStatusError,
    HttpStatusError,
    HttpUnexpectedStatusError,
    ReceivedMessage,
)
from tootwire.logging_config import get_logger, log_http_request, log_http_response

logger = get_logger(__name__)

GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"

PATH_PARAM = ":id"
LINK_HEADER = "Link"
JSON_CONTENT_TYPE = "application/json"


class Method:
    """
    Base class of every API request builder.

    Subclasses set the class attributes below and add setter methods that
    store values in ``params`` and return ``self`` so calls can be chained.

    Attributes:
        ENDPOINT: Path template, may contain one ``:id`` placeholder
        HTTP_METHOD: HTTP verb
        ENTITY: Type the response body decodes into
        RESPONSE_HEADER: Header parsed into a PageNavigation, if any
        AUTHORIZED: Whether the bearer token is attached by default; public
            endpoints are authorized anyway in whitelist mode
    """

    ENDPOINT: str = ""
    HTTP_METHOD: str = GET
    ENTITY: Any = Nothing
    RESPONSE_HEADER: Optional[str] = None
    AUTHORIZED: bool = True

    def __init__(
        self,
        connection: Connection,
        path_param: Optional[str] = None,
        authorized: Optional[bool] = None,
    ):
        self.connection = connection
        self.path_param = path_param
        if authorized is None:
            authorized = self.AUTHORIZED or connection.whitelist_mode
        self.authorized = authorized
        self.params: Dict[str, Any] = {}

    @property
    def http_method(self) -> str:
        return self.HTTP_METHOD

    def path(self) -> str:
        """Endpoint path with the ``:id`` placeholder replaced, if a parameter is set."""
        if self.path_param is None:
            return self.ENDPOINT
        return self.ENDPOINT.replace(PATH_PARAM, quote(str(self.path_param), safe=""), 1)

    def authorization(self) -> Optional[str]:
        """Bearer token to attach, or None to send the request anonymously."""
        if self.authorized:
            return self.connection.access_token
        return None

    def payload(self) -> Dict[str, Any]:
        """Request parameters with unset values dropped."""
        return {
            key: _serialize(value)
            for key, value in self.params.items()
            if value is not None
        }

    def validate(self) -> None:
        """Check the request before anything is sent. No-op by default."""

    def prepare(self) -> requests.Request:
        """
        Build the unprepared HTTP request.

        GET parameters go to the query string, every other verb sends them as
        a JSON body.
        """
        url = self.connection.endpoint_url(self.path())
        payload = self.payload()
        if self.http_method == GET:
            return requests.Request(GET, url, params=to_query_params(payload))
        return requests.Request(self.http_method, url, json=payload)

    def decode(self, response: requests.Response) -> Any:
        """
        Decode a successful response.

        Returns:
            The ENTITY instance, or ``(PageNavigation, entity)`` when the
            endpoint declares a RESPONSE_HEADER
        """
        entity = decode_entity(response.text, self.ENTITY)
        if self.RESPONSE_HEADER is None:
            return entity
        return PageNavigation.parse(response.headers.get(self.RESPONSE_HEADER)), entity

    def send(self) -> Any:
        """
        Validate, send and decode the request.

        Raises:
            RequestValidationError: If validation fails (nothing is sent)
            HttpError: If the request fails or the server rejects it
            DecodeError: If the body does not match ENTITY
        """
        self.validate()
        return send_request(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.http_method} {self.path()})"


class PagedMethod(Method):
    """Method returning a page of a collection along with its cursors."""

    RESPONSE_HEADER = LINK_HEADER

    def max_id(self, max_id: str) -> "PagedMethod":
        self.params["max_id"] = max_id
        return self

    def since_id(self, since_id: str) -> "PagedMethod":
        self.params["since_id"] = since_id
        return self

    def min_id(self, min_id: str) -> "PagedMethod":
        self.params["min_id"] = min_id
        return self

    def limit(self, limit: int) -> "PagedMethod":
        self.params["limit"] = limit
        return self


def _serialize(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items() if item is not None}
    return value


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_query_params(payload: Dict[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten a payload into query string pairs.

    Lists become repeated ``key[]`` pairs and booleans ``true``/``false``.
    Nested mappings are not supported in query strings and are rejected.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, list):
            pairs.extend((f"{key}[]", _query_value(item)) for item in value)
        elif isinstance(value, dict):
            raise TypeError(f"Query parameter '{key}' cannot be a mapping")
        else:
            pairs.append((key, _query_value(value)))
    return pairs


def build_request(method: Method) -> requests.PreparedRequest:
    """
    Turn a request builder into a prepared HTTP request.

    The ``Authorization: Bearer`` header is attached only when the builder
    returns a token.
    """
    request = method.prepare()
    token = method.authorization()
    if token:
        request.headers["Authorization"] = f"Bearer {token}"
    return method.connection.session.prepare_request(request)


def check_response(response: requests.Response) -> None:
    """
    Map a non-2xx response to a typed error.

    Raises:
        HttpClientStatusError: 4xx with a JSON error body
        HttpServerStatusError: 5xx
        HttpUnexpectedStatusError: Any other non-2xx response
    """
    status_code = response.status_code
    url = response.url

    if 200 <= status_code < 300:
        return

    if 400 <= status_code < 500:
        content_type = response.headers.get("Content-Type", "")
        if content_type.split(";")[0].strip().lower() == JSON_CONTENT_TYPE:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                received = ReceivedMessage(
                    error=body.get("error"),
                    error_description=body.get("error_description"),
                )
                raise HttpClientStatusError(url, status_code, received)
        raise HttpUnexpectedStatusError(url, status_code)

    if 500 <= status_code < 600:
        raise HttpServerStatusError(url, status_code)

    raise HttpUnexpectedStatusError(url, status_code)


@lru_cache(maxsize=None)
def _type_adapter(entity_type: Any) -> TypeAdapter:
    return TypeAdapter(entity_type)


def decode_entity(text: str, entity_type: Any) -> Any:
    """
    Decode a JSON document into ``entity_type``.

    Args:
        text: Response body
        entity_type: Entity class or typing construct such as ``List[Status]``

    Raises:
        DecodeError: If the body is not JSON or does not match the type
    """
    try:
        return _type_adapter(entity_type).validate_json(text)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode response as {entity_type}: {e}") from e


def _logged_body(prepared: requests.PreparedRequest) -> Optional[str]:
    if prepared.method == GET or prepared.body is None:
        return None
    if prepared.headers.get("Content-Type", "").startswith(JSON_CONTENT_TYPE):
        body = prepared.body
        return body.decode("utf-8") if isinstance(body, bytes) else body
    return None


def execute(
    connection: Connection,
    prepared: requests.PreparedRequest,
    stream: bool = False,
) -> requests.Response:
    """
    Send a prepared request once and check its status.

    Args:
        connection: Connection whose session sends the request
        prepared: Request built by build_request()
        stream: If True, leave the body unread for incremental consumption

    Raises:
        HttpRequestError: If the request could not be completed
        HttpStatusError: If the response is not 2xx
    """
    log_http_request(
        logger,
        prepared.method,
        prepared.url,
        body=_logged_body(prepared),
        authorized="Authorization" in prepared.headers,
    )

    start_time = time.monotonic()
    try:
        response = connection.session.send(prepared, timeout=connection.timeout, stream=stream)
    except requests.exceptions.RequestException as e:
        logger.warning(f"Request failed: {prepared.method} {prepared.url}: {e}")
        raise HttpRequestError(f"Request failed: {prepared.method} {prepared.url}: {e}") from e

    duration_ms = (time.monotonic() - start_time) * 1000
    log_http_response(logger, prepared.method, prepared.url, response.status_code, duration_ms)

    try:
        check_response(response)
    except HttpStatusError:
        response.close()
        raise
    return response


def send_request(method: Method) -> Any:
    """
    Dispatch a request builder: build, execute, check and decode.

    Validation is not run here; see Method.send().
    """
    prepared = build_request(method)
    response = execute(method.connection, prepared)
    return method.decode(response)

