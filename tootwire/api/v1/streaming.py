"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Streaming timelines over server-sent events or WebSocket.

User scoped streams (user, user notifications, list, direct) always send
the access token; public streams send it only in whitelist mode.
"""

from typing import List, Optional
from urllib.parse import urlencode

import requests

from tootwire.connection import Connection
from tootwire.methods.base import GET, Method, build_request, execute
from tootwire.streaming.channel import SseChannel, WebSocketChannel
from tootwire.streaming.stream_type import SSE_BASE_PATH, StreamType
from tootwire.streaming.timeline import StreamingTimeline


def _stream_authorized(connection: Connection, stream_type: StreamType) -> bool:
    return stream_type.requires_auth or connection.whitelist_mode


class GetStreaming(Method):
    """GET ``/api/v1/streaming/<stream>`` as a server-sent event stream."""
    HTTP_METHOD = GET

    def __init__(self, connection: Connection, stream_type: StreamType):
        super().__init__(connection, authorized=_stream_authorized(connection, stream_type))
        self.stream_type = stream_type
        self.params.update(stream_type.params)

    def path(self) -> str:
        return self.stream_type.sse_path

    def prepare(self) -> requests.Request:
        request = super().prepare()
        request.headers["Accept"] = "text/event-stream"
        return request

    def send(self) -> StreamingTimeline:
        """
        Open the event stream.

        Raises:
            HttpError: If the server refuses the stream
        """
        response = execute(self.connection, build_request(self), stream=True)
        return StreamingTimeline(SseChannel(response))


class WebSocketStreaming:
    """
    Streaming over ``<streaming_api>/api/v1/streaming?stream=<name>``.

    The WebSocket host is taken from the instance's ``urls.streaming_api``
    when given, otherwise from the server URL.
    """

    def __init__(
        self,
        connection: Connection,
        stream_type: StreamType,
        streaming_api: Optional[str] = None,
    ):
        self.connection = connection
        self.stream_type = stream_type
        self.streaming_api = streaming_api

    def url(self) -> str:
        base = self.connection.websocket_url(self.streaming_api)
        return f"{base}{SSE_BASE_PATH}?{urlencode(self.stream_type.websocket_params())}"

    def headers(self) -> List[str]:
        headers = [f"User-Agent: {self.connection.user_agent}"]
        if _stream_authorized(self.connection, self.stream_type):
            headers.append(f"Authorization: Bearer {self.connection.access_token}")
        return headers

    def send(self) -> StreamingTimeline:
        """
        Open the WebSocket.

        Raises:
            StreamChannelError: If the connection cannot be established
        """
        channel = WebSocketChannel.connect(self.url(), self.headers(), self.connection.timeout)
        return StreamingTimeline(channel)


class GetHealth(Method):
    """GET ``/api/v1/streaming/health``: plain text ``OK`` when streaming is up."""
    ENDPOINT = "/api/v1/streaming/health"
    HTTP_METHOD = GET
    ENTITY = str
    AUTHORIZED = False

    def decode(self, response: requests.Response) -> str:
        return response.text


def get(connection: Connection, stream_type: StreamType) -> GetStreaming:
    return GetStreaming(connection, stream_type)


def websocket(
    connection: Connection,
    stream_type: StreamType,
    streaming_api: Optional[str] = None,
) -> WebSocketStreaming:
    return WebSocketStreaming(connection, stream_type, streaming_api)


def health(connection: Connection) -> GetHealth:
    return GetHealth(connection)
