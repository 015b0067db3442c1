"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Transports delivering raw streaming messages.

A channel yields TextMessage (an event name with its payload) and
PingMessage items, and can answer a ping with a pong. Classification of the
messages is left to the streaming timeline.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

import requests
import websocket

from tootwire.exceptions import DecodeError, StreamChannelError
from tootwire.logging_config import get_logger
from tootwire.streaming.events import parse_envelope

logger = get_logger(__name__)

DEFAULT_SSE_EVENT = "message"


@dataclass
class TextMessage:
    event: str
    payload: Optional[str] = None


@dataclass
class PingMessage:
    data: bytes = b""


Message = Union[TextMessage, PingMessage]


class Channel:
    """Base class of streaming transports."""

    def receive(self) -> Optional[Message]:
        """
        Block until the next message arrives.

        Returns:
            The message, or None once the channel is closed by the server

        Raises:
            StreamChannelError: If reading from the transport fails
        """
        raise NotImplementedError

    def pong(self, data: bytes) -> None:
        """
        Answer a ping with the same payload.

        Raises:
            StreamChannelError: If writing to the transport fails
        """
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError


class SseChannel(Channel):
    """
    Server-sent events read from a streaming HTTP response.

    ``event:`` and ``data:`` lines accumulate until a blank line dispatches
    the message. Lines starting with ``:`` are heartbeats and are skipped.
    SSE has no ping frames, so ``pong()`` does nothing.
    """

    def __init__(self, response: requests.Response):
        self._response = response
        self._lines: Iterator[bytes] = response.iter_lines()

    def _read_line(self) -> Optional[str]:
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        except requests.exceptions.RequestException as e:
            raise StreamChannelError(f"Failed to read event stream: {e}") from e
        if isinstance(line, bytes):
            try:
                return line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"Event stream line is not UTF-8: {e}") from e
        return line

    def receive(self) -> Optional[Message]:
        event: Optional[str] = None
        data: List[str] = []

        while True:
            line = self._read_line()
            if line is None:
                break

            if not line:
                if event is not None or data:
                    break
                continue

            if line.startswith(":"):
                continue

            name, _, value = line.partition(":")
            if value.startswith(" "):
                value = value[1:]
            if name == "event":
                event = value
            elif name == "data":
                data.append(value)

        if event is None and not data:
            return None
        return TextMessage(event or DEFAULT_SSE_EVENT, "\n".join(data) if data else None)

    def pong(self, data: bytes) -> None:
        pass

    def close(self) -> None:
        self._response.close()


class WebSocketChannel(Channel):
    """
    WebSocket transport using websocket-client.

    Frames are read with ``recv_frame()`` so ping frames reach the streaming
    timeline, which owns the pong. Fragmented text messages are reassembled.
    """

    def __init__(self, ws: websocket.WebSocket):
        self._ws = ws
        self._fragments: List[bytes] = []

    @classmethod
    def connect(
        cls,
        url: str,
        header: Optional[List[str]] = None,
        timeout: Optional[float] = None,
    ) -> "WebSocketChannel":
        """
        Open a WebSocket connection.

        Raises:
            StreamChannelError: If the handshake fails
        """
        try:
            ws = websocket.create_connection(url, header=header or [], timeout=timeout)
        except (websocket.WebSocketException, OSError) as e:
            raise StreamChannelError(f"Failed to connect to {url}: {e}") from e
        logger.debug(f"Opened streaming WebSocket to {url}")
        return cls(ws)

    def _message(self, data: bytes) -> TextMessage:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Streaming message is not UTF-8: {e}") from e
        event, payload = parse_envelope(text)
        return TextMessage(event, payload)

    def receive(self) -> Optional[Message]:
        while True:
            try:
                frame = self._ws.recv_frame()
            except websocket.WebSocketConnectionClosedException:
                return None
            except (websocket.WebSocketException, OSError) as e:
                raise StreamChannelError(f"Failed to read WebSocket frame: {e}") from e

            opcode = frame.opcode
            if opcode == websocket.ABNF.OPCODE_PING:
                return PingMessage(frame.data or b"")
            if opcode == websocket.ABNF.OPCODE_CLOSE:
                return None
            if opcode in (websocket.ABNF.OPCODE_TEXT, websocket.ABNF.OPCODE_BINARY):
                self._fragments = [frame.data]
            elif opcode == websocket.ABNF.OPCODE_CONT:
                self._fragments.append(frame.data)
            else:
                continue

            if frame.fin:
                data = b"".join(self._fragments)
                self._fragments = []
                return self._message(data)

    def pong(self, data: bytes) -> None:
        try:
            self._ws.pong(data)
        except (websocket.WebSocketException, OSError) as e:
            raise StreamChannelError(f"Failed to send pong: {e}") from e

    def close(self) -> None:
        try:
            self._ws.close()
        except (websocket.WebSocketException, OSError) as e:
            logger.warning(f"Failed to close streaming WebSocket cleanly: {e}")
