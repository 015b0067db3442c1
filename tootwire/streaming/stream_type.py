"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Streams that can be subscribed to.
"""

from dataclasses import dataclass, field
from typing import Dict

SSE_BASE_PATH = "/api/v1/streaming"


@dataclass(frozen=True)
class StreamType:
    """
    A streaming timeline.

    Attributes:
        name: Stream name as used by the WebSocket API (``public:local``)
        path: Server-sent events path under SSE_BASE_PATH
        params: Extra query parameters (hashtag or list ID)
        requires_auth: Whether the stream is scoped to the authorized user
    """
    name: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)
    requires_auth: bool = False

    @property
    def sse_path(self) -> str:
        return f"{SSE_BASE_PATH}{self.path}"

    def websocket_params(self) -> Dict[str, str]:
        return {"stream": self.name, **self.params}

    @classmethod
    def user(cls) -> "StreamType":
        return cls("user", "/user", requires_auth=True)

    @classmethod
    def user_notification(cls) -> "StreamType":
        return cls("user:notification", "/user/notification", requires_auth=True)

    @classmethod
    def public(cls) -> "StreamType":
        return cls("public", "/public")

    @classmethod
    def public_local(cls) -> "StreamType":
        return cls("public:local", "/public/local")

    @classmethod
    def public_remote(cls) -> "StreamType":
        return cls("public:remote", "/public/remote")

    @classmethod
    def hashtag(cls, tag: str) -> "StreamType":
        return cls("hashtag", "/hashtag", {"tag": tag.lstrip("#")})

    @classmethod
    def hashtag_local(cls, tag: str) -> "StreamType":
        return cls("hashtag:local", "/hashtag/local", {"tag": tag.lstrip("#")})

    @classmethod
    def list(cls, list_id: str) -> "StreamType":
        return cls("list", "/list", {"list": list_id}, requires_auth=True)

    @classmethod
    def direct(cls) -> "StreamType":
        return cls("direct", "/direct", requires_auth=True)
