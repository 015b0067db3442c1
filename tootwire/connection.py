"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Connection to a Mastodon server.

Holds the server URL, the access token, the server policy limits and the
pooled HTTP session shared by every request built against it.
"""

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse, urlunparse

import requests
from requests.adapters import HTTPAdapter

from tootwire.config.settings import (
    DEFAULT_POLL_MAX_OPTIONS,
    DEFAULT_STATUS_MAX_CHARACTERS,
    DEFAULT_STATUS_MAX_MEDIAS,
    DEFAULT_USER_AGENT,
    TootwireConfig,
    load_config,
    validate_server_url,
)
from tootwire.exceptions import InvalidConfigurationError
from tootwire.languages import is_iso639_1
from tootwire.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class Connection:
    """
    Connection settings and HTTP session for one Mastodon server.

    A Connection is read-only after construction and may be shared by any
    number of request builders. The underlying ``requests.Session`` pools
    TCP connections; call ``close()`` (or use the connection as a context
    manager) to release them.

    Example:
        >>> with Connection("https://mastodon.social", token) as conn:
        ...     status = statuses.get(conn, "109").send()
    """

    def __init__(
        self,
        url: str,
        access_token: str,
        user_agent: str = DEFAULT_USER_AGENT,
        default_language: Optional[str] = None,
        status_max_characters: int = DEFAULT_STATUS_MAX_CHARACTERS,
        status_max_medias: int = DEFAULT_STATUS_MAX_MEDIAS,
        poll_max_options: int = DEFAULT_POLL_MAX_OPTIONS,
        whitelist_mode: bool = False,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize a Connection.

        Args:
            url: Base URL of the Mastodon server (e.g., "https://mastodon.social")
            access_token: OAuth bearer token
            user_agent: User-Agent header sent with every request
            default_language: ISO 639-1 code applied to posted statuses
            status_max_characters: Maximum characters in status plus spoiler text
            status_max_medias: Maximum media attachments per status
            poll_max_options: Maximum options per poll
            whitelist_mode: If True, public streams are authorized too
            timeout: Request timeout in seconds (None: no timeout)
            session: Optional pre-built session, mainly for tests

        Raises:
            InvalidConfigurationError: If any setting is missing or invalid
        """
        validate_server_url(url)
        if not access_token:
            raise InvalidConfigurationError("access_token is required")
        if default_language is not None and not is_iso639_1(default_language):
            raise InvalidConfigurationError(
                f"default_language '{default_language}' is not ISO639-1 compliant"
            )
        for name, value in (
            ("status_max_characters", status_max_characters),
            ("status_max_medias", status_max_medias),
            ("poll_max_options", poll_max_options),
        ):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if timeout is not None and timeout <= 0:
            raise InvalidConfigurationError(f"timeout must be positive, got {timeout!r}")

        self._url = url.rstrip('/')
        self._access_token = access_token
        self._user_agent = user_agent
        self._default_language = default_language
        self._status_max_characters = status_max_characters
        self._status_max_medias = status_max_medias
        self._poll_max_options = poll_max_options
        self._whitelist_mode = whitelist_mode
        self._timeout = timeout

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(
                max_retries=0,
                pool_connections=10,
                pool_maxsize=20
            )
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        session.headers.update({"User-Agent": user_agent})
        self._session = session

        logger.debug(f"Created connection to {self._url}")

    @classmethod
    def from_config(cls, config: TootwireConfig) -> "Connection":
        """
        Build a Connection from a loaded configuration.

        The ``logging`` section is applied with setup_logging().

        Args:
            config: Tootwire configuration

        Returns:
            Connection: New connection

        Raises:
            InvalidConfigurationError: If the configuration is incomplete
        """
        log_file = Path(config.logging.file) if config.logging.file else None
        setup_logging(
            level=config.logging.level,
            log_file=log_file,
            json_format=config.logging.json_format,
        )

        server = config.server
        return cls(
            url=server.url,
            access_token=server.access_token,
            user_agent=server.user_agent,
            default_language=server.default_language or None,
            status_max_characters=config.limits.status_max_characters,
            status_max_medias=config.limits.status_max_medias,
            poll_max_options=config.limits.poll_max_options,
            whitelist_mode=server.whitelist_mode,
            timeout=server.timeout_seconds or None,
        )

    @classmethod
    def from_file(cls, config_path: Optional[str] = None) -> "Connection":
        """
        Build a Connection from a YAML configuration file and the environment.

        Args:
            config_path: Path to configuration file. If None, uses default path.

        Returns:
            Connection: New connection
        """
        return cls.from_config(load_config(config_path))

    @property
    def url(self) -> str:
        return self._url

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def default_language(self) -> Optional[str]:
        return self._default_language

    @property
    def status_max_characters(self) -> int:
        return self._status_max_characters

    @property
    def status_max_medias(self) -> int:
        return self._status_max_medias

    @property
    def poll_max_options(self) -> int:
        return self._poll_max_options

    @property
    def whitelist_mode(self) -> bool:
        return self._whitelist_mode

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def endpoint_url(self, path: str) -> str:
        """Join the server URL with an absolute API path."""
        return f"{self._url}{path}"

    def websocket_url(self, streaming_api: Optional[str] = None) -> str:
        """
        Base URL for the streaming WebSocket.

        Args:
            streaming_api: ``urls.streaming_api`` from the instance entity. If
                None, the server URL with a ws/wss scheme is used.

        Returns:
            WebSocket base URL without a trailing slash
        """
        if streaming_api:
            return streaming_api.rstrip('/')
        parsed = urlparse(self._url)
        scheme = "wss" if parsed.scheme == "https" else "ws"
        return urlunparse(parsed._replace(scheme=scheme))

    def close(self) -> None:
        """Close the HTTP session and release pooled connections."""
        if self._session:
            self._session.close()
            logger.debug(f"Closed connection to {self._url}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"Connection(url={self._url!r}, user_agent={self._user_agent!r})"
