"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Exception hierarchy for Tootwire.

All custom exceptions inherit from TootwireError base class.
"""

from datetime import datetime
from typing import Optional


class TootwireError(Exception):
    """Base exception for all Tootwire errors."""
    pass


# Configuration Errors
class ConfigurationError(TootwireError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid, malformed or incomplete."""
    pass


class ConfigurationLoadError(ConfigurationError):
    """Raised when loading configuration fails."""
    pass


# Request Validation Errors
class RequestValidationError(TootwireError):
    """Base exception for errors detected before a request is sent."""
    pass


class InvalidStatusError(RequestValidationError):
    """Raised when a status has neither content text nor media attachments."""

    def __init__(self, message: str = "Status requires status content text or media attachments"):
        super().__init__(message)


class TooManyCharactersError(RequestValidationError):
    """Raised when status text plus spoiler text exceeds the server limit."""

    def __init__(self, count: int, max_count: int):
        self.count = count
        self.max_count = max_count
        super().__init__(
            f"Too many characters in a status (max: {max_count}, got: {count})"
        )


class NoAttachmentMediaError(RequestValidationError):
    """Raised when a media attachment list is empty."""

    def __init__(self):
        super().__init__("Attachment media is nothing")


class TooManyAttachmentMediasError(RequestValidationError):
    """Raised when more media IDs are attached than the server allows."""

    def __init__(self, count: int, max_count: int):
        self.count = count
        self.max_count = max_count
        super().__init__(f"Too many media attachments: max: {max_count}, got: {count}")


class DuplicateMediaError(RequestValidationError):
    """Raised when the same media ID is attached twice."""

    def __init__(self, media_id: str):
        self.media_id = media_id
        super().__init__(f"Attachment media is duplicate: {media_id}")


class InvalidFocalPointError(RequestValidationError):
    """Raised when a focal point coordinate is outside the allowed range."""

    def __init__(self, x: float, y: float, min_value: float, max_value: float):
        self.x = x
        self.y = y
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Focal point value allows a number between {min_value} and {max_value} "
            f"but got (x: {x}, y: {y})"
        )


class TooLittlePollOptionsError(RequestValidationError):
    """Raised when a poll or a vote has fewer options than required."""

    def __init__(self, count: int, min_count: int):
        self.count = count
        self.min_count = min_count
        super().__init__(f"The poll requires at least {min_count} options, got: {count}")


class TooManyPollOptionsError(RequestValidationError):
    """Raised when a poll or a vote has more options than the server allows."""

    def __init__(self, count: int, max_count: int):
        self.count = count
        self.max_count = max_count
        super().__init__(f"Too many poll options: max: {max_count}, got: {count}")


class DuplicatePollOptionError(RequestValidationError):
    """Raised when two poll options have the same text."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Poll option is duplicate: {option}")


class DuplicateVoteOptionError(RequestValidationError):
    """Raised when the same choice index is voted twice."""

    def __init__(self, choice: int):
        self.choice = choice
        super().__init__(f"Voted option is duplicate: {choice}")


class ScheduleError(RequestValidationError):
    """Base exception for invalid scheduled times."""
    pass


class PastDateTimeError(ScheduleError):
    """Raised when a scheduled time is not in the future."""

    def __init__(self, scheduled_at: datetime):
        self.scheduled_at = scheduled_at
        super().__init__(f"{scheduled_at.isoformat()} is a past date time")


class ScheduleTooCloseError(ScheduleError):
    """Raised when a scheduled time is closer to now than the server accepts."""

    def __init__(self, now: datetime, scheduled_at: datetime, least_period_seconds: int):
        self.now = now
        self.scheduled_at = scheduled_at
        self.least_period_seconds = least_period_seconds
        super().__init__(
            f"Schedule is too close: now: {now.isoformat()}, "
            f"scheduled: {scheduled_at.isoformat()} "
            f"(must be at least {least_period_seconds} seconds ahead)"
        )


class NoAccountIdError(RequestValidationError):
    """Raised when an account ID list is empty."""

    def __init__(self):
        super().__init__("Account ID is nothing")


class DuplicateAccountIdError(RequestValidationError):
    """Raised when an account ID list contains the same ID twice."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account IDs are duplicate: {account_id}")


class DuplicateRuleIdError(RequestValidationError):
    """Raised when a report lists the same rule ID twice."""

    def __init__(self, rule_id: str):
        self.rule_id = rule_id
        super().__init__(f"Rule IDs are duplicate: {rule_id}")


class InvalidLanguageError(RequestValidationError):
    """Raised when a language code is not ISO 639-1 compliant."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"'{language}' is not ISO639-1 compliant")


class NoTimelineError(RequestValidationError):
    """Raised when a marker request selects no timeline."""

    def __init__(self):
        super().__init__("No timeline specified")


# HTTP Errors
class HttpError(TootwireError):
    """Base exception for errors communicating with the Mastodon server."""
    pass


class HttpRequestError(HttpError):
    """Raised when the HTTP request could not be completed."""
    pass


class ReceivedMessage:
    """
    Structured error body returned by the server on client errors.

    Attributes:
        error: Short error message (e.g. "Record not found")
        error_description: Optional longer description
    """

    def __init__(self, error: Optional[str] = None, error_description: Optional[str] = None):
        self.error = error
        self.error_description = error_description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReceivedMessage):
            return NotImplemented
        return (self.error, self.error_description) == (other.error, other.error_description)

    def __repr__(self) -> str:
        return f"ReceivedMessage(error={self.error!r}, error_description={self.error_description!r})"

    def __str__(self) -> str:
        return f"{{ error: {self.error}, error_description: {self.error_description} }}"


class HttpStatusError(HttpError):
    """Base exception for non-2xx responses."""

    def __init__(self, url: str, status_code: int, message: str):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class HttpClientStatusError(HttpStatusError):
    """Raised on a 4xx response that carries a JSON error body."""

    def __init__(self, url: str, status_code: int, received: ReceivedMessage):
        self.received = received
        super().__init__(url, status_code, f"HTTP client error: {url} ({status_code}) {received}")


class HttpServerStatusError(HttpStatusError):
    """Raised on a 5xx response."""

    def __init__(self, url: str, status_code: int):
        super().__init__(url, status_code, f"HTTP server error: {url} ({status_code})")


class HttpUnexpectedStatusError(HttpStatusError):
    """Raised on any other non-2xx response, including 4xx without a JSON error body."""

    def __init__(self, url: str, status_code: int):
        super().__init__(url, status_code, f"HTTP unexpected status: {url} ({status_code})")


# Decoding Errors
class DecodeError(TootwireError):
    """Raised when a response body does not match the expected entity schema."""
    pass


# File Errors
class FileError(TootwireError):
    """Base exception for local file errors during uploads."""
    pass


class NotFileError(FileError):
    """Raised when an upload path does not refer to a regular file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"'{path}' is not a file")


class BlankFileError(FileError):
    """Raised when an upload file is empty."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Size of '{path}' is zero")


class FileIoError(FileError):
    """Raised when reading an upload file fails."""
    pass


# Streaming Errors
class StreamingError(TootwireError):
    """Base exception for streaming timeline errors."""
    pass


class StreamChannelError(StreamingError):
    """Raised when the streaming channel fails to read or write."""
    pass
