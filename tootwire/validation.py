"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Client side checks run before a request is sent.

Each check raises a RequestValidationError subclass carrying the offending
values, so invalid requests never reach the server.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence

from tootwire.exceptions import (
    DuplicateAccountIdError,
    DuplicateMediaError,
    DuplicatePollOptionError,
    DuplicateRuleIdError,
    DuplicateVoteOptionError,
    InvalidFocalPointError,
    InvalidLanguageError,
    NoAccountIdError,
    NoAttachmentMediaError,
    PastDateTimeError,
    ScheduleTooCloseError,
    TooLittlePollOptionsError,
    TooManyAttachmentMediasError,
    TooManyCharactersError,
    TooManyPollOptionsError,
)
from tootwire.languages import is_iso639_1

# Seconds; the server requires at least five minutes.
LEAST_SCHEDULABLE_PERIOD = 302

MIN_POLL_OPTIONS = 2
MIN_VOTE_CHOICES = 1
FOCUS_MIN = -1.0
FOCUS_MAX = 1.0


def _first_duplicate(values: Iterable) -> Optional[object]:
    seen = set()
    for value in values:
        if value in seen:
            return value
        seen.add(value)
    return None


def _trimmed(values: Sequence[str]) -> List[str]:
    return [value.strip() for value in values if value and value.strip()]

def count_characters(status: Optional[str], spoiler_text: Optional[str]) -> int:
    """Characters counted against the status limit: text plus spoiler text."""
    return len(status or "") + len(spoiler_text or "")


def check_characters(status: Optional[str], spoiler_text: Optional[str], max_count: int) -> None:
    count = count_characters(status, spoiler_text)
    if count > max_count:
        raise TooManyCharactersError(count, max_count)


def check_language(language: str) -> None:
    if not is_iso639_1(language):
        raise InvalidLanguageError(language)


def clean_media_ids(media_ids: Sequence[str], max_count: int) -> List[str]:
    """
    Trim media IDs and drop blank ones, then check count and uniqueness.

    Returns:
        The cleaned media IDs

    Raises:
        NoAttachmentMediaError: If nothing is left
        TooManyAttachmentMediasError: If more than ``max_count`` are left
        DuplicateMediaError: If an ID appears twice
    """
    cleaned = _trimmed(media_ids)
    if not cleaned:
        raise NoAttachmentMediaError()
    if len(cleaned) > max_count:
        raise TooManyAttachmentMediasError(len(cleaned), max_count)
    duplicate = _first_duplicate(cleaned)
    if duplicate is not None:
        raise DuplicateMediaError(duplicate)
    return cleaned


def clean_text(text: Optional[str]) -> Optional[str]:
    """Trim text; blank text becomes None."""
    if text is None:
        return None
    return text.strip() or None


def check_poll_options(options: Sequence[str], max_count: int) -> None:
    if len(options) < MIN_POLL_OPTIONS:
        raise TooLittlePollOptionsError(len(options), MIN_POLL_OPTIONS)
    if len(options) > max_count:
        raise TooManyPollOptionsError(len(options), max_count)
    duplicate = _first_duplicate(options)
    if duplicate is not None:
        raise DuplicatePollOptionError(duplicate)


def clean_poll_options(options: Sequence[str], max_count: int) -> List[str]:
    """
    Trim poll options and drop blank ones, then check count and uniqueness.

    Returns:
        The cleaned options

    Raises:
        TooLittlePollOptionsError: If fewer than MIN_POLL_OPTIONS are left
        TooManyPollOptionsError: If more than ``max_count`` are left
        DuplicatePollOptionError: If an option appears twice
    """
    cleaned = _trimmed(options)
    check_poll_options(cleaned, max_count)
    return cleaned


def check_vote_choices(choices: Sequence[int], max_count: int) -> None:
    if len(choices) < MIN_VOTE_CHOICES:
        raise TooLittlePollOptionsError(len(choices), MIN_VOTE_CHOICES)
    if len(choices) > max_count:
        raise TooManyPollOptionsError(len(choices), max_count)
    duplicate = _first_duplicate(choices)
    if duplicate is not None:
        raise DuplicateVoteOptionError(duplicate)


def check_account_ids(account_ids: Sequence[str]) -> None:
    if not account_ids:
        raise NoAccountIdError()
    duplicate = _first_duplicate(account_ids)
    if duplicate is not None:
        raise DuplicateAccountIdError(duplicate)


def check_rule_ids(rule_ids: Sequence[str]) -> None:
    duplicate = _first_duplicate(rule_ids)
    if duplicate is not None:
        raise DuplicateRuleIdError(duplicate)


def unique(values: Iterable[str]) -> List[str]:
    """Drop repeated values, keeping first occurrences in order."""
    return list(dict.fromkeys(values))


def check_focus(x: float, y: float) -> None:
    if not (FOCUS_MIN <= x <= FOCUS_MAX and FOCUS_MIN <= y <= FOCUS_MAX):
        raise InvalidFocalPointError(x, y, FOCUS_MIN, FOCUS_MAX)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def check_schedule(scheduled_at: datetime, now: Optional[datetime] = None) -> None:
    """
    Check a scheduled publication time. Naive datetimes are taken as UTC.

    Raises:
        PastDateTimeError: If ``scheduled_at`` is not after now
        ScheduleTooCloseError: If it is less than LEAST_SCHEDULABLE_PERIOD
            seconds ahead
    """
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    scheduled_at = _as_utc(scheduled_at)
    if scheduled_at <= now:
        raise PastDateTimeError(scheduled_at)
    if scheduled_at < now + timedelta(seconds=LEAST_SCHEDULABLE_PERIOD):
        raise ScheduleTooCloseError(now, scheduled_at, LEAST_SCHEDULABLE_PERIOD)
