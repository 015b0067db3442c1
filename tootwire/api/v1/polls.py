"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Polls: viewing and voting.
"""

from typing import Sequence

from tootwire.connection import Connection
from tootwire.entities.poll import Poll
from tootwire.methods.base import GET, POST, Method
from tootwire.validation import check_vote_choices


class GetPoll(Method):
    """GET ``/api/v1/polls/:id``."""
    ENDPOINT = "/api/v1/polls/:id"
    HTTP_METHOD = GET
    ENTITY = Poll
    AUTHORIZED = False


class PostVotes(Method):
    """
    POST ``/api/v1/polls/:id/votes``.

    Choices are zero-based option indexes; between one and
    ``poll_max_options`` distinct choices are accepted.
    """
    ENDPOINT = "/api/v1/polls/:id/votes"
    HTTP_METHOD = POST
    ENTITY = Poll

    def __init__(self, connection: Connection, poll_id: str, choices: Sequence[int]):
        super().__init__(connection, poll_id)
        self.params["choices"] = list(choices)

    def validate(self) -> None:
        check_vote_choices(self.params["choices"], self.connection.poll_max_options)


def get(connection: Connection, poll_id: str) -> GetPoll:
    return GetPoll(connection, poll_id)


def vote(connection: Connection, poll_id: str, choices: Sequence[int]) -> PostVotes:
    return PostVotes(connection, poll_id, choices)
