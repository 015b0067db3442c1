"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Accounts: profiles, their statuses and follow relationships.
"""

from typing import List, Sequence

from tootwire.connection import Connection
from tootwire.entities.account import Account, Relationship
from tootwire.entities.status import Status
from tootwire.methods.base import GET, POST, Method, PagedMethod
from tootwire.validation import check_account_ids


class VerifyCredentials(Method):
    """GET ``/api/v1/accounts/verify_credentials``: the authorized user's account."""
    ENDPOINT = "/api/v1/accounts/verify_credentials"
    HTTP_METHOD = GET
    ENTITY = Account


class GetAccount(Method):
    """GET ``/api/v1/accounts/:id``."""
    ENDPOINT = "/api/v1/accounts/:id"
    HTTP_METHOD = GET
    ENTITY = Account
    AUTHORIZED = False


class GetAccountStatuses(PagedMethod):
    """GET ``/api/v1/accounts/:id/statuses``."""
    ENDPOINT = "/api/v1/accounts/:id/statuses"
    HTTP_METHOD = GET
    ENTITY = List[Status]
    AUTHORIZED = False

    def only_media(self) -> "GetAccountStatuses":
        self.params["only_media"] = True
        return self

    def exclude_replies(self) -> "GetAccountStatuses":
        self.params["exclude_replies"] = True
        return self

    def exclude_reblogs(self) -> "GetAccountStatuses":
        self.params["exclude_reblogs"] = True
        return self

    def pinned(self) -> "GetAccountStatuses":
        self.params["pinned"] = True
        return self

    def tagged(self, hashtag: str) -> "GetAccountStatuses":
        self.params["tagged"] = hashtag.lstrip("#")
        return self


class GetFollowers(PagedMethod):
    """GET ``/api/v1/accounts/:id/followers``."""
    ENDPOINT = "/api/v1/accounts/:id/followers"
    HTTP_METHOD = GET
    ENTITY = List[Account]
    AUTHORIZED = False


class GetFollowing(PagedMethod):
    """GET ``/api/v1/accounts/:id/following``."""
    ENDPOINT = "/api/v1/accounts/:id/following"
    HTTP_METHOD = GET
    ENTITY = List[Account]
    AUTHORIZED = False


class PostFollow(Method):
    """POST ``/api/v1/accounts/:id/follow``."""
    ENDPOINT = "/api/v1/accounts/:id/follow"
    HTTP_METHOD = POST
    ENTITY = Relationship

    def reblogs(self, reblogs: bool) -> "PostFollow":
        self.params["reblogs"] = reblogs
        return self

    def notify(self, notify: bool) -> "PostFollow":
        self.params["notify"] = notify
        return self


class PostUnfollow(Method):
    """POST ``/api/v1/accounts/:id/unfollow``."""
    ENDPOINT = "/api/v1/accounts/:id/unfollow"
    HTTP_METHOD = POST
    ENTITY = Relationship


class GetRelationships(Method):
    """
    GET ``/api/v1/accounts/relationships``.

    Sent as repeated ``id[]`` query parameters. An empty or repeated ID list
    is rejected before sending.
    """
    ENDPOINT = "/api/v1/accounts/relationships"
    HTTP_METHOD = GET
    ENTITY = List[Relationship]

    def __init__(self, connection: Connection, account_ids: Sequence[str]):
        super().__init__(connection)
        self.params["id"] = list(account_ids)

    def validate(self) -> None:
        check_account_ids(self.params["id"])


class SearchAccounts(Method):
    """GET ``/api/v1/accounts/search``."""
    ENDPOINT = "/api/v1/accounts/search"
    HTTP_METHOD = GET
    ENTITY = List[Account]

    def __init__(self, connection: Connection, query: str):
        super().__init__(connection)
        self.params["q"] = query

    def limit(self, limit: int) -> "SearchAccounts":
        self.params["limit"] = limit
        return self

    def resolve(self) -> "SearchAccounts":
        self.params["resolve"] = True
        return self

    def following(self) -> "SearchAccounts":
        self.params["following"] = True
        return self


def verify_credentials(connection: Connection) -> VerifyCredentials:
    return VerifyCredentials(connection)


def get(connection: Connection, account_id: str) -> GetAccount:
    return GetAccount(connection, account_id)


def statuses(connection: Connection, account_id: str) -> GetAccountStatuses:
    return GetAccountStatuses(connection, account_id)


def followers(connection: Connection, account_id: str) -> GetFollowers:
    return GetFollowers(connection, account_id)


def following(connection: Connection, account_id: str) -> GetFollowing:
    return GetFollowing(connection, account_id)


def follow(connection: Connection, account_id: str) -> PostFollow:
    return PostFollow(connection, account_id)


def unfollow(connection: Connection, account_id: str) -> PostUnfollow:
    return PostUnfollow(connection, account_id)


def relationships(connection: Connection, account_ids: Sequence[str]) -> GetRelationships:
    return GetRelationships(connection, account_ids)


def search(connection: Connection, query: str) -> SearchAccounts:
    return SearchAccounts(connection, query)
