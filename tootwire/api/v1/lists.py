"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Lists of followed accounts.
"""

from typing import List, Sequence

from tootwire.connection import Connection
from tootwire.entities.account import Account
from tootwire.entities.base import Nothing
from tootwire.entities.lists import AccountList
from tootwire.methods.base import DELETE, GET, POST, Method, PagedMethod
from tootwire.validation import check_account_ids


class GetLists(Method):
    """GET ``/api/v1/lists``."""
    ENDPOINT = "/api/v1/lists"
    HTTP_METHOD = GET
    ENTITY = List[AccountList]


class GetListAccounts(PagedMethod):
    """GET ``/api/v1/lists/:id/accounts``."""
    ENDPOINT = "/api/v1/lists/:id/accounts"
    HTTP_METHOD = GET
    ENTITY = List[Account]


class ListAccountsChange(Method):
    """Add or remove accounts; at least one account ID, no repeats."""
    ENDPOINT = "/api/v1/lists/:id/accounts"
    ENTITY = Nothing

    def __init__(self, connection: Connection, list_id: str, account_ids: Sequence[str]):
        super().__init__(connection, list_id)
        self.params["account_ids"] = list(account_ids)

    def validate(self) -> None:
        check_account_ids(self.params["account_ids"])


class PostListAccounts(ListAccountsChange):
    """POST ``/api/v1/lists/:id/accounts``."""
    HTTP_METHOD = POST


class DeleteListAccounts(ListAccountsChange):
    """DELETE ``/api/v1/lists/:id/accounts``."""
    HTTP_METHOD = DELETE


def get(connection: Connection) -> GetLists:
    return GetLists(connection)


def accounts(connection: Connection, list_id: str) -> GetListAccounts:
    return GetListAccounts(connection, list_id)


def add_accounts(connection: Connection, list_id: str, account_ids: Sequence[str]) -> PostListAccounts:
    return PostListAccounts(connection, list_id, account_ids)


def remove_accounts(connection: Connection, list_id: str, account_ids: Sequence[str]) -> DeleteListAccounts:
    return DeleteListAccounts(connection, list_id, account_ids)
