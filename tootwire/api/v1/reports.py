"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Reporting accounts to moderators.
"""

from typing import Any, Dict, Sequence

from tootwire.connection import Connection
from tootwire.entities.lists import Report
from tootwire.methods.base import POST, Method
from tootwire.validation import check_rule_ids, unique


class PostReport(Method):
    """
    POST ``/api/v1/reports``.

    Repeated status IDs are collapsed silently; repeated rule IDs are
    rejected.
    """
    ENDPOINT = "/api/v1/reports"
    HTTP_METHOD = POST
    ENTITY = Report

    def __init__(self, connection: Connection, account_id: str):
        super().__init__(connection)
        self.params["account_id"] = account_id

    def status_ids(self, status_ids: Sequence[str]) -> "PostReport":
        self.params["status_ids"] = list(status_ids)
        return self

    def comment(self, comment: str) -> "PostReport":
        self.params["comment"] = comment
        return self

    def forward(self, forward: bool = True) -> "PostReport":
        """Forward the report to the remote server of the account."""
        self.params["forward"] = forward
        return self

    def category(self, category: str) -> "PostReport":
        """One of ``spam``, ``violation`` or ``other``."""
        self.params["category"] = category
        return self

    def rule_ids(self, rule_ids: Sequence[str]) -> "PostReport":
        self.params["rule_ids"] = list(rule_ids)
        return self

    def validate(self) -> None:
        rule_ids = self.params.get("rule_ids")
        if rule_ids is not None:
            check_rule_ids(rule_ids)

    def payload(self) -> Dict[str, Any]:
        payload = super().payload()
        if "status_ids" in payload:
            payload["status_ids"] = unique(payload["status_ids"])
        return payload


def post(connection: Connection, account_id: str) -> PostReport:
    return PostReport(connection, account_id)
