"""
Unit tests for OAuth scopes.
"""

import pytest

from tootwire.scope import Scope, join_scopes, parse_scope, parse_scopes


class TestScope:
    """Test scope parsing and formatting."""

    def test_parse_scope(self):
        """Test known names parse to their member."""
        assert parse_scope("read:statuses") is Scope.READ_STATUSES
        assert parse_scope("admin:write:reports") is Scope.ADMIN_WRITE_REPORTS

    def test_parse_unknown_scope(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError):
            parse_scope("read:everything")

    def test_parse_scopes(self):
        """Test a space separated string parses in order."""
        assert parse_scopes("read write follow") == [Scope.READ, Scope.WRITE, Scope.FOLLOW]

    def test_join_scopes(self):
        """Test scopes are joined with spaces."""
        assert join_scopes([Scope.READ, Scope.PUSH]) == "read push"

    def test_str(self):
        """Test str() gives the scope name."""
        assert str(Scope.WRITE_MEDIA) == "write:media"
