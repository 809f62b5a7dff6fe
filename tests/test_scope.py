"""
Tests for Withings scopes
=========================
Covers:
- Wire strings for every Scope member
- parse() round-trip and unknown-string failure
- Comma joining / splitting order

Run: pytest tests/test_scope.py -v
"""

from __future__ import annotations

import pytest

from withings_api.models.scope import Scope, join_scopes, split_scopes


class TestScope:

    @pytest.mark.parametrize(
        "scope, wire",
        [
            (Scope.UserInfo, "user.info"),
            (Scope.UserMetrics, "user.metrics"),
            (Scope.UserActivity, "user.activity"),
            (Scope.UserSleepEvents, "user.sleepevents"),
        ],
    )
    def test_wire_string(self, scope, wire):
        assert str(scope) == wire
        assert Scope.parse(wire) is scope

    @pytest.mark.parametrize("scope", list(Scope))
    def test_round_trip(self, scope):
        assert Scope.parse(str(scope)) is scope

    @pytest.mark.parametrize("text", ["user.weight", "USER.INFO", "", "user.info "])
    def test_unknown_scope_raises(self, text):
        with pytest.raises(ValueError):
            Scope.parse(text)


class TestScopeLists:

    def test_join(self):
        assert join_scopes([Scope.UserInfo, Scope.UserMetrics]) == "user.info,user.metrics"

    def test_join_empty(self):
        assert join_scopes([]) == ""

    def test_split_keeps_order(self):
        assert split_scopes("user.metrics,user.info") == [Scope.UserMetrics, Scope.UserInfo]

    def test_split_fails_on_any_unknown_token(self):
        with pytest.raises(ValueError):
            split_scopes("user.info,user.unknown")
