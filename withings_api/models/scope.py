"""
Withings OAuth Scopes
=====================
Permission tags requested during authorization. The wire form is a fixed
lowercase dotted string; multiple scopes travel comma-joined.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Scope(str, Enum):
    """One permission tag understood by the Withings account service."""

    UserInfo = "user.info"
    UserMetrics = "user.metrics"
    UserActivity = "user.activity"
    UserSleepEvents = "user.sleepevents"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Scope:
        """Return the scope for a wire string. Raises ValueError if unknown."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown Withings scope: {text!r}") from None


def join_scopes(scopes: Iterable[Scope]) -> str:
    return ",".join(scope.value for scope in scopes)


def split_scopes(text: str) -> list[Scope]:
    """Parse a comma-joined scope string, keeping the vendor's order."""
    return [Scope.parse(token) for token in text.split(",")]
