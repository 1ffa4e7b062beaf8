"""Quoting strategy enumeration."""

from __future__ import annotations

from enum import Enum


class QuotingStrategy(Enum):
    UNQUOTED = "unquoted"
    BRACE = "brace"
    BACKSLASH = "backslash"

    def get_display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    QuotingStrategy.UNQUOTED: "Unquoted",
    QuotingStrategy.BRACE: "Brace quoted",
    QuotingStrategy.BACKSLASH: "Backslash quoted",
}
