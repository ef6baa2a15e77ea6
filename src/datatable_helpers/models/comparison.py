"""String comparison policies for column name matching."""

from __future__ import annotations

from enum import Enum


class StringComparison(str, Enum):
    """How two column names are compared."""

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal-ignore-case"

    def equals(self, a: str | None, b: str | None) -> bool:
        if a is None or b is None:
            return a is b
        if self is StringComparison.ORDINAL:
            return a == b
        return a.casefold() == b.casefold()
