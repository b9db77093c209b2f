"""The ``ABSENT`` sentinel for attributes missing from a record."""

from __future__ import annotations

from typing import Any, Final


class _Absent:
    """Singleton marking an attribute key that is not present."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


def is_missing(value: Any) -> bool:
    """True for the absent sentinel and for an explicit ``None``."""
    return value is ABSENT or value is None


def is_blank(value: Any) -> bool:
    """True for missing values and strings that are empty or whitespace."""
    if is_missing(value):
        return True
    return isinstance(value, str) and not value.strip()
