"""Presence predicates: none?, filled?, empty?."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from ..names import PredicateName
from ..registry import Predicate
from ..sentinel import is_blank, is_missing


class NonePredicate(Predicate):
    """True for an absent attribute or an explicit ``None``."""

    @property
    def name(self) -> PredicateName:
        return PredicateName.NONE

    def evaluate(self, value: Any, *_params: Any) -> bool:
        return is_missing(value)


class FilledPredicate(Predicate):
    """False for missing values, blank strings and empty collections."""

    @property
    def name(self) -> PredicateName:
        return PredicateName.FILLED

    def evaluate(self, value: Any, *_params: Any) -> bool:
        if is_blank(value):
            return False
        if isinstance(value, Sized) and not isinstance(value, str):
            return len(value) > 0
        return True


class EmptyPredicate(Predicate):
    """True for missing values, ``""`` and empty collections."""

    @property
    def name(self) -> PredicateName:
        return PredicateName.EMPTY

    def evaluate(self, value: Any, *_params: Any) -> bool:
        if is_missing(value):
            return True
        if isinstance(value, Sized):
            return len(value) == 0
        return False
