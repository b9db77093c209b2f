"""Inclusion predicates: included_in?, excluded_from?."""

from __future__ import annotations

from collections.abc import Container
from typing import Any

from ..exceptions import RuleDefinitionError
from ..names import PredicateName
from ..registry import Predicate
from ..sentinel import is_missing


def _check_container(name: PredicateName, values: Any) -> None:
    if isinstance(values, str) or not isinstance(values, Container):
        raise RuleDefinitionError(
            f"{name.value} expects a collection of values, got {values!r}",
            path=name.value,
        )


def _contains(values: Any, value: Any) -> bool:
    try:
        return value in values
    except TypeError:
        # unhashable value tested against a set
        return False


class IncludedInPredicate(Predicate):
    @property
    def name(self) -> PredicateName:
        return PredicateName.INCLUDED_IN

    @property
    def arity(self) -> int:
        return 1

    def check_params(self, *params: Any) -> None:
        _check_container(self.name, params[0])

    def evaluate(self, value: Any, *params: Any) -> bool:
        if is_missing(value):
            return False
        return _contains(params[0], value)


class ExcludedFromPredicate(Predicate):
    @property
    def name(self) -> PredicateName:
        return PredicateName.EXCLUDED_FROM

    @property
    def arity(self) -> int:
        return 1

    def check_params(self, *params: Any) -> None:
        _check_container(self.name, params[0])

    def evaluate(self, value: Any, *params: Any) -> bool:
        if is_missing(value):
            return False
        return not _contains(params[0], value)
