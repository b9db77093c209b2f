"""Comparison predicates: eql?, gt?, gteq?, lt?, lteq?."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any

from ..names import PredicateName
from ..registry import Predicate
from ..sentinel import is_missing

if TYPE_CHECKING:
    from collections.abc import Callable


class _OrderingPredicate(Predicate):
    """Shared body for the ordering predicates.

    Missing values and values that cannot be ordered against the bound
    (``"a" > 1``) fail the predicate.
    """

    _compare: Callable[[Any, Any], Any]

    @property
    def arity(self) -> int:
        return 1

    def evaluate(self, value: Any, *params: Any) -> bool:
        if is_missing(value):
            return False
        try:
            return bool(self._compare(value, params[0]))
        except TypeError:
            return False


class EqlPredicate(Predicate):
    @property
    def name(self) -> PredicateName:
        return PredicateName.EQL

    @property
    def arity(self) -> int:
        return 1

    def evaluate(self, value: Any, *params: Any) -> bool:
        if is_missing(value):
            return params[0] is None
        return bool(value == params[0])


class GtPredicate(_OrderingPredicate):
    _compare = operator.gt

    @property
    def name(self) -> PredicateName:
        return PredicateName.GT


class GteqPredicate(_OrderingPredicate):
    _compare = operator.ge

    @property
    def name(self) -> PredicateName:
        return PredicateName.GTEQ


class LtPredicate(_OrderingPredicate):
    _compare = operator.lt

    @property
    def name(self) -> PredicateName:
        return PredicateName.LT


class LteqPredicate(_OrderingPredicate):
    _compare = operator.le

    @property
    def name(self) -> PredicateName:
        return PredicateName.LTEQ
