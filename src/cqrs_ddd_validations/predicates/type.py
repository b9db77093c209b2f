"""Type predicate: type?."""

from __future__ import annotations

from typing import Any

from ..exceptions import RuleDefinitionError
from ..names import PredicateName
from ..registry import Predicate
from .coercion import is_coercible


class TypePredicate(Predicate):
    """
    True when the value belongs to the expected type's family.

    See :mod:`~cqrs_ddd_validations.predicates.coercion` for the accepted
    conversions (``"1"``, ``1.12`` and ``Decimal(1)`` all satisfy ``int``).
    """

    @property
    def name(self) -> PredicateName:
        return PredicateName.TYPE

    @property
    def arity(self) -> int:
        return 1

    def check_params(self, *params: Any) -> None:
        (expected_type,) = params
        if not isinstance(expected_type, type):
            raise RuleDefinitionError(
                f"type? expects a class, got {expected_type!r}",
                path=PredicateName.TYPE.value,
            )

    def evaluate(self, value: Any, *params: Any) -> bool:
        (expected_type,) = params
        return is_coercible(value, expected_type)
