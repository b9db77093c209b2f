"""
Rules and rule sets.

A :class:`BoundPredicate` is a registered predicate with its parameters
fixed. Bound predicates compose with ``&``, ``|`` and ``~`` into
:class:`AndPredicate`, :class:`OrPredicate` and :class:`NotPredicate`,
which obey the same true/false contract. A :class:`Rule` attaches one
such expression to an attribute path, and a :class:`RuleSet` keeps rules
in declaration order.

Everything here is immutable once built and safe to share between
concurrent evaluations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import (
    InvalidAttributePathError,
    PredicateEvaluationError,
    RuleDefinitionError,
    ValidationEngineError,
)
from .names import PredicateName
from .registry import predicate_key

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .registry import Predicate

_UNBOUND = "<unbound>"


class BasePredicateExpression(ABC):
    """Base class for predicate expressions with logic operator support."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name reported when this expression is blamed for a failure."""
        ...

    @property
    @abstractmethod
    def expected(self) -> Any:
        """Expected value reported when this expression is blamed."""
        ...

    @abstractmethod
    def failure(
        self, value: Any, *, attribute: str = _UNBOUND
    ) -> BasePredicateExpression | None:
        """
        Evaluate against *value*.

        Returns:
            ``None`` when satisfied, otherwise the expression to blame.

        Raises:
            PredicateEvaluationError: If a predicate raised.
        """
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    def is_satisfied_by(self, value: Any) -> bool:
        return self.failure(value) is None

    def __and__(self, other: BasePredicateExpression) -> AndPredicate:
        return AndPredicate(self, other)

    def __or__(self, other: BasePredicateExpression) -> OrPredicate:
        return OrPredicate(self, other)

    def __invert__(self) -> NotPredicate:
        return NotPredicate(self)


class BoundPredicate(BasePredicateExpression):
    """
    A resolved predicate with its parameters fixed.

    The parameter count is checked against the predicate's arity and the
    predicate gets to reject unusable parameters, both at construction.
    """

    def __init__(self, predicate: Predicate, *params: Any) -> None:
        if len(params) != predicate.arity:
            raise RuleDefinitionError(
                f"Predicate '{predicate_key(predicate.name)}' takes "
                f"{predicate.arity} parameter(s), got {len(params)}",
                path=predicate_key(predicate.name),
            )
        predicate.check_params(*params)
        self.predicate = predicate
        self.params = params

    @property
    def name(self) -> str:
        return predicate_key(self.predicate.name)

    @property
    def expected(self) -> Any:
        if not self.params:
            return None
        if len(self.params) == 1:
            return self.params[0]
        return self.params

    def failure(
        self, value: Any, *, attribute: str = _UNBOUND
    ) -> BasePredicateExpression | None:
        try:
            satisfied = self.predicate.evaluate(value, *self.params)
        except ValidationEngineError:
            raise
        except Exception as exc:
            raise PredicateEvaluationError(attribute, self.name, exc) from exc
        return None if satisfied else self

    def to_dict(self) -> dict[str, Any]:
        return {"predicate": self.name, "params": list(self.params)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundPredicate):
            return NotImplemented
        return self.name == other.name and self.params == other.params

    def __hash__(self) -> int:
        return hash((self.name, _hashable(self.params)))

    def __repr__(self) -> str:
        args = ", ".join(repr(p) for p in self.params)
        return f"{self.name}({args})"


class AndPredicate(BasePredicateExpression):
    """Logical AND; blames the first failing operand."""

    def __init__(self, *operands: BasePredicateExpression) -> None:
        _check_operands(PredicateName.AND, operands, minimum=2)
        self.operands = operands

    @property
    def name(self) -> str:
        return PredicateName.AND.value

    @property
    def expected(self) -> Any:
        return self.operands

    def failure(
        self, value: Any, *, attribute: str = _UNBOUND
    ) -> BasePredicateExpression | None:
        for operand in self.operands:
            blamed = operand.failure(value, attribute=attribute)
            if blamed is not None:
                return blamed
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"op": "and", "operands": [o.to_dict() for o in self.operands]}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AndPredicate):
            return NotImplemented
        return self.operands == other.operands

    def __hash__(self) -> int:
        return hash(("and", self.operands))

    def __repr__(self) -> str:
        return " & ".join(_wrap(o) for o in self.operands)


class OrPredicate(BasePredicateExpression):
    """Logical OR; blames itself when every operand fails."""

    def __init__(self, *operands: BasePredicateExpression) -> None:
        _check_operands(PredicateName.OR, operands, minimum=2)
        self.operands = operands

    @property
    def name(self) -> str:
        return PredicateName.OR.value

    @property
    def expected(self) -> Any:
        return self.operands

    def failure(
        self, value: Any, *, attribute: str = _UNBOUND
    ) -> BasePredicateExpression | None:
        for operand in self.operands:
            if operand.failure(value, attribute=attribute) is None:
                return None
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"op": "or", "operands": [o.to_dict() for o in self.operands]}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrPredicate):
            return NotImplemented
        return self.operands == other.operands

    def __hash__(self) -> int:
        return hash(("or", self.operands))

    def __repr__(self) -> str:
        return " | ".join(_wrap(o) for o in self.operands)


class NotPredicate(BasePredicateExpression):
    """Logical NOT; blames itself when the operand is satisfied."""

    def __init__(self, operand: BasePredicateExpression) -> None:
        _check_operands(PredicateName.NOT, (operand,), minimum=1)
        self.operand = operand

    @property
    def name(self) -> str:
        return PredicateName.NOT.value

    @property
    def expected(self) -> Any:
        return self.operand

    def failure(
        self, value: Any, *, attribute: str = _UNBOUND
    ) -> BasePredicateExpression | None:
        if self.operand.failure(value, attribute=attribute) is None:
            return self
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"op": "not", "operands": [self.operand.to_dict()]}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotPredicate):
            return NotImplemented
        return self.operand == other.operand

    def __hash__(self) -> int:
        return hash(("not", self.operand))

    def __repr__(self) -> str:
        return f"~{_wrap(self.operand)}"


@dataclass(frozen=True)
class Rule:
    """One predicate expression bound to one attribute path."""

    attribute: str
    predicate: BasePredicateExpression

    def __post_init__(self) -> None:
        validate_attribute_path(self.attribute)
        if not isinstance(self.predicate, BasePredicateExpression):
            raise RuleDefinitionError(
                f"Rule for '{self.attribute}' needs a predicate expression, "
                f"got {self.predicate!r}",
                path=self.attribute,
            )

    def failure(self, value: Any) -> BasePredicateExpression | None:
        return self.predicate.failure(value, attribute=self.attribute)

    def to_dict(self) -> dict[str, Any]:
        return {"attribute": self.attribute, **self.predicate.to_dict()}


class RuleSet:
    """
    Ordered, immutable collection of rules.

    Declaration order is kept so that error reports are deterministic.
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)
        for rule in self._rules:
            if not isinstance(rule, Rule):
                raise RuleDefinitionError(f"Expected a Rule, got {rule!r}")

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def attributes(self) -> tuple[str, ...]:
        """Distinct attribute paths in first-declaration order."""
        return tuple(dict.fromkeys(rule.attribute for rule in self._rules))

    def for_attribute(self, attribute: str) -> tuple[Rule, ...]:
        return tuple(rule for rule in self._rules if rule.attribute == attribute)

    def to_dict(self) -> dict[str, Any]:
        return {"rules": [rule.to_dict() for rule in self._rules]}

    def __add__(self, other: RuleSet) -> RuleSet:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return RuleSet(self._rules + other._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({list(self._rules)!r})"


def validate_attribute_path(attribute: Any) -> None:
    """
    Reject attribute paths that cannot address a record value.

    Raises:
        InvalidAttributePathError: For non-strings, empty paths and
            dotted paths with an empty segment.
    """
    if not isinstance(attribute, str):
        raise InvalidAttributePathError(attribute, "must be a string")
    if not attribute.strip():
        raise InvalidAttributePathError(attribute, "must not be empty")
    if any(not part for part in attribute.split(".")):
        raise InvalidAttributePathError(attribute, "contains an empty segment")


# -- internals ---------------------------------------------------------------


def _check_operands(
    op: PredicateName,
    operands: tuple[Any, ...],
    *,
    minimum: int,
) -> None:
    if len(operands) < minimum:
        raise RuleDefinitionError(
            f"'{op.value}' needs at least {minimum} operand(s)", path=op.value
        )
    for operand in operands:
        if not isinstance(operand, BasePredicateExpression):
            raise RuleDefinitionError(
                f"'{op.value}' operand must be a predicate expression, "
                f"got {operand!r}",
                path=op.value,
            )


def _wrap(expr: BasePredicateExpression) -> str:
    if isinstance(expr, AndPredicate | OrPredicate):
        return f"({expr!r})"
    return repr(expr)


def _hashable(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value
