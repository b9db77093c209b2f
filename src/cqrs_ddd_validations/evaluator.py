"""
Rule evaluation.

The :class:`Evaluator` runs every rule of a :class:`RuleSet` against a
record once, in declaration order, and collects one :class:`Error` per
failed rule. It holds no per-call state, so one instance can serve
concurrent evaluations.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from decimal import Decimal
from types import MemberDescriptorType
from typing import TYPE_CHECKING, Any

from .config import EvaluatorConfig
from .exceptions import (
    AttributeResolutionError,
    InvalidAttributePathError,
    PredicateEvaluationError,
    RuleDefinitionError,
)
from .result import Error, ErrorSet, Result
from .rules import RuleSet
from .sentinel import ABSENT

if TYPE_CHECKING:
    from .rules import Rule

logger = logging.getLogger("cqrs_ddd.validations.evaluator")

# Values that are never traversed with getattr when walking a path
_SCALARS = (str, bytes, bytearray, int, float, Decimal, list, tuple, set, frozenset)


class Evaluator:
    """
    Runs rule sets against records.

    Usage::

        evaluator = Evaluator()
        result = evaluator.evaluate(rules, {"name": "1"})
        result.success  # True
    """

    def __init__(self, config: EvaluatorConfig | None = None) -> None:
        self._config = config or EvaluatorConfig()

    @property
    def config(self) -> EvaluatorConfig:
        return self._config

    def evaluate(self, rule_set: RuleSet, record: Any) -> Result:
        """
        Evaluate *rule_set* against *record*.

        Failed predicates become errors in the result. A predicate that
        raises is a defect and propagates as
        :class:`~cqrs_ddd_validations.exceptions.PredicateEvaluationError`,
        and a record accessor that raises propagates as
        :class:`~cqrs_ddd_validations.exceptions.AttributeResolutionError`.
        """
        if not isinstance(rule_set, RuleSet):
            raise RuleDefinitionError(
                f"Expected a RuleSet, got {type(rule_set).__name__}"
            )

        errors: list[Error] = []
        for rule in rule_set:
            self.check_path(rule.attribute)
            error = self._evaluate_rule(rule, record)
            if error is not None:
                errors.append(error)

        logger.debug(
            "Evaluated %d rule(s): %d failure(s)", len(rule_set), len(errors)
        )
        return Result(errors=ErrorSet(errors))

    def check_path(self, attribute: str) -> None:
        """
        Reject a path with an empty segment under the configured separator.

        Raises:
            InvalidAttributePathError: For paths such as ``"a//b"`` when
                the separator is ``"/"``.
        """
        if not self._config.nested_paths:
            return
        if any(not part for part in attribute.split(self._config.path_separator)):
            raise InvalidAttributePathError(attribute, "contains an empty segment")

    def resolve(self, record: Any, attribute: str) -> Any:
        """
        Resolve *attribute* on *record*.

        Mappings are read by key, other objects by attribute. Dotted
        paths walk nested records when ``nested_paths`` is enabled.
        Returns ``ABSENT`` when any step is missing. Errors raised by a
        record accessor propagate unchanged.
        """
        if not self._config.nested_paths:
            return _lookup(record, attribute)

        value = record
        for part in attribute.split(self._config.path_separator):
            value = _lookup(value, part)
            if value is ABSENT:
                break
        return value

    # -- internals -----------------------------------------------------------

    def _evaluate_rule(self, rule: Rule, record: Any) -> Error | None:
        try:
            value = self.resolve(record, rule.attribute)
        except Exception as exc:
            logger.error(
                "Resolving attribute '%s' for rule '%s' raised %s: %s",
                rule.attribute,
                rule.predicate.name,
                type(exc).__name__,
                exc,
            )
            raise AttributeResolutionError(
                rule.attribute, rule.predicate.name, exc
            ) from exc

        try:
            blamed = rule.failure(value)
        except PredicateEvaluationError as exc:
            logger.error(
                "Predicate '%s' failed on attribute '%s': %s",
                exc.rule_name,
                exc.attribute,
                exc.original,
            )
            raise

        if blamed is None:
            return None

        error = Error(
            attribute=rule.attribute,
            rule_name=blamed.name,
            expected=blamed.expected,
            actual=None if value is ABSENT else value,
        )
        if self._config.log_failures:
            logger.debug(
                "Rule '%s' failed for '%s' (expected=%r, actual=%r)",
                error.rule_name,
                error.attribute,
                error.expected,
                error.actual,
            )
        return error


def _lookup(obj: Any, key: str) -> Any:
    if obj is ABSENT or obj is None:
        return ABSENT
    if isinstance(obj, Mapping):
        return obj.get(key, ABSENT)
    if isinstance(obj, _SCALARS):
        return ABSENT
    try:
        static = inspect.getattr_static(obj, key)
    except AttributeError:
        if not hasattr(type(obj), "__getattr__"):
            return ABSENT
        # dynamic attributes: only a missing name counts as absent
        try:
            return getattr(obj, key)
        except AttributeError:
            return ABSENT
    if isinstance(static, MemberDescriptorType):
        # unset __slots__ entry
        return getattr(obj, key, ABSENT)
    return getattr(obj, key)


_default_evaluator = Evaluator()


def evaluate(rule_set: RuleSet, record: Any) -> Result:
    """Evaluate with a default-configured :class:`Evaluator`."""
    return _default_evaluator.evaluate(rule_set, record)
