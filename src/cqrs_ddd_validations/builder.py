"""
Fluent builder for rule sets.

Example::

    rules = (
        RuleSetBuilder()
        .validates("name", "type?", int)
        .validates("email", "format?", r".+@.+")
        .build()
    )

    builder = RuleSetBuilder()
    rules = builder.rule(
        "age",
        builder.predicate("filled?") & builder.predicate("gteq?", 18),
    ).build()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .predicates import build_default_registry
from .rules import BoundPredicate, Rule, RuleSet

if TYPE_CHECKING:
    from .names import PredicateName
    from .registry import PredicateRegistry
    from .rules import BasePredicateExpression


class RuleSetBuilder:
    """
    Fluent builder for rule sets.

    Predicate names are resolved against the registry as each rule is
    added, so unknown names and wrong parameter counts raise here rather
    than during evaluation.
    """

    def __init__(self, registry: PredicateRegistry | None = None) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._rules: list[Rule] = []

    @property
    def registry(self) -> PredicateRegistry:
        return self._registry

    # -- predicate expressions -----------------------------------------------

    def predicate(self, name: PredicateName | str, *params: Any) -> BoundPredicate:
        """Resolve *name* and bind *params*, for use with ``&``, ``|``, ``~``."""
        return BoundPredicate(self._registry.resolve(name), *params)

    # -- rules ---------------------------------------------------------------

    def validates(
        self,
        attribute: str,
        name: PredicateName | str,
        *params: Any,
    ) -> RuleSetBuilder:
        """Add a rule applying one named predicate to *attribute*."""
        return self.rule(attribute, self.predicate(name, *params))

    def rule(
        self,
        attribute: str,
        expression: BasePredicateExpression,
    ) -> RuleSetBuilder:
        """Add a rule with an already-built predicate expression."""
        self._rules.append(Rule(attribute, expression))
        return self

    def extend(self, rule_set: RuleSet) -> RuleSetBuilder:
        """Append every rule of an existing rule set."""
        self._rules.extend(rule_set)
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> RuleSet:
        """Return the rules added so far as an immutable RuleSet."""
        return RuleSet(self._rules)

    def reset(self) -> RuleSetBuilder:
        """Clear all rules and return ``self`` for reuse."""
        self._rules.clear()
        return self
