"""
Predicate contract and registry.

Provides the Predicate strategy interface and a registry that maps a
predicate name to its implementation. Rules resolve their predicates
through the registry when they are built, so an unknown name is reported
while the validator is being defined rather than while data is checked.

New predicates are added by subclassing Predicate and registering via
``register()``, or by wrapping a plain function with ``register_func()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import PredicateNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable

    from .names import PredicateName


def predicate_key(name: PredicateName | str) -> str:
    """Normalise a predicate name to its plain string form."""
    return name.value if isinstance(name, Enum) else str(name)


class Predicate(ABC):
    """
    Strategy interface for a named boolean test over one value.

    Implementations must be stateless so a single instance can be shared
    by every rule and every evaluation.
    """

    @property
    @abstractmethod
    def name(self) -> PredicateName | str:
        """The name rules use to refer to this predicate."""
        ...

    @property
    def arity(self) -> int:
        """Number of parameters the predicate expects."""
        return 0

    def check_params(self, *params: Any) -> None:
        """
        Reject parameters the predicate cannot work with.

        Called once when a rule is built. Raise
        :class:`~cqrs_ddd_validations.exceptions.RuleDefinitionError`
        for unusable parameters.
        """

    @abstractmethod
    def evaluate(self, value: Any, *params: Any) -> bool:
        """
        Test *value* against the predicate.

        Args:
            value: The value resolved from the record. May be ``ABSENT``.
            params: The parameters bound when the rule was declared.

        Returns:
            True if the value satisfies the predicate.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {predicate_key(self.name)}>"


class FunctionPredicate(Predicate):
    """Adapts a plain function ``fn(value, *params) -> bool`` to a Predicate."""

    def __init__(
        self,
        name: str,
        fn: Callable[..., bool],
        *,
        arity: int = 0,
    ) -> None:
        if arity < 0:
            raise ValueError("arity must be >= 0")
        self._name = name
        self._fn = fn
        self._arity = arity

    @property
    def name(self) -> str:
        return self._name

    @property
    def arity(self) -> int:
        return self._arity

    def evaluate(self, value: Any, *params: Any) -> bool:
        return bool(self._fn(value, *params))


class PredicateRegistry:
    """
    Registry of Predicate instances keyed by name.

    Usage::

        registry = PredicateRegistry()
        registry.register(TypePredicate())

        registry.evaluate("type?", "1", int)  # True
    """

    def __init__(self) -> None:
        self._predicates: dict[str, Predicate] = {}

    # -- registration --------------------------------------------------------

    def register(self, predicate: Predicate) -> None:
        """Register a predicate instance, replacing any with the same name."""
        self._predicates[predicate_key(predicate.name)] = predicate

    def register_all(self, *predicates: Predicate) -> None:
        """Register multiple predicate instances at once."""
        for predicate in predicates:
            self.register(predicate)

    def register_func(
        self,
        name: str,
        fn: Callable[..., bool],
        *,
        arity: int = 0,
    ) -> Predicate:
        """Wrap *fn* as a predicate, register it and return it."""
        predicate = FunctionPredicate(name, fn, arity=arity)
        self.register(predicate)
        return predicate

    def unregister(self, name: PredicateName | str) -> None:
        """Remove a predicate from the registry."""
        self._predicates.pop(predicate_key(name), None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: PredicateName | str) -> Predicate | None:
        """Return the registered predicate or ``None``."""
        return self._predicates.get(predicate_key(name))

    def has(self, name: PredicateName | str) -> bool:
        return predicate_key(name) in self._predicates

    def resolve(self, name: PredicateName | str) -> Predicate:
        """
        Return the registered predicate.

        Raises:
            PredicateNotFoundError: If *name* is not registered.
        """
        predicate = self.get(name)
        if predicate is None:
            raise PredicateNotFoundError(
                predicate_key(name), list(self._predicates.keys())
            )
        return predicate

    @property
    def supported_predicates(self) -> set[str]:
        return set(self._predicates.keys())

    # -- evaluation shortcut -------------------------------------------------

    def evaluate(self, name: PredicateName | str, value: Any, *params: Any) -> bool:
        """Look up the predicate and evaluate it."""
        return self.resolve(name).evaluate(value, *params)
