"""
Built-in predicate implementations.

Provides concrete Predicate subclasses for each PredicateName and a
factory function to create registries.

Usage::

    from cqrs_ddd_validations.predicates import build_default_registry

    registry = build_default_registry()
    registry.evaluate("type?", "1", int)  # True
"""

from __future__ import annotations

from ..registry import PredicateRegistry
from .comparison import (
    EqlPredicate,
    GteqPredicate,
    GtPredicate,
    LteqPredicate,
    LtPredicate,
)
from .format import FormatPredicate
from .inclusion import ExcludedFromPredicate, IncludedInPredicate
from .presence import EmptyPredicate, FilledPredicate, NonePredicate
from .size import MaxSizePredicate, MinSizePredicate, SizePredicate
from .type import TypePredicate


def build_default_registry() -> PredicateRegistry:
    """
    Create a registry with all built-in predicates.

    Each call returns a fresh PredicateRegistry, so custom predicates
    registered on one registry never leak into another.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate("type?", 1.12, int)
        True
    """
    registry = PredicateRegistry()
    registry.register_all(
        # Type
        TypePredicate(),
        # Presence
        NonePredicate(),
        FilledPredicate(),
        EmptyPredicate(),
        # String
        FormatPredicate(),
        # Size
        SizePredicate(),
        MinSizePredicate(),
        MaxSizePredicate(),
        # Inclusion
        IncludedInPredicate(),
        ExcludedFromPredicate(),
        # Comparison
        EqlPredicate(),
        GtPredicate(),
        GteqPredicate(),
        LtPredicate(),
        LteqPredicate(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "PredicateRegistry",
]
