"""
Engine fault hierarchy.

These exceptions signal a broken validator definition or a broken
predicate, never invalid data. Invalid data is reported through
:class:`~cqrs_ddd_validations.result.Result`.

All exceptions inherit from ``ValidationEngineError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ValidationEngineError(Exception):
    """Base exception for all validation engine faults."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class PredicateNotFoundError(ValidationEngineError):
    """
    Unknown predicate name referenced by a rule.

    Provides fuzzy-matched suggestions for likely intended predicates.
    """

    def __init__(self, name: str, valid_predicates: list[str]) -> None:
        self.name = name
        self.valid_predicates = valid_predicates
        self.suggestions = get_close_matches(name, valid_predicates, n=3, cutoff=0.6)

        message = f"Unknown predicate: '{name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid predicates: {', '.join(sorted(valid_predicates)[:10])}..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PREDICATE_NOT_FOUND",
            "predicate": self.name,
            "suggestions": self.suggestions,
            "valid_predicates": sorted(self.valid_predicates),
        }


class RuleDefinitionError(ValidationEngineError):
    """A rule or rule document is structurally invalid."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_DEFINITION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class InvalidAttributePathError(RuleDefinitionError):
    """
    Attribute path that cannot address a record value.

    Raised for empty paths and paths with empty segments (``"a..b"``).
    """

    def __init__(self, attribute: Any, reason: str) -> None:
        self.attribute = attribute
        self.reason = reason
        super().__init__(
            f"Invalid attribute path {attribute!r}: {reason}",
            path=str(attribute),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ATTRIBUTE_PATH",
            "attribute": str(self.attribute),
            "reason": self.reason,
        }


class PredicateEvaluationError(ValidationEngineError):
    """
    A predicate raised while evaluating a value.

    This is a defect in the predicate, not a validation failure. The
    original exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        attribute: str,
        rule_name: str,
        original: BaseException,
    ) -> None:
        self.attribute = attribute
        self.rule_name = rule_name
        self.original = original
        super().__init__(
            f"Predicate '{rule_name}' raised {type(original).__name__} "
            f"while validating '{attribute}': {original}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PREDICATE_EVALUATION_ERROR",
            "attribute": self.attribute,
            "rule": self.rule_name,
            "cause": type(self.original).__name__,
            "message": str(self.original),
        }


class AttributeResolutionError(ValidationEngineError):
    """
    Reading an attribute from the record raised.

    Raised when a property or ``__getattr__`` on the record fails for a
    reason other than the attribute being missing. The original
    exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        attribute: str,
        rule_name: str,
        original: BaseException,
    ) -> None:
        self.attribute = attribute
        self.rule_name = rule_name
        self.original = original
        super().__init__(
            f"Resolving '{attribute}' for rule '{rule_name}' raised "
            f"{type(original).__name__}: {original}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ATTRIBUTE_RESOLUTION_ERROR",
            "attribute": self.attribute,
            "rule": self.rule_name,
            "cause": type(self.original).__name__,
            "message": str(self.original),
        }
