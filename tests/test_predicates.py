"""Tests for the built-in predicates."""

from __future__ import annotations

import re
from decimal import Decimal

import pytest

from cqrs_ddd_validations.exceptions import RuleDefinitionError
from cqrs_ddd_validations.names import PredicateName
from cqrs_ddd_validations.predicates.comparison import (
    EqlPredicate,
    GteqPredicate,
    GtPredicate,
    LteqPredicate,
    LtPredicate,
)
from cqrs_ddd_validations.predicates.format import FormatPredicate
from cqrs_ddd_validations.predicates.inclusion import (
    ExcludedFromPredicate,
    IncludedInPredicate,
)
from cqrs_ddd_validations.predicates.presence import (
    EmptyPredicate,
    FilledPredicate,
    NonePredicate,
)
from cqrs_ddd_validations.predicates.size import (
    MaxSizePredicate,
    MinSizePredicate,
    SizePredicate,
)
from cqrs_ddd_validations.predicates.type import TypePredicate
from cqrs_ddd_validations.sentinel import ABSENT

# ══════════════════════════════════════════════════════════════════════
# Type
# ══════════════════════════════════════════════════════════════════════


class TestTypePredicate:
    def test_name_and_arity(self) -> None:
        pred = TypePredicate()
        assert pred.name is PredicateName.TYPE
        assert pred.arity == 1

    def test_evaluates_through_decision_table(self) -> None:
        pred = TypePredicate()
        assert pred.evaluate("1", int) is True
        assert pred.evaluate(Decimal("2.5"), int) is True
        assert pred.evaluate([], int) is False
        assert pred.evaluate(ABSENT, int) is False

    def test_rejects_non_class_parameter(self) -> None:
        """A type instance instead of a class is a definition error."""
        with pytest.raises(RuleDefinitionError, match="expects a class"):
            TypePredicate().check_params("int")


# ══════════════════════════════════════════════════════════════════════
# Presence
# ══════════════════════════════════════════════════════════════════════


class TestPresencePredicates:
    def test_none(self) -> None:
        pred = NonePredicate()
        assert pred.evaluate(ABSENT) is True
        assert pred.evaluate(None) is True
        assert pred.evaluate("") is False
        assert pred.evaluate(0) is False

    def test_filled(self) -> None:
        pred = FilledPredicate()
        assert pred.evaluate("a") is True
        assert pred.evaluate(0) is True
        assert pred.evaluate(False) is True
        assert pred.evaluate([1]) is True
        assert pred.evaluate(ABSENT) is False
        assert pred.evaluate(None) is False
        assert pred.evaluate("  ") is False
        assert pred.evaluate([]) is False
        assert pred.evaluate({}) is False

    def test_empty(self) -> None:
        pred = EmptyPredicate()
        assert pred.evaluate(ABSENT) is True
        assert pred.evaluate(None) is True
        assert pred.evaluate("") is True
        assert pred.evaluate([]) is True
        assert pred.evaluate(" ") is False
        assert pred.evaluate(0) is False


# ══════════════════════════════════════════════════════════════════════
# Format
# ══════════════════════════════════════════════════════════════════════


class TestFormatPredicate:
    def test_full_match_required(self) -> None:
        pred = FormatPredicate()
        assert pred.evaluate("abc-123", r"[a-z]+-\d+") is True
        assert pred.evaluate("1abc-123", r"[a-z]+-\d+") is False
        assert pred.evaluate("abc-123x", r"[a-z]+-\d+") is False

    def test_compiled_pattern(self) -> None:
        pred = FormatPredicate()
        assert pred.evaluate("ABC", re.compile("abc", re.IGNORECASE)) is True

    def test_non_string_fails(self) -> None:
        pred = FormatPredicate()
        assert pred.evaluate(123, r"\d+") is False
        assert pred.evaluate(ABSENT, r".*") is False

    def test_bad_pattern_is_definition_error(self) -> None:
        with pytest.raises(RuleDefinitionError, match="does not compile"):
            FormatPredicate().check_params("[unclosed")
        with pytest.raises(RuleDefinitionError, match="expects a regex"):
            FormatPredicate().check_params(42)


# ══════════════════════════════════════════════════════════════════════
# Size
# ══════════════════════════════════════════════════════════════════════


class TestSizePredicates:
    def test_exact_size(self) -> None:
        pred = SizePredicate()
        assert pred.evaluate("abc", 3) is True
        assert pred.evaluate([1, 2], 3) is False
        assert pred.evaluate(123, 3) is False

    def test_size_range(self) -> None:
        pred = SizePredicate()
        assert pred.evaluate("abcd", range(3, 6)) is True
        assert pred.evaluate("ab", range(3, 6)) is False

    def test_min_and_max(self) -> None:
        assert MinSizePredicate().evaluate([1, 2], 2) is True
        assert MinSizePredicate().evaluate([1], 2) is False
        assert MaxSizePredicate().evaluate("ab", 2) is True
        assert MaxSizePredicate().evaluate("abc", 2) is False
        assert MaxSizePredicate().evaluate(ABSENT, 2) is False

    def test_bounds_checked(self) -> None:
        with pytest.raises(RuleDefinitionError):
            SizePredicate().check_params("3")
        with pytest.raises(RuleDefinitionError):
            MinSizePredicate().check_params(range(1, 2))
        with pytest.raises(RuleDefinitionError):
            MaxSizePredicate().check_params(True)


# ══════════════════════════════════════════════════════════════════════
# Inclusion
# ══════════════════════════════════════════════════════════════════════


class TestInclusionPredicates:
    def test_included_in(self) -> None:
        pred = IncludedInPredicate()
        assert pred.evaluate("a", ["a", "b"]) is True
        assert pred.evaluate("c", ["a", "b"]) is False
        assert pred.evaluate(None, [None]) is False

    def test_unhashable_value_against_set(self) -> None:
        assert IncludedInPredicate().evaluate([1], {1, 2}) is False
        assert ExcludedFromPredicate().evaluate([1], {1, 2}) is True

    def test_excluded_from(self) -> None:
        pred = ExcludedFromPredicate()
        assert pred.evaluate("c", ("a", "b")) is True
        assert pred.evaluate("a", ("a", "b")) is False
        assert pred.evaluate(ABSENT, ("a",)) is False

    def test_string_is_not_a_value_list(self) -> None:
        with pytest.raises(RuleDefinitionError):
            IncludedInPredicate().check_params("abc")


# ══════════════════════════════════════════════════════════════════════
# Comparison
# ══════════════════════════════════════════════════════════════════════


class TestComparisonPredicates:
    def test_eql(self) -> None:
        pred = EqlPredicate()
        assert pred.evaluate(1, 1) is True
        assert pred.evaluate("1", 1) is False
        assert pred.evaluate(ABSENT, None) is True

    def test_ordering(self) -> None:
        assert GtPredicate().evaluate(5, 3) is True
        assert GtPredicate().evaluate(3, 3) is False
        assert GteqPredicate().evaluate(3, 3) is True
        assert LtPredicate().evaluate(2, 3) is True
        assert LteqPredicate().evaluate(4, 3) is False

    def test_missing_and_incomparable_fail(self) -> None:
        """Incomparable values fail instead of raising."""
        assert GtPredicate().evaluate(None, 3) is False
        assert GtPredicate().evaluate(ABSENT, 3) is False
        assert LtPredicate().evaluate("a", 3) is False
        assert GteqPredicate().evaluate([], 0) is False
