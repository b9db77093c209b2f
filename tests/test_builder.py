"""Tests for the RuleSetBuilder fluent API."""

from __future__ import annotations

import pytest

from cqrs_ddd_validations import (
    AndPredicate,
    BoundPredicate,
    PredicateName,
    PredicateNotFoundError,
    Rule,
    RuleDefinitionError,
    RuleSet,
    RuleSetBuilder,
)

# -- Single rule -------------------------------------------------------------


def test_validates_builds_one_rule(builder: RuleSetBuilder):
    rules = builder.validates("name", "type?", int).build()

    assert isinstance(rules, RuleSet)
    assert len(rules) == 1
    (rule,) = rules
    assert rule.attribute == "name"
    assert isinstance(rule.predicate, BoundPredicate)
    assert rule.predicate.name == "type?"
    assert rule.predicate.params == (int,)


def test_validates_with_enum_name(builder: RuleSetBuilder):
    rules = builder.validates("name", PredicateName.FILLED).build()
    assert next(iter(rules)).predicate.name == "filled?"


# -- Composition -------------------------------------------------------------


def test_rule_with_composite(builder: RuleSetBuilder):
    expr = builder.predicate("filled?") & builder.predicate("type?", int)
    rules = builder.rule("age", expr).build()

    assert isinstance(next(iter(rules)).predicate, AndPredicate)


def test_extend(builder: RuleSetBuilder):
    base = RuleSetBuilder().validates("a", "filled?").build()
    rules = builder.extend(base).validates("b", "filled?").build()
    assert rules.attributes == ("a", "b")


# -- Definition errors -------------------------------------------------------


def test_unknown_predicate_raises_at_build_time(builder: RuleSetBuilder):
    with pytest.raises(PredicateNotFoundError, match="Did you mean"):
        builder.validates("name", "filed?")


def test_wrong_parameter_count(builder: RuleSetBuilder):
    with pytest.raises(RuleDefinitionError):
        builder.validates("name", "type?")


def test_bad_attribute_path(builder: RuleSetBuilder):
    with pytest.raises(RuleDefinitionError):
        builder.validates("", "filled?")


# -- Lifecycle ---------------------------------------------------------------


def test_built_rule_sets_are_independent_snapshots(builder: RuleSetBuilder):
    first = builder.validates("a", "filled?").build()
    second = builder.validates("b", "filled?").build()

    assert len(first) == 1
    assert len(second) == 2


def test_reset(builder: RuleSetBuilder):
    builder.validates("a", "filled?")
    assert len(builder.reset().build()) == 0


def test_custom_registry_predicates(registry):
    registry.register_func("even?", lambda v: v % 2 == 0)
    builder = RuleSetBuilder(registry=registry)

    rules = builder.validates("n", "even?").build()

    assert builder.registry is registry
    assert rules == RuleSet([Rule("n", BoundPredicate(registry.resolve("even?")))])
