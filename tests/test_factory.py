"""Tests for RuleSetFactory dict / JSON parsing."""

from __future__ import annotations

import datetime
import json
from decimal import Decimal

import pytest

from cqrs_ddd_validations import (
    AndPredicate,
    Error,
    Evaluator,
    NotPredicate,
    OrPredicate,
    PredicateNotFoundError,
    RuleDefinitionError,
    RuleSetFactory,
)
from cqrs_ddd_validations.factory import resolve_type_alias


@pytest.fixture
def document() -> dict:
    return {
        "rules": [
            {"attribute": "name", "predicate": "type?", "params": ["integer"]},
            {
                "attribute": "age",
                "op": "and",
                "operands": [
                    {"predicate": "filled?"},
                    {"predicate": "gteq?", "params": [18]},
                ],
            },
        ]
    }


def test_from_dict(document, registry):
    rules = RuleSetFactory.from_dict(document, registry=registry)

    assert rules.attributes == ("name", "age")
    name_rule, age_rule = rules
    assert name_rule.predicate.params == (int,)
    assert isinstance(age_rule.predicate, AndPredicate)


def test_from_dict_evaluates(document):
    rules = RuleSetFactory.from_dict(document)
    result = Evaluator().evaluate(rules, {"name": "1", "age": 16})

    assert result.errors["name"] == []
    assert result.errors["age"] == [Error("age", "gteq?", 18, 16)]


def test_from_json(document):
    rules = RuleSetFactory.from_json(json.dumps(document))
    assert len(rules) == 2


def test_or_and_not_groups():
    rules = RuleSetFactory.from_dict(
        {
            "rules": [
                {
                    "attribute": "nick",
                    "op": "or",
                    "operands": [
                        {"predicate": "none?"},
                        {"op": "not", "operands": [{"predicate": "empty?"}]},
                    ],
                }
            ]
        }
    )
    (rule,) = rules
    assert isinstance(rule.predicate, OrPredicate)
    assert isinstance(rule.predicate.operands[1], NotPredicate)


def test_single_operand_group_collapses():
    rules = RuleSetFactory.from_dict(
        {"rules": [{"attribute": "a", "op": "and", "operands": [{"predicate": "filled?"}]}]}
    )
    assert next(iter(rules)).predicate.name == "filled?"


# -- Errors ------------------------------------------------------------------


@pytest.mark.parametrize(
    "data",
    [
        {"rules": [{"attribute": "a"}]},
        {"rules": [{"attribute": "a", "predicate": "filled?", "op": "and"}]},
        {"rules": [{"attribute": "a", "op": "and", "params": [1]}]},
        {"rules": [{"predicate": "filled?"}]},
        {"rules": [{"attribute": "a", "predicate": "filled?", "extra": 1}]},
        {"rules": "nope"},
    ],
)
def test_malformed_documents(data):
    with pytest.raises(RuleDefinitionError) as exc_info:
        RuleSetFactory.from_dict(data)
    assert exc_info.value.path


def test_not_group_needs_one_operand():
    data = {
        "rules": [
            {
                "attribute": "a",
                "op": "not",
                "operands": [{"predicate": "filled?"}, {"predicate": "none?"}],
            }
        ]
    }
    with pytest.raises(RuleDefinitionError, match="exactly one"):
        RuleSetFactory.from_dict(data)


def test_empty_group():
    with pytest.raises(RuleDefinitionError, match="no operands"):
        RuleSetFactory.from_dict({"rules": [{"attribute": "a", "op": "or"}]})


def test_unknown_predicate():
    with pytest.raises(PredicateNotFoundError):
        RuleSetFactory.from_dict({"rules": [{"attribute": "a", "predicate": "tpye?"}]})


def test_invalid_json():
    with pytest.raises(RuleDefinitionError, match="Invalid JSON"):
        RuleSetFactory.from_json("{not json")
    with pytest.raises(RuleDefinitionError, match="must be an object"):
        RuleSetFactory.from_json("[]")


# -- Type aliases ------------------------------------------------------------


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        ("integer", int),
        ("Int", int),
        ("string", str),
        ("decimal", Decimal),
        ("datetime", datetime.datetime),
        ("hash", dict),
        (float, float),
    ],
)
def test_resolve_type_alias(alias, expected):
    assert resolve_type_alias(alias) is expected


def test_unknown_type_alias():
    with pytest.raises(RuleDefinitionError, match="Unknown type name"):
        RuleSetFactory.from_dict(
            {"rules": [{"attribute": "a", "predicate": "type?", "params": ["bigint"]}]}
        )
