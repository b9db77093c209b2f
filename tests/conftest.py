"""Shared fixtures for validation tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_validations import Evaluator, RuleSetBuilder
from cqrs_ddd_validations.predicates import build_default_registry


@pytest.fixture
def registry():
    """Default predicate registry for building rules."""
    return build_default_registry()


@pytest.fixture
def builder(registry) -> RuleSetBuilder:
    return RuleSetBuilder(registry=registry)


@pytest.fixture
def evaluator() -> Evaluator:
    return Evaluator()
