from .builder import RuleSetBuilder
from .config import EvaluatorConfig
from .evaluator import Evaluator, evaluate
from .exceptions import (
    AttributeResolutionError,
    InvalidAttributePathError,
    PredicateEvaluationError,
    PredicateNotFoundError,
    RuleDefinitionError,
    ValidationEngineError,
)
from .factory import RuleSetFactory
from .names import PredicateName
from .predicates import build_default_registry
from .registry import FunctionPredicate, Predicate, PredicateRegistry
from .result import Error, ErrorSet, Result
from .rules import (
    AndPredicate,
    BasePredicateExpression,
    BoundPredicate,
    NotPredicate,
    OrPredicate,
    Rule,
    RuleSet,
)
from .sentinel import ABSENT
from .validator import Validator

__all__ = [
    # Core types
    "PredicateName",
    "Predicate",
    "FunctionPredicate",
    "PredicateRegistry",
    "build_default_registry",
    # Rules
    "BasePredicateExpression",
    "BoundPredicate",
    "AndPredicate",
    "OrPredicate",
    "NotPredicate",
    "Rule",
    "RuleSet",
    # Declaration
    "RuleSetBuilder",
    "RuleSetFactory",
    "Validator",
    # Evaluation
    "ABSENT",
    "Evaluator",
    "EvaluatorConfig",
    "evaluate",
    # Report
    "Error",
    "ErrorSet",
    "Result",
    # Exceptions
    "ValidationEngineError",
    "PredicateNotFoundError",
    "RuleDefinitionError",
    "InvalidAttributePathError",
    "PredicateEvaluationError",
    "AttributeResolutionError",
]
