"""
Build rule sets from dictionary / JSON documents.

Document shape::

    {
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

The ``type?`` parameter may be given as a type name; see ``TYPE_ALIASES``.
"""

from __future__ import annotations

import datetime
import json
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import RuleDefinitionError
from .names import PredicateName
from .predicates import build_default_registry
from .registry import predicate_key
from .rules import (
    AndPredicate,
    BoundPredicate,
    NotPredicate,
    OrPredicate,
    Rule,
    RuleSet,
)

if TYPE_CHECKING:
    from .registry import PredicateRegistry
    from .rules import BasePredicateExpression

TYPE_ALIASES: dict[str, type] = {
    "string": str,
    "str": str,
    "text": str,
    "integer": int,
    "int": int,
    "float": float,
    "double": float,
    "decimal": Decimal,
    "numeric": Decimal,
    "boolean": bool,
    "bool": bool,
    "date": datetime.date,
    "datetime": datetime.datetime,
    "time": datetime.time,
    "list": list,
    "array": list,
    "dict": dict,
    "hash": dict,
    "object": dict,
}


class PredicateNode(BaseModel):
    """Either a named predicate with params, or a logical group."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    predicate: str | None = None
    params: list[Any] = Field(default_factory=list)
    op: Literal["and", "or", "not"] | None = None
    operands: list[PredicateNode] = Field(default_factory=list)

    @model_validator(mode="after")
    def _predicate_or_op(self) -> PredicateNode:
        if (self.predicate is None) == (self.op is None):
            raise ValueError("exactly one of 'predicate' or 'op' is required")
        if self.op is not None and self.params:
            raise ValueError("'params' is only valid with 'predicate'")
        if self.predicate is not None and self.operands:
            raise ValueError("'operands' is only valid with 'op'")
        return self


class RuleNode(PredicateNode):
    attribute: str


class RuleSetDocument(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    rules: list[RuleNode] = Field(default_factory=list)


PredicateNode.model_rebuild()


class RuleSetFactory:
    """Creates rule sets from dictionary / JSON representations."""

    @staticmethod
    def from_dict(
        data: dict[str, Any],
        *,
        registry: PredicateRegistry | None = None,
    ) -> RuleSet:
        """
        Build a RuleSet from a rule document.

        Raises:
            RuleDefinitionError: If the document is malformed.
            PredicateNotFoundError: If a predicate name is not registered.
        """
        try:
            document = RuleSetDocument.model_validate(data)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
            raise RuleDefinitionError(
                f"Invalid rule document: {first.get('msg', 'invalid')}",
                path=loc,
            ) from exc

        registry = registry if registry is not None else build_default_registry()
        return RuleSet(
            Rule(
                node.attribute,
                _build_expression(node, registry, path=f"rules.{index}"),
            )
            for index, node in enumerate(document.rules)
        )

    @staticmethod
    def from_json(
        text: str,
        *,
        registry: PredicateRegistry | None = None,
    ) -> RuleSet:
        """Parse a JSON string and build a RuleSet."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RuleDefinitionError(f"Invalid JSON: {exc}", path="<root>") from exc

        if not isinstance(data, dict):
            raise RuleDefinitionError(
                "Top-level JSON value must be an object", path="<root>"
            )
        return RuleSetFactory.from_dict(data, registry=registry)


def resolve_type_alias(value: Any, *, path: str = "<root>") -> type:
    """Map a type name such as ``"integer"`` to its Python type."""
    if isinstance(value, type):
        return value
    if isinstance(value, str) and value.lower() in TYPE_ALIASES:
        return TYPE_ALIASES[value.lower()]
    raise RuleDefinitionError(
        f"Unknown type name {value!r}. Known: {', '.join(sorted(TYPE_ALIASES))}",
        path=path,
    )


# -- internals ---------------------------------------------------------------


def _build_expression(
    node: PredicateNode,
    registry: PredicateRegistry,
    *,
    path: str,
) -> BasePredicateExpression:
    if node.op is None:
        name = node.predicate or ""
        params = list(node.params)
        if predicate_key(name) == PredicateName.TYPE.value and params:
            params[0] = resolve_type_alias(params[0], path=f"{path}.params.0")
        return BoundPredicate(registry.resolve(name), *params)

    operands = [
        _build_expression(child, registry, path=f"{path}.operands.{i}")
        for i, child in enumerate(node.operands)
    ]
    if not operands:
        raise RuleDefinitionError(f"'{node.op}' group has no operands", path=path)
    if node.op == "not":
        if len(operands) != 1:
            raise RuleDefinitionError(
                "'not' group must contain exactly one operand", path=path
            )
        return NotPredicate(operands[0])
    if len(operands) == 1:
        return operands[0]
    if node.op == "and":
        return AndPredicate(*operands)
    return OrPredicate(*operands)
