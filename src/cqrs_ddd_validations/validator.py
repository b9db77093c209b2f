"""Validator: binds a class-level RuleSet to a record."""

from __future__ import annotations

from typing import Any, ClassVar

from .evaluator import Evaluator
from .exceptions import RuleDefinitionError
from .result import Result
from .rules import RuleSet


class Validator:
    """Base class for declaring a validator type.

    Subclasses declare their rules once; every instance validates one
    record against them.

    Usage::

        class UserValidator(Validator):
            rules = RuleSetBuilder().validates("name", "type?", int).build()

        result = UserValidator({"name": "1"}).validate()
    """

    rules: ClassVar[RuleSet] = RuleSet()
    evaluator: ClassVar[Evaluator] = Evaluator()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(cls.rules, RuleSet):
            raise RuleDefinitionError(
                f"{cls.__name__}.rules must be a RuleSet, "
                f"got {type(cls.rules).__name__}"
            )

    def __init__(self, record: Any) -> None:
        self.record = record

    def validate(self) -> Result:
        return type(self).evaluator.evaluate(type(self).rules, self.record)
