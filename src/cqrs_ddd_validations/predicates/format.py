"""String predicate: format?."""

from __future__ import annotations

import re
from typing import Any

from ..exceptions import RuleDefinitionError
from ..names import PredicateName
from ..registry import Predicate


class FormatPredicate(Predicate):
    """True when a string fully matches the pattern (str or compiled)."""

    @property
    def name(self) -> PredicateName:
        return PredicateName.FORMAT

    @property
    def arity(self) -> int:
        return 1

    def check_params(self, *params: Any) -> None:
        (pattern,) = params
        if isinstance(pattern, re.Pattern):
            return
        if not isinstance(pattern, str):
            raise RuleDefinitionError(
                f"format? expects a regex, got {pattern!r}",
                path=PredicateName.FORMAT.value,
            )
        try:
            re.compile(pattern)
        except re.error as exc:
            raise RuleDefinitionError(
                f"format? pattern {pattern!r} does not compile: {exc}",
                path=PredicateName.FORMAT.value,
            ) from exc

    def evaluate(self, value: Any, *params: Any) -> bool:
        (pattern,) = params
        if not isinstance(value, str):
            return False
        return bool(re.fullmatch(pattern, value))
