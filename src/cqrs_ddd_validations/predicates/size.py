"""Size predicates: size?, min_size?, max_size?."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from ..exceptions import RuleDefinitionError
from ..names import PredicateName
from ..registry import Predicate


def _check_bound(name: PredicateName, bound: Any, *, allow_range: bool) -> None:
    if isinstance(bound, int) and not isinstance(bound, bool):
        return
    if allow_range and isinstance(bound, range):
        return
    expected = "an int or a range" if allow_range else "an int"
    raise RuleDefinitionError(
        f"{name.value} expects {expected}, got {bound!r}",
        path=name.value,
    )


class SizePredicate(Predicate):
    """Exact length, or length within a ``range``."""

    @property
    def name(self) -> PredicateName:
        return PredicateName.SIZE

    @property
    def arity(self) -> int:
        return 1

    def check_params(self, *params: Any) -> None:
        _check_bound(self.name, params[0], allow_range=True)

    def evaluate(self, value: Any, *params: Any) -> bool:
        (size,) = params
        if not isinstance(value, Sized):
            return False
        if isinstance(size, range):
            return len(value) in size
        return len(value) == size


class MinSizePredicate(Predicate):
    @property
    def name(self) -> PredicateName:
        return PredicateName.MIN_SIZE

    @property
    def arity(self) -> int:
        return 1

    def check_params(self, *params: Any) -> None:
        _check_bound(self.name, params[0], allow_range=False)

    def evaluate(self, value: Any, *params: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        return len(value) >= params[0]


class MaxSizePredicate(Predicate):
    @property
    def name(self) -> PredicateName:
        return PredicateName.MAX_SIZE

    @property
    def arity(self) -> int:
        return 1

    def check_params(self, *params: Any) -> None:
        _check_bound(self.name, params[0], allow_range=False)

    def evaluate(self, value: Any, *params: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        return len(value) <= params[0]
