"""Error, ErrorSet and Result: the structured validation report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class Error:
    """One failed rule.

    Two errors are equal when all four fields are equal::

        Error("name", "type?", int, None) == Error("name", "type?", int, None)
    """

    attribute: str
    rule_name: str
    expected: Any
    actual: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "attribute": self.attribute,
            "rule": self.rule_name,
            "expected": self.expected,
            "actual": self.actual,
        }


class ErrorSet:
    """Errors grouped by attribute, in the order they were recorded.

    Usage::

        errors.for_attribute("name")  # [Error(...)] or []
        errors["name"]                # same
        errors.is_empty()

    Sets are hashable so a frozen :class:`Result` is too. The hash covers
    attributes and error counts only, since recorded values may be
    unhashable.
    """

    def __init__(self, errors: Iterable[Error] = ()) -> None:
        grouped: dict[str, list[Error]] = {}
        for error in errors:
            grouped.setdefault(error.attribute, []).append(error)
        self._grouped: dict[str, tuple[Error, ...]] = {
            attribute: tuple(items) for attribute, items in grouped.items()
        }

    @property
    def attributes(self) -> tuple[str, ...]:
        """Attributes with at least one error, first-failure order."""
        return tuple(self._grouped)

    def for_attribute(self, attribute: str) -> list[Error]:
        """Errors for *attribute*; an empty list when there are none."""
        return list(self._grouped.get(attribute, ()))

    def __getitem__(self, attribute: str) -> list[Error]:
        return self.for_attribute(attribute)

    def is_empty(self) -> bool:
        return not self._grouped

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ErrorSet) -> ErrorSet:
        """Return a new set with *other*'s errors appended per attribute."""
        return ErrorSet([*self, *other])

    # ── Serialisation ────────────────────────────────────────────

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            attribute: [error.to_dict() for error in errors]
            for attribute, errors in self._grouped.items()
        }

    def __iter__(self) -> Iterator[Error]:
        for errors in self._grouped.values():
            yield from errors

    def __len__(self) -> int:
        return sum(len(errors) for errors in self._grouped.values())

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._grouped

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorSet):
            return NotImplemented
        return list(self._grouped.items()) == list(other._grouped.items())

    def __hash__(self) -> int:
        # actual values may be unhashable (lists, dicts)
        return hash(
            tuple((attr, len(errors)) for attr, errors in self._grouped.items())
        )

    def __repr__(self) -> str:
        return f"ErrorSet({list(self)!r})"


def default_error_set_factory() -> ErrorSet:
    return ErrorSet()


@dataclass(frozen=True)
class Result:
    """Outcome of one evaluation.

    ``success`` is derived from ``errors`` so the two can never disagree.
    """

    errors: ErrorSet = field(default_factory=default_error_set_factory)

    @property
    def success(self) -> bool:
        return self.errors.is_empty()

    @property
    def failed(self) -> bool:
        return not self.success

    def merge(self, other: Result) -> Result:
        """Combine two results, keeping every error."""
        return Result(errors=self.errors.merge(other.errors))

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "errors": self.errors.to_dict()}

    def __bool__(self) -> bool:
        return self.success
