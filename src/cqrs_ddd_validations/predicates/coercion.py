"""
Type-family decision table used by ``type?``.

A value satisfies a target type when the value's category lists that
target as accepted. The table is deliberately lax for numbers: a numeric
string, a float or a Decimal all satisfy ``int`` because only the numeric
family is checked, not the magnitude. The ``numbers`` ABCs
(``Number``, ``Real``, ``Integral`` ...) are numeric targets too.

Targets outside the table fall back to a plain ``isinstance`` check.
"""

from __future__ import annotations

import datetime
import math
import numbers
import re
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from ..sentinel import is_blank, is_missing


class ValueCategory(str, Enum):
    """Runtime category of a value as seen by the type predicate."""

    MISSING = "missing"
    BLANK = "blank"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    NUMERIC_STRING = "numeric_string"
    STRING = "string"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"
    SEQUENCE = "sequence"
    SET = "set"
    MAPPING = "mapping"
    NON_FINITE = "non_finite"
    OTHER = "other"


_NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

# The numbers ABCs belong to the numeric family, so "1" satisfies Number
_NUMERIC_TARGETS: frozenset[type] = frozenset(
    {
        int,
        float,
        Decimal,
        str,
        numbers.Number,
        numbers.Complex,
        numbers.Real,
        numbers.Rational,
        numbers.Integral,
    }
)

_ACCEPTED: dict[ValueCategory, frozenset[type]] = {
    ValueCategory.MISSING: frozenset(),
    ValueCategory.BLANK: frozenset(),
    ValueCategory.BOOLEAN: frozenset({bool}),
    ValueCategory.INTEGER: _NUMERIC_TARGETS,
    ValueCategory.FLOAT: _NUMERIC_TARGETS,
    ValueCategory.DECIMAL: _NUMERIC_TARGETS,
    ValueCategory.NUMERIC_STRING: _NUMERIC_TARGETS,
    ValueCategory.STRING: frozenset({str}),
    ValueCategory.DATETIME: frozenset({datetime.datetime, datetime.date}),
    ValueCategory.DATE: frozenset({datetime.date}),
    ValueCategory.TIME: frozenset({datetime.time}),
    ValueCategory.SEQUENCE: frozenset({list, tuple}),
    ValueCategory.SET: frozenset({set, frozenset}),
    ValueCategory.MAPPING: frozenset({dict}),
    ValueCategory.NON_FINITE: frozenset(),
    ValueCategory.OTHER: frozenset(),
}

KNOWN_TARGETS: frozenset[type] = frozenset().union(*_ACCEPTED.values())


def is_numeric_string(value: str) -> bool:
    """True for strings such as ``"1"``, ``"-2.5"`` or ``"1e3"``."""
    return bool(_NUMERIC_RE.match(value.strip()))


def category_of(value: Any) -> ValueCategory:
    """Classify *value* for the decision table."""
    if is_missing(value):
        return ValueCategory.MISSING
    if is_blank(value):
        return ValueCategory.BLANK
    # bool before int, datetime before date: both are subclasses
    if isinstance(value, bool):
        return ValueCategory.BOOLEAN
    if isinstance(value, int):
        return ValueCategory.INTEGER
    if isinstance(value, float):
        return ValueCategory.FLOAT if math.isfinite(value) else ValueCategory.NON_FINITE
    if isinstance(value, Decimal):
        return ValueCategory.DECIMAL if value.is_finite() else ValueCategory.NON_FINITE
    if isinstance(value, str):
        if is_numeric_string(value):
            return ValueCategory.NUMERIC_STRING
        return ValueCategory.STRING
    if isinstance(value, datetime.datetime):
        return ValueCategory.DATETIME
    if isinstance(value, datetime.date):
        return ValueCategory.DATE
    if isinstance(value, datetime.time):
        return ValueCategory.TIME
    if isinstance(value, Mapping):
        return ValueCategory.MAPPING
    if isinstance(value, list | tuple):
        return ValueCategory.SEQUENCE
    if isinstance(value, set | frozenset):
        return ValueCategory.SET
    return ValueCategory.OTHER


def accepted_targets(value: Any) -> frozenset[type]:
    """Return the table targets *value* satisfies."""
    return _ACCEPTED[category_of(value)]


def is_coercible(value: Any, target: type) -> bool:
    """
    Decide whether *value* satisfies the *target* type.

    Missing and blank values never satisfy any target. Targets listed in
    the table are answered by the table alone; any other target uses
    ``isinstance``.
    """
    category = category_of(value)
    if category in (ValueCategory.MISSING, ValueCategory.BLANK):
        return False
    if target in KNOWN_TARGETS:
        return target in _ACCEPTED[category]
    return isinstance(value, target)
