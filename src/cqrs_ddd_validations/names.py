from enum import Enum


class PredicateName(str, Enum):
    """Names of the built-in predicates."""

    # Type
    TYPE = "type?"

    # Presence
    NONE = "none?"
    FILLED = "filled?"
    EMPTY = "empty?"

    # String
    FORMAT = "format?"

    # Size
    SIZE = "size?"
    MIN_SIZE = "min_size?"
    MAX_SIZE = "max_size?"

    # Inclusion
    INCLUDED_IN = "included_in?"
    EXCLUDED_FROM = "excluded_from?"

    # Comparison
    EQL = "eql?"
    GT = "gt?"
    GTEQ = "gteq?"
    LT = "lt?"
    LTEQ = "lteq?"

    # Logical combinators (error attribution only)
    AND = "and"
    OR = "or"
    NOT = "not"
