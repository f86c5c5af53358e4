from __future__ import annotations

from enum import Enum
from typing import Any


class FilterOperator(str, Enum):
    """Operator symbols accepted in ``filter.<column>`` query values."""

    EQ = "$eq"
    GT = "$gt"
    GTE = "$gte"
    IN = "$in"
    NULL = "$null"
    LT = "$lt"
    LTE = "$lte"
    NOT = "$not"


class Comparator(str, Enum):
    """Operators of the predicate tree handed to executors."""

    # Comparison
    EQ = "="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    IN = "in"

    # Null check
    IS_NULL = "is_null"

    # Search
    ICONTAINS = "icontains"

    # Logical operators
    AND = "and"
    OR = "or"
    NOT = "not"


_FILTER_OPERATORS: frozenset[str] = frozenset(m.value for m in FilterOperator)


def is_operator(value: Any) -> bool:
    """Return True when *value* is exactly one of the filter operator symbols."""
    symbol = getattr(value, "value", value)
    return isinstance(symbol, str) and symbol in _FILTER_OPERATORS
