"""
Filter operator registry.

Maps every :class:`FilterOperator` symbol to the factory that builds its
predicate. Factories take the column and the operator argument:

- comparison operators take the raw value text verbatim (no coercion,
  the executor decides comparison semantics);
- ``$in`` takes the already split list of values;
- ``$null`` ignores its argument;
- ``$not`` takes the predicate it negates, or a raw value meaning
  "not equal to".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .operators import Comparator, FilterOperator
from .predicates import ColumnPredicate, NotPredicate, Predicate

if TYPE_CHECKING:
    from collections.abc import Callable

    OperatorFn = Callable[[str, Any], Predicate]


def _comparison(op: Comparator) -> OperatorFn:
    def factory(column: str, value: Any) -> Predicate:
        return ColumnPredicate(column, op, value)

    return factory


def _in(column: str, values: Any) -> Predicate:
    return ColumnPredicate(column, Comparator.IN, tuple(values))


def _is_null(column: str, _value: Any = None) -> Predicate:
    return ColumnPredicate(column, Comparator.IS_NULL)


def _not(column: str, arg: Any) -> Predicate:
    if isinstance(arg, Predicate):
        return NotPredicate(arg)
    return NotPredicate(ColumnPredicate(column, Comparator.EQ, arg))


_OPERATOR_FNS: dict[FilterOperator, OperatorFn] = {
    FilterOperator.EQ: _comparison(Comparator.EQ),
    FilterOperator.GT: _comparison(Comparator.GT),
    FilterOperator.GTE: _comparison(Comparator.GE),
    FilterOperator.IN: _in,
    FilterOperator.NULL: _is_null,
    FilterOperator.LT: _comparison(Comparator.LT),
    FilterOperator.LTE: _comparison(Comparator.LE),
    FilterOperator.NOT: _not,
}


def get_operator_fn(op: FilterOperator | str) -> OperatorFn:
    """
    Return the predicate factory for *op*.

    Raises:
        ValueError: If *op* is not a filter operator symbol.
    """
    return _OPERATOR_FNS[FilterOperator(op)]
