"""Compile ``filter.<column>`` values into one predicate per column."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .operators import FilterOperator, is_operator
from .registry import get_operator_fn
from .tokens import get_filter_tokens

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from .predicates import Predicate

logger = logging.getLogger(__name__)


def parse_filter(
    filter_map: Mapping[str, str | list[str]],
    filterable_columns: Mapping[str, Collection[FilterOperator | str]],
) -> dict[str, Predicate]:
    """
    Compile raw filter statements into predicates.

    Columns missing from *filterable_columns* and statements using an
    unknown or disallowed operator are dropped without error. When several
    statements target the same column the last valid one wins; they are
    not ANDed together.

    Returns:
        Column → predicate, for the columns with at least one valid
        statement. The caller ANDs them in one bracketed group.
    """
    predicates: dict[str, Predicate] = {}

    for column, raw_input in filter_map.items():
        if column not in filterable_columns:
            logger.debug("Ignoring filter on non-filterable column %r", column)
            continue
        allowed = {getattr(op, "value", op) for op in filterable_columns[column]}
        statements = raw_input if isinstance(raw_input, list) else [raw_input]

        for raw in statements:
            predicate = _compile_statement(column, raw, allowed)
            if predicate is not None:
                predicates[column] = predicate

    return predicates


def _compile_statement(
    column: str,
    raw: str,
    allowed: set[str],
) -> Predicate | None:
    tokens = get_filter_tokens(raw)
    if not tokens:
        logger.debug("Ignoring malformed filter %r on %r", raw, column)
        return None
    outer, inner, value = tokens

    if not is_operator(inner) or inner not in allowed:
        logger.debug("Ignoring operator %r on %r: not allowed", inner, column)
        return None
    if is_operator(outer) and outer not in allowed:
        logger.debug("Ignoring operator %r on %r: not allowed", outer, column)
        return None
    if is_operator(outer) and outer != FilterOperator.NOT.value:
        logger.debug("Ignoring operator %r on %r: only $not wraps", outer, column)
        return None

    inner_op = FilterOperator(inner)
    is_in = inner_op is FilterOperator.IN and value is not None
    arg = value.split(",") if is_in else value
    predicate = get_operator_fn(inner_op)(column, arg)
    if is_operator(outer):
        predicate = get_operator_fn(FilterOperator(outer))(column, predicate)
    return predicate
