"""
Compile a query plan into SQLAlchemy constructs.

``build_sqla_filter`` walks the predicate AST (``Predicate.to_dict()``) and
delegates leaf compilation to a :class:`SQLAlchemyOperatorRegistry`.
``apply_query_plan`` adds the plan's ordering and limit/offset to a
``Select``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, Select, and_, asc, desc, false, not_, or_, true

from ...exceptions import ExecutorError
from ...operators import Comparator
from .strategy import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from ...plan import QueryPlan
    from .strategy import SQLAlchemyOperatorRegistry


def build_sqla_filter(
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a predicate dictionary.

    Raises:
        ExecutorError: If a predicate names a column the model does not have
            or uses an operator the registry does not know.
    """
    return _compile_node(model, data, registry or DEFAULT_SQLA_REGISTRY)


def apply_query_plan(
    stmt: Select[Any],
    model: type[Any],
    plan: QueryPlan,
) -> Select[Any]:
    """Apply ordering and limit/offset of *plan* to *stmt*."""
    order_clauses = [
        (desc if direction == "DESC" else asc)(_column(model, column))
        for column, direction in plan.order_by
    ]
    if order_clauses:
        stmt = stmt.order_by(*order_clauses)
    if plan.limit is not None:
        stmt = stmt.limit(plan.limit)
    if plan.offset is not None:
        stmt = stmt.offset(plan.offset)
    return stmt


def _column(model: type[Any], name: str) -> Any:
    column = getattr(model, name, None)
    if column is None:
        raise ExecutorError(
            f"Model {model.__name__} has no column {name!r}", column=name
        )
    return column


def _compile_node(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool]:
    op_str = data.get("op", "").lower()
    conditions = data.get("conditions", [])

    if op_str == Comparator.AND:
        return and_(true(), *(_compile_node(model, c, registry) for c in conditions))
    if op_str == Comparator.OR:
        return or_(false(), *(_compile_node(model, c, registry) for c in conditions))
    if op_str == Comparator.NOT:
        return not_(and_(*(_compile_node(model, c, registry) for c in conditions)))

    column = _column(model, data["attr"])
    try:
        return registry.apply(Comparator(op_str), column, data.get("val"))
    except ValueError as exc:
        raise ExecutorError(str(exc), column=data["attr"]) from exc
