"""
SQLAlchemy operator compilation strategy.

Each :class:`Comparator` is an isolated ``SQLAlchemyOperator`` that turns a
column and a condition value into a ``ColumnElement[bool]``, structured in
the same strategy pattern as the in-memory evaluator.

Condition values arrive as text; they are cast to the column's Python type
when the column type declares one, so that ``"18"`` binds as an integer
against an ``Integer`` column.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, cast

from ...evaluator import coerce_value
from ...operators import Comparator

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


def coerce_for_column(column: Any, value: Any) -> Any:
    """Cast *value* to the Python type of *column*, if it has one."""
    try:
        python_type = column.type.python_type
    except (AttributeError, NotImplementedError):
        return value
    return coerce_value(python_type, value)


class SQLAlchemyOperator(ABC):
    """
    Strategy interface for compiling a comparator
    into a SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def name(self) -> Comparator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Build a SQLAlchemy filter clause.

        Args:
            column: A SQLAlchemy column or instrumented attribute.
            value: The condition value from the predicate.
        """
        ...


class SQLAlchemyOperatorRegistry:
    """Registry of ``SQLAlchemyOperator`` instances keyed by :class:`Comparator`."""

    def __init__(self) -> None:
        self._operators: dict[Comparator, SQLAlchemyOperator] = {}

    def register(self, operator: SQLAlchemyOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: SQLAlchemyOperator) -> None:
        for op in operators:
            self.register(op)

    def get(self, name: Comparator) -> SQLAlchemyOperator | None:
        return self._operators.get(name)

    def apply(self, name: Comparator, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Look up the operator and apply.

        Raises:
            ValueError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise ValueError(f"Unsupported operator for SQLAlchemy: {name}")
        return op.apply(column, value)


class EqualOperator(SQLAlchemyOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.EQ

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column == coerce_for_column(column, value))


class GreaterThanOperator(SQLAlchemyOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.GT

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column > coerce_for_column(column, value))


class GreaterEqualOperator(SQLAlchemyOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.GE

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column >= coerce_for_column(column, value))


class LessThanOperator(SQLAlchemyOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.LT

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column < coerce_for_column(column, value))


class LessEqualOperator(SQLAlchemyOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.LE

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column <= coerce_for_column(column, value))


class InOperator(SQLAlchemyOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.IN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        values = [coerce_for_column(column, v) for v in value]
        return cast("ColumnElement[bool]", column.in_(values))


class IsNullOperator(SQLAlchemyOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.IS_NULL

    def apply(self, column: Any, _value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.is_(None))


class IContainsOperator(SQLAlchemyOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.ICONTAINS

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.ilike(f"%{value}%"))


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with all built-in SQLAlchemy operators."""
    registry = SQLAlchemyOperatorRegistry()
    registry.register_all(
        EqualOperator(),
        GreaterThanOperator(),
        GreaterEqualOperator(),
        LessThanOperator(),
        LessEqualOperator(),
        InOperator(),
        IsNullOperator(),
        IContainsOperator(),
    )
    return registry


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()
