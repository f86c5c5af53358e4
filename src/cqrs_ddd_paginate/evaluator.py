"""
In-memory predicate evaluation strategy.

Provides the MemoryOperator protocol, a registry that maps
:class:`Comparator` → evaluation function, and :func:`evaluate` which walks
a predicate AST against one candidate object.

Filter values arrive as raw query-string text. Before comparing, the
condition value is cast to the type of the field value when that is
possible (``"18"`` against an ``int`` field compares as ``18``); otherwise
the text is compared as-is.
"""

from __future__ import annotations

import contextlib
import datetime
import decimal
import uuid
from abc import ABC, abstractmethod
from typing import Any

from .operators import Comparator


class MemoryOperator(ABC):
    """
    Strategy interface for in-memory operator evaluation.

    Each operator is an isolated class with a single ``evaluate`` method.
    """

    @property
    @abstractmethod
    def name(self) -> Comparator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """
        Evaluate the operator against concrete values.

        Args:
            field_value: The actual value resolved from the candidate object.
            condition_value: The value carried by the predicate.

        Returns:
            True if the condition is satisfied.
        """
        ...


class MemoryOperatorRegistry:
    """
    Registry of MemoryOperator instances keyed by Comparator.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualOperator())

        result = registry.evaluate(Comparator.EQ, actual, expected)
    """

    def __init__(self) -> None:
        self._operators: dict[Comparator, MemoryOperator] = {}

    def register(self, operator: MemoryOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        for op in operators:
            self.register(op)

    def get(self, name: Comparator) -> MemoryOperator | None:
        return self._operators.get(name)

    def evaluate(
        self,
        name: Comparator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Look up the operator and evaluate.

        Raises:
            ValueError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise ValueError(f"Unsupported operator for in-memory evaluation: {name}")
        return op.evaluate(field_value, condition_value)


# ---------------------------------------------------------------------------
# Value coercion
# ---------------------------------------------------------------------------

_TRUE = frozenset({"true", "1", "yes"})
_FALSE = frozenset({"false", "0", "no"})
_NUMERIC_TYPES = (int, float, decimal.Decimal, uuid.UUID)


def coerce_value(python_type: type[Any], value: Any) -> Any:
    """Cast text *value* to *python_type*; return it unchanged on failure."""
    if not isinstance(value, str) or issubclass(python_type, str):
        return value
    if issubclass(python_type, bool):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        return value
    if issubclass(python_type, datetime.date):
        with contextlib.suppress(ValueError):
            return python_type.fromisoformat(value)
        return value
    if issubclass(python_type, _NUMERIC_TYPES):
        with contextlib.suppress(TypeError, ValueError, ArithmeticError):
            return python_type(value)
    return value


def coerce_to_field(field_value: Any, condition_value: Any) -> Any:
    """Cast text *condition_value* to the type of *field_value* when possible."""
    if field_value is None:
        return condition_value
    return coerce_value(type(field_value), condition_value)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class _ComparisonOperator(MemoryOperator):
    """Ordering comparison; ``None`` and incomparable types never match."""

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        expected = coerce_to_field(field_value, condition_value)
        try:
            return self._compare(field_value, expected)
        except TypeError:
            return False

    @abstractmethod
    def _compare(self, left: Any, right: Any) -> bool: ...


class EqualOperator(MemoryOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.EQ

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return bool(field_value == coerce_to_field(field_value, condition_value))


class GreaterThanOperator(_ComparisonOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.GT

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left > right)


class GreaterEqualOperator(_ComparisonOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.GE

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left >= right)


class LessThanOperator(_ComparisonOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.LT

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left < right)


class LessEqualOperator(_ComparisonOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.LE

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left <= right)


class InOperator(MemoryOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return any(
            field_value == coerce_to_field(field_value, v) for v in condition_value
        )


class IsNullOperator(MemoryOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.IS_NULL

    def evaluate(self, field_value: Any, _condition_value: Any) -> bool:
        return field_value is None


class IContainsOperator(MemoryOperator):
    @property
    def name(self) -> Comparator:
        return Comparator.ICONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(condition_value).lower() in str(field_value).lower()


def build_default_registry() -> MemoryOperatorRegistry:
    """Create a registry with every built-in in-memory operator."""
    registry = MemoryOperatorRegistry()
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


# ---------------------------------------------------------------------------
# AST evaluation
# ---------------------------------------------------------------------------


def resolve_field(obj: Any, path: str) -> Any:
    """
    Resolve a dot-separated attribute path on *obj*.

    Works on mappings and on plain objects (``address.city``).
    """
    for part in path.split("."):
        if obj is None:
            return None
        obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
    return obj


def evaluate(
    data: dict[str, Any],
    candidate: Any,
    registry: MemoryOperatorRegistry,
) -> bool:
    """
    Evaluate a predicate AST (``Predicate.to_dict()``) against *candidate*.

    Follows SQL three-valued logic. A comparison on a missing (``None``)
    field is unknown and stays unknown under ``NOT``; only a definite match
    selects the candidate. ``is_null`` is always definite.
    """
    return _evaluate(data, candidate, registry) is True


def _evaluate(
    data: dict[str, Any],
    candidate: Any,
    registry: MemoryOperatorRegistry,
) -> bool | None:
    op_str = data.get("op", "").lower()
    conditions = data.get("conditions", [])

    if op_str == Comparator.AND:
        return _all([_evaluate(c, candidate, registry) for c in conditions])
    if op_str == Comparator.OR:
        results = [_evaluate(c, candidate, registry) for c in conditions]
        if any(r is True for r in results):
            return True
        return None if any(r is None for r in results) else False
    if op_str == Comparator.NOT:
        inner = _all([_evaluate(c, candidate, registry) for c in conditions])
        return None if inner is None else not inner

    comparator = Comparator(op_str)
    field_value = resolve_field(candidate, data["attr"])
    if field_value is None and comparator is not Comparator.IS_NULL:
        return None
    return registry.evaluate(comparator, field_value, data.get("val"))


def _all(results: list[bool | None]) -> bool | None:
    if any(r is False for r in results):
        return False
    return None if any(r is None for r in results) else True
