"""
Predicate tree consumed by query executors.

Predicates are immutable values built fresh for every request. They only
describe the condition; evaluation belongs to the executor, which walks the
``to_dict()`` AST::

    {"op": ">=", "attr": "age", "val": "18"}
    {"op": "or", "conditions": [...]}
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .operators import Comparator


class Predicate(ABC):
    """Base class for predicates with logic operator support."""

    def __and__(self, other: Predicate) -> AndGroup:
        return AndGroup(self, other)

    def __or__(self, other: Predicate) -> OrGroup:
        return OrGroup(self, other)

    def __invert__(self) -> NotPredicate:
        return NotPredicate(self)

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialise to the executor AST."""
        ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Predicate):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(repr(self.to_dict()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"


class ColumnPredicate(Predicate):
    """A single comparison bound to one column."""

    def __init__(self, column: str, op: Comparator | str, value: Any = None) -> None:
        self.column = column
        self.op = Comparator(op) if isinstance(op, str) else op
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op.value,
            "attr": self.column,
            "val": list(self.value) if isinstance(self.value, tuple) else self.value,
        }


class NotPredicate(Predicate):
    """Logical negation of another predicate."""

    def __init__(self, predicate: Predicate) -> None:
        self.predicate = predicate

    @property
    def column(self) -> str | None:
        return getattr(self.predicate, "column", None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": Comparator.NOT.value,
            "conditions": [self.predicate.to_dict()],
        }


class AndGroup(Predicate):
    """Bracketed group of predicates combined with AND.

    An empty group is a no-op that every candidate satisfies.
    """

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates = predicates

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": Comparator.AND.value,
            "conditions": [p.to_dict() for p in self.predicates],
        }


class OrGroup(Predicate):
    """Bracketed group of predicates combined with OR."""

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates = predicates

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": Comparator.OR.value,
            "conditions": [p.to_dict() for p in self.predicates],
        }
