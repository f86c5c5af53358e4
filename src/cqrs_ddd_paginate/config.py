"""Per-endpoint paginate configuration."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .operators import Comparator, FilterOperator
from .predicates import AndGroup, ColumnPredicate, OrGroup, Predicate

SortBy = list[tuple[str, str]]


class PaginateConfig(BaseModel):
    """
    Whitelists and defaults for one list endpoint.

    Supplied once at setup and immutable afterwards.

    Attributes:
        sortable_columns: Columns a client may sort by. Required; an empty
            list makes every request fail with ``ConfigurationError``.
        searchable_columns: Columns matched by ``search``.
        max_limit: Upper bound for ``limit``.
        default_sort_by: Sort used when the request has no valid pair.
            Falls back to ``[(sortable_columns[0], "ASC")]``.
        default_limit: Limit used when the request has none.
        where: Static base criteria ANDed into every query. Accepts a
            :class:`Predicate`, a mapping ``{column: value | Predicate}``
            (all entries ANDed) or a sequence of those (alternatives ORed).
        filterable_columns: Column → operators allowed in
            ``filter.<column>``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    sortable_columns: list[str]
    searchable_columns: list[str] | None = None
    max_limit: int = Field(default=100, gt=0)
    default_sort_by: SortBy | None = None
    default_limit: int = Field(default=20, gt=0)
    where: Predicate | None = None
    filterable_columns: dict[str, frozenset[FilterOperator]] = Field(
        default_factory=dict
    )

    @field_validator("where", mode="before")
    @classmethod
    def _coerce_where(cls, value: Any) -> Predicate | None:
        return None if value is None else _where_to_predicate(value)


def _where_to_predicate(value: Any) -> Predicate:
    if isinstance(value, Predicate):
        return value
    if isinstance(value, Mapping):
        return _conditions_to_predicate(value)
    if isinstance(value, Sequence) and not isinstance(value, str):
        return OrGroup(*(_where_to_predicate(v) for v in value))
    raise ValueError(
        "where must be a Predicate, a column mapping or a sequence of those"
    )


def _conditions_to_predicate(conditions: Mapping[str, Any]) -> Predicate:
    predicates: list[Predicate] = []
    for column, value in conditions.items():
        if isinstance(value, Predicate):
            predicates.append(value)
        elif value is None:
            predicates.append(ColumnPredicate(column, Comparator.IS_NULL))
        else:
            predicates.append(ColumnPredicate(column, Comparator.EQ, value))
    return AndGroup(*predicates)
