"""
Query plan: everything an executor needs to fetch one page.

The plan wraps the filtering predicate groups with result-shaping
parameters. The groups define *what* to fetch; ordering and limit/offset
define *which slice* is returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .filters import parse_filter
from .predicates import AndGroup, Predicate
from .resolver import build_search_predicate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import PaginateConfig
    from .query import PaginateQuery


@dataclass(frozen=True)
class QueryPlan:
    """
    Immutable query plan.

    Attributes:
        where: Bracketed groups, ANDed together by the executor.
        order_by: ``(column, "ASC" | "DESC")`` pairs, primary key first.
        limit: Page size.
        offset: Rows to skip.
    """

    where: tuple[Predicate, ...] = ()
    order_by: tuple[tuple[str, str], ...] = ()
    limit: int | None = None
    offset: int | None = None

    @property
    def specification(self) -> AndGroup:
        """All groups as one AND group (empty when there is no criteria)."""
        return AndGroup(*self.where)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary."""
        result: dict[str, Any] = {"where": self.specification.to_dict()}
        if self.order_by:
            result["order_by"] = [list(pair) for pair in self.order_by]
        if self.limit is not None:
            result["limit"] = self.limit
        if self.offset is not None:
            result["offset"] = self.offset
        return result


@dataclass
class QueryPlanBuilder:
    """Collects the groups of one request and produces a :class:`QueryPlan`."""

    where: list[Predicate] = field(default_factory=list)
    order_by: list[tuple[str, str]] = field(default_factory=list)
    limit: int | None = None
    offset: int | None = None

    def and_where(self, group: Predicate) -> QueryPlanBuilder:
        self.where.append(group)
        return self

    def add_order_by(self, column: str, direction: str) -> QueryPlanBuilder:
        self.order_by.append((column, direction))
        return self

    def paginate(self, page: int, limit: int) -> QueryPlanBuilder:
        self.limit = limit
        self.offset = (page - 1) * limit
        return self

    def build(self) -> QueryPlan:
        return QueryPlan(
            where=tuple(self.where),
            order_by=tuple(self.order_by),
            limit=self.limit,
            offset=self.offset,
        )


def build_query_plan(
    query: PaginateQuery,
    config: PaginateConfig,
    *,
    page: int,
    limit: int,
    sort_by: Sequence[tuple[str, str]],
    search_by: Sequence[str],
) -> QueryPlan:
    """
    Compose base criteria, search and filters into one plan.

    Each source becomes its own bracketed group so that the OR of the
    search never leaks into the filters or the base criteria. The filter
    group is added whenever the request has a filter map, even if no
    statement survives validation (an empty AND group matches everything).
    """
    builder = QueryPlanBuilder().paginate(page, limit)

    for column, direction in sort_by:
        builder.add_order_by(column, direction)

    if config.where is not None:
        builder.and_where(AndGroup(config.where))

    if query.search and search_by:
        builder.and_where(build_search_predicate(query.search, search_by))

    if query.filter is not None:
        filters = parse_filter(query.filter, config.filterable_columns)
        builder.and_where(AndGroup(*filters.values()))

    return builder.build()
