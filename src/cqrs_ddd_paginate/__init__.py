"""Query-parameter compiler for list endpoints: filters, sort, search, links."""

from __future__ import annotations

from .config import PaginateConfig
from .exceptions import ConfigurationError, ExecutorError, PaginateError
from .executor import InMemoryQueryExecutor, IQueryExecutor
from .filters import parse_filter
from .operators import Comparator, FilterOperator, is_operator
from .paginate import paginate, resolve_limit
from .pagination import (
    Paginated,
    PaginatedLinks,
    PaginatedMeta,
    build_links,
    build_query_string,
    total_pages,
)
from .plan import QueryPlan, QueryPlanBuilder, build_query_plan
from .predicates import AndGroup, ColumnPredicate, NotPredicate, OrGroup, Predicate
from .query import PaginateQuery
from .registry import get_operator_fn
from .resolver import build_search_predicate, resolve_search_by, resolve_sort_by
from .tokens import get_filter_tokens

__all__ = [
    # Entry point
    "paginate",
    "PaginateQuery",
    "PaginateConfig",
    "Paginated",
    "PaginatedMeta",
    "PaginatedLinks",
    # Filter DSL
    "FilterOperator",
    "is_operator",
    "get_operator_fn",
    "get_filter_tokens",
    "parse_filter",
    # Predicates
    "Comparator",
    "Predicate",
    "ColumnPredicate",
    "NotPredicate",
    "AndGroup",
    "OrGroup",
    # Planning
    "QueryPlan",
    "QueryPlanBuilder",
    "build_query_plan",
    "resolve_sort_by",
    "resolve_search_by",
    "build_search_predicate",
    "resolve_limit",
    # Links
    "total_pages",
    "build_query_string",
    "build_links",
    # Executors
    "IQueryExecutor",
    "InMemoryQueryExecutor",
    # Exceptions
    "PaginateError",
    "ConfigurationError",
    "ExecutorError",
]
