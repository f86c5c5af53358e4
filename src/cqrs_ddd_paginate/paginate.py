"""Turn a request, a config and an executor into one Paginated page."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from .pagination import (
    Paginated,
    PaginatedMeta,
    build_links,
    build_query_string,
    total_pages,
)
from .plan import build_query_plan
from .resolver import resolve_search_by, resolve_sort_by

if TYPE_CHECKING:
    from .config import PaginateConfig
    from .executor import IQueryExecutor
    from .query import PaginateQuery

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_limit(query: PaginateQuery, config: PaginateConfig) -> int:
    """Requested limit (or the default), capped at ``max_limit``."""
    requested = query.limit if query.limit and query.limit > 0 else None
    return min(requested or config.default_limit, config.max_limit)


async def paginate(
    query: PaginateQuery,
    executor: IQueryExecutor[T],
    config: PaginateConfig,
) -> Paginated[T]:
    """
    Validate the request, fetch one page and build the envelope.

    Invalid sort pairs, search columns and filter statements are dropped.
    A page past the end yields an empty ``data`` list, not an error.

    Raises:
        ConfigurationError: If the endpoint has no sortable columns.
    """
    page = max(query.page or 1, 1)
    limit = resolve_limit(query, config)
    sort_by = resolve_sort_by(query.sort_by, config)
    search_by = resolve_search_by(query.search_by, config)

    plan = build_query_plan(
        query,
        config,
        page=page,
        limit=limit,
        sort_by=sort_by,
        search_by=search_by,
    )
    logger.debug("Paginating %s with plan %s", query.path, plan.to_dict())

    items, total_items = await executor.fetch_page(plan)

    pages = total_pages(total_items, limit)
    suffix = build_query_string(
        limit=limit,
        sort_by=sort_by,
        search=query.search,
        search_by=search_by if query.search_by is not None else None,
        filter=query.filter,
    )

    return Paginated(
        data=items,
        meta=PaginatedMeta(
            items_per_page=limit,
            total_items=total_items,
            current_page=page,
            total_pages=pages,
            sort_by=sort_by,
            search=query.search,
            search_by=search_by if query.search else None,
            filter=query.filter,
        ),
        links=build_links(query.path, page, pages, suffix),
    )
