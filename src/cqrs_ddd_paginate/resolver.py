"""Sort and search resolution against the endpoint whitelists."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import ConfigurationError
from .operators import Comparator
from .predicates import ColumnPredicate, OrGroup

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import PaginateConfig

logger = logging.getLogger(__name__)

SORT_DIRECTIONS: frozenset[str] = frozenset({"ASC", "DESC"})


def resolve_sort_by(
    requested: Sequence[tuple[str, str]] | None,
    config: PaginateConfig,
) -> list[tuple[str, str]]:
    """
    Keep the requested ``(column, direction)`` pairs that pass the whitelist.

    Directions must be exactly ``ASC`` or ``DESC``. Order is preserved.
    When nothing survives, the configured default sort is used, or
    ascending on the first sortable column.

    Raises:
        ConfigurationError: If the endpoint has no sortable columns.
    """
    if not config.sortable_columns:
        raise ConfigurationError(
            "sortable_columns must contain at least one column",
            option="sortable_columns",
        )

    sort_by: list[tuple[str, str]] = []
    for column, direction in requested or ():
        if column in config.sortable_columns and direction in SORT_DIRECTIONS:
            sort_by.append((column, direction))
        else:
            logger.debug("Ignoring sort %r:%r", column, direction)

    if not sort_by:
        if config.default_sort_by:
            sort_by.extend(config.default_sort_by)
        else:
            sort_by.append((config.sortable_columns[0], "ASC"))
    return sort_by


def resolve_search_by(
    requested: Sequence[str] | None,
    config: PaginateConfig,
) -> list[str]:
    """Requested search columns that are searchable, or all searchable columns."""
    if not config.searchable_columns:
        return []
    if requested is None:
        return list(config.searchable_columns)
    return [c for c in requested if c in config.searchable_columns]


def build_search_predicate(term: str, columns: Sequence[str]) -> OrGroup:
    """Case-insensitive ``contains`` on every column, ORed in one group."""
    return OrGroup(
        *(ColumnPredicate(column, Comparator.ICONTAINS, term) for column in columns)
    )
