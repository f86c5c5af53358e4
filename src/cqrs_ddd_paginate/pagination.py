"""
Paginated result envelope and navigation links.

Links repeat the request in a canonical order so that following one yields
the same page shape::

    /cats?page=2&limit=5&sortBy=name:ASC&search=tom&filter.age=$gte:3
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

T = TypeVar("T")


class _Envelope(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


class PaginatedMeta(_Envelope):
    items_per_page: int
    total_items: int
    current_page: int
    total_pages: int
    sort_by: list[tuple[str, str]]
    search_by: list[str] | None = None
    search: str | None = None
    filter: dict[str, str | list[str]] | None = None


class PaginatedLinks(_Envelope):
    first: str | None = None
    previous: str | None = None
    current: str
    next: str | None = None
    last: str | None = None


class Paginated(_Envelope, Generic[T]):
    """One page of results with its metadata and navigation links.

    ``model_dump(by_alias=True)`` produces the camelCase wire shape
    (``itemsPerPage``, ``totalItems``, ...).
    """

    data: list[T]
    meta: PaginatedMeta
    links: PaginatedLinks

    def to_dict(self) -> dict[str, Any]:
        """Wire representation: camelCase keys, absent links dropped."""
        result = self.model_dump(by_alias=True, exclude={"links"})
        result["links"] = self.links.model_dump(exclude_none=True)
        return result


def total_pages(total_items: int, limit: int) -> int:
    """Number of pages for *total_items*; zero items means zero pages."""
    return -(-total_items // limit)


def build_query_string(
    *,
    limit: int,
    sort_by: Sequence[tuple[str, str]],
    search: str | None = None,
    search_by: Sequence[str] | None = None,
    filter: Mapping[str, str | list[str]] | None = None,
) -> str:
    """
    Canonical query-string suffix shared by every link.

    Order is fixed: ``limit``, ``sortBy`` pairs, ``search``, ``searchBy``
    columns, then the raw ``filter.<column>`` statements exactly as they
    were received (rejected statements included). Values are not
    percent-encoded. Pass *search_by* only when the client sent
    ``searchBy`` itself.
    """
    parts = [f"&limit={limit}"]
    parts.extend(f"&sortBy={column}:{direction}" for column, direction in sort_by)
    if search:
        parts.append(f"&search={search}")
    if search_by:
        parts.extend(f"&searchBy={column}" for column in search_by)
    for column, raw in (filter or {}).items():
        statements = raw if isinstance(raw, list) else [raw]
        parts.extend(f"&filter.{column}={statement}" for statement in statements)
    return "".join(parts)


def build_links(path: str, page: int, pages: int, suffix: str) -> PaginatedLinks:
    """First/previous/current/next/last links around *page*."""

    def link(p: int) -> str:
        return f"{path}?page={p}{suffix}"

    return PaginatedLinks(
        first=None if page == 1 else link(1),
        previous=None if page - 1 < 1 else link(page - 1),
        current=link(page),
        next=None if page + 1 > pages else link(page + 1),
        last=None if page == pages else link(pages),
    )
