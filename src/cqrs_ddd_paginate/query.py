"""The structured list request read from query parameters."""

from __future__ import annotations

import contextlib
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaginateQuery(BaseModel):
    """
    Immutable list request.

    Fields hold what the client sent, unvalidated: columns and operators
    are checked against the endpoint whitelist later, and anything that
    does not pass is dropped there.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    page: int | None = None
    limit: int | None = None
    sort_by: list[tuple[str, str]] | None = None
    search: str | None = None
    search_by: list[str] | None = None
    filter: dict[str, str | list[str]] | None = Field(default=None)

    @field_validator("filter")
    @classmethod
    def _collapse_single_statements(
        cls, value: dict[str, str | list[str]] | None
    ) -> dict[str, str | list[str]] | None:
        # One-item lists are stored as the plain statement, as links read back.
        if value is None:
            return None
        return {
            column: raw[0] if isinstance(raw, list) and len(raw) == 1 else raw
            for column, raw in value.items()
        }

    @classmethod
    def from_url(cls, url: str) -> PaginateQuery:
        """Parse a path with query string, e.g. a link from ``Paginated.links``."""
        parts = urlsplit(url)
        return cls.from_query_params(parts.query, path=parts.path)

    @classmethod
    def from_query_params(
        cls,
        params: Mapping[str, Any] | str,
        *,
        path: str,
        page_key: str = "page",
        limit_key: str = "limit",
        sort_key: str = "sortBy",
        search_key: str = "search",
        search_by_key: str = "searchBy",
        filter_prefix: str = "filter.",
    ) -> PaginateQuery:
        """
        Build a request from query parameters.

        ``params`` is a raw query string or a mapping whose values are a
        string or a list of strings (repeated keys).

        - ``page`` / ``limit``: integers; anything else is left unset.
        - ``sortBy=column:direction``: repeatable, order preserved.
        - ``searchBy``: repeatable or comma-separated.
        - ``filter.<column>``: repeatable; a single occurrence stays a
          string, repeated ones become a list.
        """
        if isinstance(params, str):
            params = parse_qs(params, keep_blank_values=True)

        sort_by: list[tuple[str, str]] = []
        for item in _values(params.get(sort_key)):
            column, sep, direction = item.partition(":")
            if sep:
                sort_by.append((column, direction))

        search_by = [
            column.strip()
            for item in _values(params.get(search_by_key))
            for column in item.split(",")
            if column.strip()
        ]

        filters: dict[str, str | list[str]] = {}
        for key, raw in params.items():
            if not key.startswith(filter_prefix):
                continue
            statements = _values(raw)
            if statements:
                filters[key[len(filter_prefix) :]] = (
                    statements[0] if len(statements) == 1 else statements
                )

        search = _values(params.get(search_key))
        return cls(
            path=path,
            page=_int_param(params.get(page_key)),
            limit=_int_param(params.get(limit_key)),
            sort_by=sort_by or None,
            search=search[0] if search else None,
            search_by=search_by or None,
            filter=filters or None,
        )


def _values(raw: Any) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, list | tuple):
        return [str(v) for v in raw]
    return [str(raw)]


def _int_param(raw: Any) -> int | None:
    values = _values(raw)
    if not values:
        return None
    with contextlib.suppress(TypeError, ValueError):
        return int(values[0])
    return None
