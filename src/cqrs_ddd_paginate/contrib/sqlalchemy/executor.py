"""Run a QueryPlan on an ``AsyncSession``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import Select, func, select

from .compiler import apply_query_plan, build_sqla_filter

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ...plan import QueryPlan
    from .strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SQLAlchemyQueryExecutor(Generic[T]):
    """
    Fetch pages of a mapped model.

    *source* is either the mapped model class or a prepared ``Select`` (for
    joins, eager loading or fixed conditions). With a ``Select`` the model
    used for column lookups is its first selected entity unless *model* is
    given.

    Usage::

        executor = SQLAlchemyQueryExecutor(session, Cat)
        page = await paginate(query, executor, config)
    """

    def __init__(
        self,
        session: AsyncSession,
        source: type[T] | Select[Any],
        *,
        model: type[T] | None = None,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self._session = session
        if isinstance(source, Select):
            self._stmt = source
            self._model = model or source.column_descriptions[0]["entity"]
        else:
            self._stmt = select(source)
            self._model = model or source
        self._registry = registry

    async def fetch_page(self, plan: QueryPlan) -> tuple[list[T], int]:
        where = build_sqla_filter(
            self._model, plan.specification.to_dict(), registry=self._registry
        )
        stmt = self._stmt.where(where)

        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        total = (await self._session.execute(count_stmt)).scalar_one()

        page_stmt = apply_query_plan(stmt, self._model, plan)
        logger.debug("Fetching page: %s", page_stmt)
        items = list((await self._session.execute(page_stmt)).scalars().all())
        return items, int(total)
