"""SQLAlchemy executor for paginate query plans (requires the ``sqlalchemy`` extra)."""

from __future__ import annotations

from .compiler import apply_query_plan, build_sqla_filter
from .executor import SQLAlchemyQueryExecutor
from .strategy import (
    DEFAULT_SQLA_REGISTRY,
    SQLAlchemyOperator,
    SQLAlchemyOperatorRegistry,
    build_default_sqla_registry,
)

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "SQLAlchemyQueryExecutor",
    "apply_query_plan",
    "build_default_sqla_registry",
    "build_sqla_filter",
]
