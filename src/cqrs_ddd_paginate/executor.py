"""The data-access port, plus an in-memory adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

from .evaluator import build_default_registry, evaluate, resolve_field

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .evaluator import MemoryOperatorRegistry
    from .plan import QueryPlan

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class IQueryExecutor(Protocol[T_co]):
    """Fetch one page and the total count for a :class:`QueryPlan`.

    Implementations own timeouts, cancellation and connection handling.
    """

    async def fetch_page(self, plan: QueryPlan) -> tuple[list[T_co], int]:
        """Return ``(items, total_count)`` where the count ignores limit/offset."""
        ...


class InMemoryQueryExecutor(Generic[T]):
    """Executes plans over a list of objects or dicts.

    Intended for tests and small fixed datasets.
    """

    def __init__(
        self,
        items: Iterable[T],
        *,
        registry: MemoryOperatorRegistry | None = None,
    ) -> None:
        self._items = list(items)
        self._registry = registry or build_default_registry()

    async def fetch_page(self, plan: QueryPlan) -> tuple[list[T], int]:
        spec = plan.specification.to_dict()
        matches = [
            item for item in self._items if evaluate(spec, item, self._registry)
        ]

        # Stable sorts applied from the least to the most significant key.
        for column, direction in reversed(plan.order_by):
            matches.sort(
                key=lambda item, c=column: _sort_key(resolve_field(item, c)),
                reverse=direction == "DESC",
            )

        start = plan.offset or 0
        end = start + plan.limit if plan.limit is not None else None
        return matches[start:end], len(matches)


def _sort_key(value: Any) -> tuple[bool, Any]:
    return (value is not None, value if value is not None else 0)
