from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Protocol, TypeVar
from uuid import UUID

from shared.search.search_input import SearchOrder


class Searchable(Protocol):
    """What an entity must expose to be filtered and ordered by the search capability."""

    id: UUID
    name: str
    created_at: datetime


E = TypeVar("E", bound=Searchable)

SortKey = Callable[[Any], Any]


def _by_name(entity: Searchable) -> str:
    return entity.name


def _by_id(entity: Searchable) -> str:
    # canonical string form keeps ordering identical across storage backends
    return str(entity.id)


def _by_created_at(entity: Searchable) -> datetime:
    value = entity.created_at
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


SORT_FIELDS: Dict[str, SortKey] = {
    "name": _by_name,
    "id": _by_id,
    "createdAt": _by_created_at,
}

DEFAULT_SORT_FIELD = "name"


@dataclass(frozen=True)
class Ordering:
    """A resolved sort: which field, which key function, which direction."""

    field: str
    key: SortKey
    order: SearchOrder = SearchOrder.asc

    @property
    def reverse(self) -> bool:
        return self.order == SearchOrder.desc

    def compare(self, a: Any, b: Any) -> int:
        ka, kb = self.key(a), self.key(b)
        result = (ka > kb) - (ka < kb)
        return -result if self.reverse else result

    def sort(self, items: Iterable[E]) -> List[E]:
        # sorted() is stable and reverse=True keeps equal keys in input order
        return sorted(items, key=self.key, reverse=self.reverse)


def resolve_ordering(
    field: str | None,
    order: SearchOrder = SearchOrder.asc,
    fields: Dict[str, SortKey] | None = None,
) -> Ordering:
    """
    Map a sort field name + direction to a concrete ordering.

    Field names match exactly (case-sensitive). Empty or unknown names fall
    back to DEFAULT_SORT_FIELD; the direction is applied either way.
    Names compare by code point, never by locale collation.
    """
    table = fields if fields is not None else SORT_FIELDS
    name = field if field and field in table else DEFAULT_SORT_FIELD
    return Ordering(field=name, key=table[name], order=SearchOrder(order))

