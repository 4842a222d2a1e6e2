from typing import Dict, Sequence

from shared.search.ordering import E, SortKey, resolve_ordering
from shared.search.search_input import SearchInput
from shared.search.search_output import SearchOutput


def matches(entity, term: str) -> bool:
    """Case-insensitive substring match on the entity name."""
    return term.casefold() in entity.name.casefold()


def search(
    collection: Sequence[E],
    search_input: SearchInput,
    fields: Dict[str, SortKey] | None = None,
) -> SearchOutput:
    """
    Filter, count, order and page an already-materialized collection.

    Pure: the collection is only read. Ties in the sort key keep the order
    in which the collection was supplied.
    """
    if search_input.search:
        filtered = [e for e in collection if matches(e, search_input.search)]
    else:
        filtered = list(collection)

    total = len(filtered)

    ordering = resolve_ordering(search_input.order_by, search_input.order, fields)
    ordered = ordering.sort(filtered)

    start = search_input.offset
    items = ordered[start:start + search_input.per_page]

    return SearchOutput(
        current_page=search_input.page,
        per_page=search_input.per_page,
        total=total,
        items=items,
    )
