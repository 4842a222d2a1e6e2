from shared.search.search_input import SearchInput, SearchOrder, DEFAULT_PAGE, DEFAULT_PER_PAGE
from shared.search.search_output import SearchOutput
from shared.search.ordering import Ordering, Searchable, SORT_FIELDS, DEFAULT_SORT_FIELD, resolve_ordering
from shared.search.searchable import search

__all__ = [
    "SearchInput",
    "SearchOrder",
    "SearchOutput",
    "Ordering",
    "Searchable",
    "SORT_FIELDS",
    "DEFAULT_SORT_FIELD",
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "resolve_ordering",
    "search",
]
