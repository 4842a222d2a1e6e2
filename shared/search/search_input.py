from enum import Enum

from pydantic import BaseModel, Field


DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


class SearchOrder(str, Enum):
    asc = "asc"
    desc = "desc"


class SearchInput(BaseModel):
    """
    Paging, free-text filter and ordering for a listing request.

    `order_by` empty means "use the default ordering" (see shared.search.ordering).
    Positivity of page/per_page is enforced here so anything reaching the
    search capability is already valid.
    """

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1)
    search: str = ""
    order_by: str = ""
    order: SearchOrder = SearchOrder.asc

    model_config = {"frozen": True}

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page
