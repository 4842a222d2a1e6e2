from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SearchOutput(BaseModel, Generic[T]):
    """Ordered page of results plus the size of the whole filtered set."""

    current_page: int = Field(ge=1)
    per_page: int = Field(ge=1)
    total: int = Field(ge=0)
    items: List[T] = []

    model_config = {"arbitrary_types_allowed": True}

    def map(self, fn) -> "SearchOutput":
        """Same pagination metadata, items projected through `fn`."""
        return SearchOutput(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[fn(item) for item in self.items],
        )
