from typing import Generic, List, TypeVar

from pydantic import BaseModel

from shared.search import SearchOutput

T = TypeVar("T")


class ListMeta(BaseModel):
    total: int
    current_page: int
    per_page: int


class ListResponse(BaseModel, Generic[T]):
    """`{"meta": {...}, "data": [...]}` envelope for paginated listings."""

    meta: ListMeta
    data: List[T]

    @classmethod
    def from_output(cls, output: SearchOutput) -> "ListResponse[T]":
        return cls(
            meta=ListMeta(total=output.total, current_page=output.current_page, per_page=output.per_page),
            data=list(output.items),
        )


class ItemResponse(BaseModel, Generic[T]):
    data: T
