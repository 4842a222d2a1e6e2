from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Generic, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from shared.search import SearchInput, SearchOutput, search
from shared.search.ordering import SortKey

ModelT = TypeVar("ModelT")


class AbstractRepository(ABC):
    """
    Minimal, framework-agnostic repository contract.

    Concrete implementations should implement these operations.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @abstractmethod
    async def insert(self, obj): ...

    @abstractmethod
    async def update(self, entity_id, obj): ...

    @abstractmethod
    async def delete(self, entity_id) -> bool: ...

    @abstractmethod
    async def get(self, entity_id): ...

    @abstractmethod
    async def list(self, **filters): ...

    async def commit(self, obj):
        await self.db.commit()
        await self.db.refresh(obj)


class SearchableRepository(AbstractRepository, Generic[ModelT]):
    """
    CRUD + paginated search for any model exposing id, name and created_at.

    Subclasses only pin `model`; `sort_fields` narrows or extends the
    orderable fields for that entity type (None means the shared defaults).
    """

    model: ClassVar[Type]
    sort_fields: ClassVar[Optional[Dict[str, SortKey]]] = None

    async def insert(self, obj: ModelT) -> ModelT:
        self.db.add(obj)
        await self.commit(obj)
        return obj

    async def get(self, entity_id: UUID) -> Optional[ModelT]:
        res = await self.db.execute(select(self.model).where(self.model.id == entity_id))
        return res.scalars().first()

    async def update(self, entity_id: UUID, obj: ModelT) -> ModelT:
        # obj is the already-mutated managed instance
        await self.commit(obj)
        return obj

    async def delete(self, entity_id: UUID) -> bool:
        res = await self.db.execute(delete(self.model).where(self.model.id == entity_id))
        await self.db.commit()
        # rowcount can be None on some DBs; coerce safely
        return bool(getattr(res, "rowcount", 0))

    async def list(self, **filters) -> Sequence[ModelT]:
        """Candidate set in insertion order (seq, then id for rows sharing a seq)."""
        stmt = select(self.model).order_by(self.model.seq.asc(), self.model.id.asc())
        if filters.get("is_active") is not None:
            stmt = stmt.where(self.model.is_active == filters["is_active"])
        res = await self.db.execute(stmt)
        return res.scalars().all()

    async def search(self, search_input: SearchInput) -> SearchOutput:
        # Filter, sort and page run in-process over the whole table: casefold() matching
        # is the same on every backend, unlike ILIKE/lower() (ASCII-only on SQLite).
        # Memory grows with table size; push the filter into SQL if catalogs get large.
        candidates = await self.list()
        return search(candidates, search_input, self.sort_fields)
