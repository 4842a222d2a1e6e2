import logging
from typing import Generic, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel

from app.core.config import settings
from app.core.exceptions import NotFoundError
from catalog.ports.outbound.cache_port import CachePort
from shared.abstracts.abstract_repository import SearchableRepository
from shared.search import SearchInput, SearchOutput

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
OutT = TypeVar("OutT", bound=BaseModel)


def cache_key(kind: str, entity_id: UUID) -> str:
    return f"catalog:{kind}:{entity_id}"


class CatalogService(Generic[ModelT, OutT]):
    """
    CRUD + listing for one catalog entity type.

    Write-through caching for single items only:
    - create/update refresh the item key, delete evicts it.
    - listings always go to the repository.
    """

    def __init__(
        self,
        repo: SearchableRepository,
        cache_port: CachePort,
        *,
        kind: str,
        out: Type[OutT],
    ):
        self.repo = repo
        self.cache = cache_port
        self.kind = kind
        self.out = out

    @property
    def model(self):
        return self.repo.model

    # ---------- Mutations ----------

    async def create(self, payload: BaseModel) -> OutT:
        obj = self.model(**payload.model_dump())
        await self.repo.insert(obj)
        dto = self.out.model_validate(obj)
        await self._cache_item(dto)
        logger.info("Created %s %s", self.kind, obj.id)
        return dto

    async def update(self, entity_id: UUID, payload: BaseModel) -> OutT:
        obj = await self._get_or_raise(entity_id)
        data = payload.model_dump(exclude_unset=True)

        for field, value in data.items():
            if field == "name":
                obj.rename(value)
            elif field == "is_active" and value:
                obj.activate()
            elif field == "is_active":
                obj.deactivate()
            else:
                setattr(obj, field, value)

        await self.repo.update(entity_id, obj)
        dto = self.out.model_validate(obj)
        await self._cache_item(dto)
        logger.info("Updated %s %s (%s)", self.kind, entity_id, ", ".join(sorted(data)) or "no fields")
        return dto

    async def delete(self, entity_id: UUID) -> None:
        ok = await self.repo.delete(entity_id)
        if not ok:
            raise NotFoundError(self.kind, entity_id)
        await self.cache.delete_keys(cache_key(self.kind, entity_id))
        logger.info("Deleted %s %s", self.kind, entity_id)

    # ---------- Queries ----------

    async def get(self, entity_id: UUID) -> OutT:
        cached = await self.cache.get(cache_key(self.kind, entity_id))
        if cached:
            return self.out.model_validate(cached)

        obj = await self._get_or_raise(entity_id)
        dto = self.out.model_validate(obj)
        await self._cache_item(dto)
        return dto

    async def list(self, search_input: SearchInput) -> SearchOutput:
        output = await self.repo.search(search_input)
        logger.debug(
            "Listed %s page=%s per_page=%s search=%r sort=%r dir=%s -> %s/%s",
            self.kind,
            search_input.page,
            search_input.per_page,
            search_input.search,
            search_input.order_by,
            search_input.order.value,
            len(output.items),
            output.total,
        )
        return output.map(self.out.model_validate)

    # ---------- Internal helpers ----------

    async def _get_or_raise(self, entity_id: UUID):
        obj = await self.repo.get(entity_id)
        if obj is None:
            raise NotFoundError(self.kind, entity_id)
        return obj

    async def _cache_item(self, dto: OutT) -> None:
        await self.cache.set(
            cache_key(self.kind, dto.id),
            dto.model_dump(mode="json"),
            ttl=settings.cache_ttl_seconds,
        )
