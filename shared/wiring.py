from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from app.core.config import settings
from catalog.adapters.outbound.cache_redis import RedisCacheAdapter
from catalog.domain.repositories import (
    CastMemberRepository,
    CategoryRepository,
    GenreRepository,
    VideoRepository,
)
from catalog.ports.outbound.cache_port import CachePort
from catalog.services.catalog_service import CatalogService
from shared.entities.catalog import CastMemberOut, CategoryOut, GenreOut, VideoOut
from shared.search import SearchInput, SearchOrder


def get_cache() -> CachePort:
    return RedisCacheAdapter()


def get_search_input(
    page: int = Query(1, ge=1, description="Page number (1-based)."),
    per_page: int = Query(
        settings.default_per_page,
        ge=1,
        le=settings.max_per_page,
        description=f"Page size (1–{settings.max_per_page}).",
    ),
    search: Optional[str] = Query(None, description="Case-insensitive substring filter on `name`."),
    sort: Optional[str] = Query(None, description="Sort field: `name`, `id` or `createdAt`. Defaults to `name`."),
    dir_: SearchOrder = Query(SearchOrder.asc, alias="dir", description="Sort direction."),
) -> SearchInput:
    """Translate listing query params into a SearchInput."""
    return SearchInput(
        page=page,
        per_page=per_page,
        search=search or "",
        order_by=sort or "",
        order=dir_,
    )


# ---------- Per-entity services (one DB session + cache per request) ----------

def get_category_service(
    db: AsyncSession = Depends(get_session),
    cache: CachePort = Depends(get_cache),
) -> CatalogService:
    return CatalogService(CategoryRepository(db), cache, kind="category", out=CategoryOut)


def get_genre_service(
    db: AsyncSession = Depends(get_session),
    cache: CachePort = Depends(get_cache),
) -> CatalogService:
    return CatalogService(GenreRepository(db), cache, kind="genre", out=GenreOut)


def get_cast_member_service(
    db: AsyncSession = Depends(get_session),
    cache: CachePort = Depends(get_cache),
) -> CatalogService:
    return CatalogService(CastMemberRepository(db), cache, kind="cast_member", out=CastMemberOut)


def get_video_service(
    db: AsyncSession = Depends(get_session),
    cache: CachePort = Depends(get_cache),
) -> CatalogService:
    return CatalogService(VideoRepository(db), cache, kind="video", out=VideoOut)
