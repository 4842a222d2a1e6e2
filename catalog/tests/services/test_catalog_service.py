import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import EntityValidationError, NotFoundError
from catalog.domain.entities.genre import GenreCreate, GenreUpdate
from catalog.domain.repositories import GenreRepository
from catalog.services.catalog_service import CatalogService, cache_key
from shared.entities.catalog import GenreOut
from shared.search import SearchInput, SearchOrder


def _service(db_session: AsyncSession, cache) -> CatalogService:
    return CatalogService(GenreRepository(db_session), cache, kind="genre", out=GenreOut)


@pytest.mark.asyncio
async def test_should_serve_from_cache_when_db_row_deleted(db_session: AsyncSession, fake_cache, persistence, example_genres):
    # GIVEN
    [genre] = await persistence.insert_list(example_genres(1))
    svc = _service(db_session, fake_cache)
    await svc.get(genre.id)                                    # -> warms item cache
    await db_session.delete(genre)                             # -> row removed behind the service's back
    await db_session.commit()

    # WHEN
    dto = await svc.get(genre.id)

    # THEN
    assert dto.id == genre.id
    assert dto.name == genre.name


@pytest.mark.asyncio
async def test_should_raise_not_found_for_missing_row(db_session: AsyncSession, fake_cache, persistence, example_genres):
    [genre] = await persistence.insert_list(example_genres(1))
    svc = _service(db_session, fake_cache)
    await svc.delete(genre.id)

    with pytest.raises(NotFoundError):
        await svc.get(genre.id)
    with pytest.raises(NotFoundError):
        await svc.delete(genre.id)


@pytest.mark.asyncio
async def test_should_refresh_cache_on_update(db_session: AsyncSession, fake_cache):
    svc = _service(db_session, fake_cache)
    created = await svc.create(GenreCreate(name="Drama"))

    await svc.update(created.id, GenreUpdate(is_active=False))

    cached = fake_cache.store[cache_key("genre", created.id)]
    assert cached["is_active"] is False
    assert cached["name"] == "Drama"


@pytest.mark.asyncio
async def test_should_reject_blank_rename(db_session: AsyncSession, fake_cache):
    svc = _service(db_session, fake_cache)
    created = await svc.create(GenreCreate(name="Drama"))

    with pytest.raises(EntityValidationError):
        await svc.update(created.id, GenreUpdate(name="  "))


@pytest.mark.asyncio
async def test_should_project_search_output_to_dtos(db_session: AsyncSession, fake_cache, persistence, example_genres_by_names):
    # GIVEN
    await persistence.insert_list(example_genres_by_names(["Horror", "Action", "Horror - Robots", "Drama"]))
    svc = _service(db_session, fake_cache)

    # WHEN
    out = await svc.list(SearchInput(search="horror", order_by="name", order=SearchOrder.desc, per_page=1))

    # THEN
    assert out.total == 2
    assert out.current_page == 1
    assert out.per_page == 1
    assert [type(i) for i in out.items] == [GenreOut]
    assert [i.name for i in out.items] == ["Horror - Robots"]
