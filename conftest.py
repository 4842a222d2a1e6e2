# conftest.py
from datetime import datetime, timedelta, timezone
from typing import Any, AsyncGenerator, Dict, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from app.main import app
from app.core.database.db import get_session
from app.core.database.base import Base
from catalog.domain.models import CastMember, CastMemberType, Category, Genre, Video
from catalog.ports.outbound.cache_port import CachePort
from shared.wiring import get_cache


# ---- Fakes ------------------------------------------------------------------

class _FakeCache(CachePort):
    def __init__(self) -> None:
        self.store: Dict[str, Any] = {}

    async def get(self, key: str) -> Optional[Any]:
        return self.store.get(key)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        # store the dict/list directly; do NOT json.dumps here
        self.store[key] = value

    async def delete_keys(self, *keys: str) -> None:
        for k in keys:
            self.store.pop(k, None)


# ---- Async engine + session --------------------------------------------------
# Each test gets its own sqlite file, created before and dropped after the test.

@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}", future=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()

@pytest_asyncio.fixture(scope="function")
async def SessionMaker(async_engine):
    return async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)

@pytest_asyncio.fixture(scope="function")
async def override_get_session(SessionMaker):
    async def _dep():
        async with SessionMaker() as s:
            yield s
    app.dependency_overrides[get_session] = _dep
    yield
    app.dependency_overrides.pop(get_session, None)

@pytest_asyncio.fixture
async def db_session(SessionMaker):
    async with SessionMaker() as s:
        yield s


@pytest.fixture
def fake_cache() -> _FakeCache:
    fc = _FakeCache()
    app.dependency_overrides[get_cache] = lambda: fc
    yield fc
    app.dependency_overrides.pop(get_cache, None)


# ---- Example data ------------------------------------------------------------

_BASE_TIME = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

# deliberately not in alphabetical, id or creation order
_EXAMPLE_NAMES = [
    "Western", "Action", "Musical", "Horror", "Comedy", "Thriller",
    "Animation", "Romance", "Drama", "Fantasy", "Biography", "Crime",
    "Mystery", "Sci-fi", "War", "Noir", "Adventure", "Sports",
]


def _created_at(i: int) -> datetime:
    # creation order differs from insertion order so createdAt sorting is observable
    return _BASE_TIME + timedelta(seconds=(i * 7) % 19)


class Persistence:
    """Seeds rows straight into the test database, bypassing the API."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert_list(self, objs: list) -> list:
        self.session.add_all(objs)
        await self.session.commit()
        return objs


@pytest_asyncio.fixture
async def persistence(db_session) -> Persistence:
    return Persistence(db_session)


@pytest.fixture
def example_genres():
    def _make(quantity: int) -> list[Genre]:
        return [
            Genre(name=_EXAMPLE_NAMES[i % len(_EXAMPLE_NAMES)] + ("" if i < len(_EXAMPLE_NAMES) else f" {i}"),
                  is_active=i % 3 != 0,
                  created_at=_created_at(i))
            for i in range(quantity)
        ]
    return _make


@pytest.fixture
def example_genres_by_names():
    def _make(names: list[str]) -> list[Genre]:
        return [Genre(name=n, created_at=_created_at(i)) for i, n in enumerate(names)]
    return _make


@pytest.fixture
def example_categories():
    def _make(quantity: int) -> list[Category]:
        return [
            Category(name=f"Category {_EXAMPLE_NAMES[i % len(_EXAMPLE_NAMES)]} {i}",
                     description=f"Description {i}",
                     created_at=_created_at(i))
            for i in range(quantity)
        ]
    return _make


@pytest.fixture
def example_cast_members():
    def _make(quantity: int) -> list[CastMember]:
        return [
            CastMember(name=f"Person {_EXAMPLE_NAMES[i % len(_EXAMPLE_NAMES)]} {i}",
                       type=CastMemberType.director if i % 2 else CastMemberType.actor,
                       created_at=_created_at(i))
            for i in range(quantity)
        ]
    return _make


@pytest.fixture
def example_videos():
    def _make(quantity: int) -> list[Video]:
        return [
            Video(name=f"{_EXAMPLE_NAMES[i % len(_EXAMPLE_NAMES)]} Movie {i}",
                  description="Some description",
                  year_launched=2000 + i,
                  duration=90 + i,
                  created_at=_created_at(i))
            for i in range(quantity)
        ]
    return _make


# ---- HTTP client -------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def client(override_get_session, fake_cache) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c
