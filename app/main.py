import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.core.log import configure_logging

configure_logging()

from app.core.cache import cache  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.core.database.db import engine  # noqa: E402
from app.core.database.base import Base  # noqa: E402
from app.core.exceptions import register_exception_handlers  # noqa: E402

# Routers
from catalog.routers import (  # noqa: E402
    categories_router,
    genres_router,
    cast_members_router,
    videos_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: dev-friendly table creation (run Alembic migrations in prod)
    await cache.init()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s started", settings.app_name)
    yield
    # Shutdown
    await engine.dispose()
    await cache.close()


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

register_exception_handlers(app)


@app.get("/health", tags=["system"])
async def health():
    return {"status": "ok"}


app.include_router(categories_router)
app.include_router(genres_router)
app.include_router(cast_members_router)
app.include_router(videos_router)
