from catalog.routers.categories import router as categories_router
from catalog.routers.genres import router as genres_router
from catalog.routers.cast_members import router as cast_members_router
from catalog.routers.videos import router as videos_router
