from uuid import UUID
from fastapi import APIRouter, Body, Depends, Path, Response, status

from catalog.domain.entities.genre import GenreCreate, GenreUpdate
from catalog.services.catalog_service import CatalogService
from shared.entities.catalog import GenreOut
from shared.entities.responses import ItemResponse, ListResponse
from shared.search import SearchInput
from shared.wiring import get_genre_service, get_search_input

router = APIRouter(prefix="/genres", tags=["genres"])


@router.post("", summary="Create genre", response_model=ItemResponse[GenreOut], status_code=status.HTTP_201_CREATED)
async def create_genre(
    payload: GenreCreate,
    svc: CatalogService = Depends(get_genre_service),
):
    return ItemResponse(data=await svc.create(payload))


@router.get(
    "",
    summary="List genres",
    description=(
        "Paginated, filterable, sortable genre listing. "
        "Query: `page`, `per_page`, `search`, `sort` (`name`|`id`|`createdAt`), `dir` (`asc`|`desc`)."
    ),
    response_model=ListResponse[GenreOut],
)
async def list_genres(
    search_input: SearchInput = Depends(get_search_input),
    svc: CatalogService = Depends(get_genre_service),
):
    return ListResponse.from_output(await svc.list(search_input))


@router.get("/{genre_id}", summary="Get genre by ID", response_model=ItemResponse[GenreOut])
async def get_genre(
    genre_id: UUID = Path(..., description="Genre UUID"),
    svc: CatalogService = Depends(get_genre_service),
):
    return ItemResponse(data=await svc.get(genre_id))


@router.put("/{genre_id}", summary="Update genre", response_model=ItemResponse[GenreOut])
async def update_genre(
    genre_id: UUID = Path(..., description="Genre UUID"),
    payload: GenreUpdate = Body(...),
    svc: CatalogService = Depends(get_genre_service),
):
    return ItemResponse(data=await svc.update(genre_id, payload))


@router.delete("/{genre_id}", summary="Delete genre", status_code=status.HTTP_204_NO_CONTENT)
async def delete_genre(
    genre_id: UUID = Path(..., description="Genre UUID"),
    svc: CatalogService = Depends(get_genre_service),
):
    await svc.delete(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
