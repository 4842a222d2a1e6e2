from uuid import UUID
from fastapi import APIRouter, Body, Depends, Path, Response, status

from catalog.domain.entities.category import CategoryCreate, CategoryUpdate
from catalog.services.catalog_service import CatalogService
from shared.entities.catalog import CategoryOut
from shared.entities.responses import ItemResponse, ListResponse
from shared.search import SearchInput
from shared.wiring import get_category_service, get_search_input

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={
        422: {"description": "Request validation error (Pydantic)."},
    },
)

_CATEGORY_EXAMPLE = {
    "id": "7e6f5a20-5a62-4e25-9b02-8a8af5f1a901",
    "name": "Documentary",
    "description": "Non-fiction films",
    "is_active": True,
    "created_at": "2025-08-14T20:12:44Z",
}


@router.post(
    "",
    summary="Create category",
    response_model=ItemResponse[CategoryOut],
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Category created.",
            "content": {"application/json": {"examples": {"created": {"value": {"data": _CATEGORY_EXAMPLE}}}}},
        },
    },
)
async def create_category(
    payload: CategoryCreate,
    svc: CatalogService = Depends(get_category_service),
):
    return ItemResponse(data=await svc.create(payload))


@router.get(
    "",
    summary="List categories",
    description=(
        "Returns a page of categories plus pagination metadata.\n\n"
        "### Query\n"
        "- `page`, `per_page`: 1-based paging\n"
        "- `search`: case-insensitive substring of `name`\n"
        "- `sort`: `name`, `id` or `createdAt` (anything else sorts by `name`)\n"
        "- `dir`: `asc` or `desc`\n\n"
        "`meta.total` counts every category matching `search`, not just this page."
    ),
    response_model=ListResponse[CategoryOut],
    responses={
        200: {
            "description": "Page of categories.",
            "content": {
                "application/json": {
                    "examples": {
                        "list": {
                            "summary": "List example",
                            "value": {
                                "meta": {"total": 1, "current_page": 1, "per_page": 15},
                                "data": [_CATEGORY_EXAMPLE],
                            },
                        }
                    }
                }
            },
        },
    },
)
async def list_categories(
    search_input: SearchInput = Depends(get_search_input),
    svc: CatalogService = Depends(get_category_service),
):
    return ListResponse.from_output(await svc.list(search_input))


@router.get(
    "/{category_id}",
    summary="Get category by ID",
    response_model=ItemResponse[CategoryOut],
    responses={
        404: {
            "description": "Category not found.",
            "content": {"application/json": {"examples": {"not_found": {"value": {"detail": "category '...' not found"}}}}},
        },
    },
)
async def get_category(
    category_id: UUID = Path(..., description="Category UUID"),
    svc: CatalogService = Depends(get_category_service),
):
    return ItemResponse(data=await svc.get(category_id))


@router.put(
    "/{category_id}",
    summary="Update category",
    description="Partially updates a category; omitted fields keep their value.",
    response_model=ItemResponse[CategoryOut],
    responses={404: {"description": "Category not found."}},
)
async def update_category(
    category_id: UUID = Path(..., description="Category UUID"),
    payload: CategoryUpdate = Body(..., description="Partial update payload"),
    svc: CatalogService = Depends(get_category_service),
):
    return ItemResponse(data=await svc.update(category_id, payload))


@router.delete(
    "/{category_id}",
    summary="Delete category",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Category not found."}},
)
async def delete_category(
    category_id: UUID = Path(..., description="Category UUID"),
    svc: CatalogService = Depends(get_category_service),
):
    await svc.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
