from uuid import UUID
from fastapi import APIRouter, Body, Depends, Path, Response, status

from catalog.domain.entities.cast_member import CastMemberCreate, CastMemberUpdate
from catalog.services.catalog_service import CatalogService
from shared.entities.catalog import CastMemberOut
from shared.entities.responses import ItemResponse, ListResponse
from shared.search import SearchInput
from shared.wiring import get_cast_member_service, get_search_input

router = APIRouter(prefix="/cast_members", tags=["cast members"])


@router.post(
    "",
    summary="Create cast member",
    description="`type` is `1` for directors and `2` for actors.",
    response_model=ItemResponse[CastMemberOut],
    status_code=status.HTTP_201_CREATED,
)
async def create_cast_member(
    payload: CastMemberCreate,
    svc: CatalogService = Depends(get_cast_member_service),
):
    return ItemResponse(data=await svc.create(payload))


@router.get("", summary="List cast members", response_model=ListResponse[CastMemberOut])
async def list_cast_members(
    search_input: SearchInput = Depends(get_search_input),
    svc: CatalogService = Depends(get_cast_member_service),
):
    return ListResponse.from_output(await svc.list(search_input))


@router.get(
    "/{cast_member_id}",
    summary="Get cast member by ID",
    response_model=ItemResponse[CastMemberOut],
    responses={
        200: {
            "description": "Cast member found.",
            "content": {
                "application/json": {
                    "examples": {
                        "director": {
                            "value": {
                                "data": {
                                    "id": "0b1a98e2-754a-4d63-a53c-18d3b5a0d5e1",
                                    "name": "Agnès Varda",
                                    "type": 1,
                                    "is_active": True,
                                    "created_at": "2025-08-10T12:35:05Z",
                                }
                            }
                        }
                    }
                }
            },
        },
        404: {"description": "Cast member not found."},
    },
)
async def get_cast_member(
    cast_member_id: UUID = Path(..., description="Cast member UUID"),
    svc: CatalogService = Depends(get_cast_member_service),
):
    return ItemResponse(data=await svc.get(cast_member_id))


@router.put("/{cast_member_id}", summary="Update cast member", response_model=ItemResponse[CastMemberOut])
async def update_cast_member(
    cast_member_id: UUID = Path(..., description="Cast member UUID"),
    payload: CastMemberUpdate = Body(...),
    svc: CatalogService = Depends(get_cast_member_service),
):
    return ItemResponse(data=await svc.update(cast_member_id, payload))


@router.delete("/{cast_member_id}", summary="Delete cast member", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cast_member(
    cast_member_id: UUID = Path(..., description="Cast member UUID"),
    svc: CatalogService = Depends(get_cast_member_service),
):
    await svc.delete(cast_member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
