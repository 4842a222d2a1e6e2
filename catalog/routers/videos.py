from uuid import UUID
from fastapi import APIRouter, Body, Depends, Path, Response, status

from catalog.domain.entities.video import VideoCreate, VideoUpdate
from catalog.services.catalog_service import CatalogService
from shared.entities.catalog import VideoOut
from shared.entities.responses import ItemResponse, ListResponse
from shared.search import SearchInput
from shared.wiring import get_search_input, get_video_service

router = APIRouter(prefix="/videos", tags=["videos"])


@router.post("", summary="Create video", response_model=ItemResponse[VideoOut], status_code=status.HTTP_201_CREATED)
async def create_video(
    payload: VideoCreate,
    svc: CatalogService = Depends(get_video_service),
):
    return ItemResponse(data=await svc.create(payload))


@router.get(
    "",
    summary="List videos",
    description="Same paging/search/sort contract as every other catalog listing.",
    response_model=ListResponse[VideoOut],
)
async def list_videos(
    search_input: SearchInput = Depends(get_search_input),
    svc: CatalogService = Depends(get_video_service),
):
    return ListResponse.from_output(await svc.list(search_input))


@router.get("/{video_id}", summary="Get video by ID", response_model=ItemResponse[VideoOut])
async def get_video(
    video_id: UUID = Path(..., description="Video UUID"),
    svc: CatalogService = Depends(get_video_service),
):
    return ItemResponse(data=await svc.get(video_id))


@router.put(
    "/{video_id}",
    summary="Update video",
    description="Partially updates a video; `rating` must be one of `ER`, `L`, `10`, `12`, `14`, `16`, `18`.",
    response_model=ItemResponse[VideoOut],
)
async def update_video(
    video_id: UUID = Path(..., description="Video UUID"),
    payload: VideoUpdate = Body(...),
    svc: CatalogService = Depends(get_video_service),
):
    return ItemResponse(data=await svc.update(video_id, payload))


@router.delete("/{video_id}", summary="Delete video", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: UUID = Path(..., description="Video UUID"),
    svc: CatalogService = Depends(get_video_service),
):
    await svc.delete(video_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
