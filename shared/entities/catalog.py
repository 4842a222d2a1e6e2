from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, field_validator

from catalog.domain.entities.category import CategoryBase
from catalog.domain.entities.genre import GenreBase
from catalog.domain.entities.cast_member import CastMemberBase
from catalog.domain.entities.video import VideoBase


class CatalogOut(BaseModel):
    id: UUID
    created_at: datetime

    class Config:
        from_attributes = True

    @field_validator("created_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive values; they were stored as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class CategoryOut(CategoryBase, CatalogOut):
    pass


class GenreOut(GenreBase, CatalogOut):
    pass


class CastMemberOut(CastMemberBase, CatalogOut):
    pass


class VideoOut(VideoBase, CatalogOut):
    pass
