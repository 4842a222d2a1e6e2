from __future__ import annotations
from enum import Enum

from sqlalchemy import Boolean, Enum as SAEnum, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base
from catalog.domain.models.mixins import CatalogEntityMixin


class Rating(str, Enum):
    ER = "ER"
    L = "L"
    AGE_10 = "10"
    AGE_12 = "12"
    AGE_14 = "14"
    AGE_16 = "16"
    AGE_18 = "18"


class Video(CatalogEntityMixin, Base):
    __tablename__ = "videos"

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    year_launched: Mapped[int | None] = mapped_column(Integer, nullable=True)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    opened: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    rating: Mapped[Rating] = mapped_column(SAEnum(Rating, name="video_rating"), nullable=False, default=Rating.L)
