from __future__ import annotations
from enum import IntEnum

from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base
from catalog.domain.models.mixins import CatalogEntityMixin


class CastMemberType(IntEnum):
    director = 1
    actor = 2


class CastMember(CatalogEntityMixin, Base):
    __tablename__ = "cast_members"

    type: Mapped[CastMemberType] = mapped_column(
        SAEnum(CastMemberType, name="cast_member_type"),
        nullable=False,
    )
