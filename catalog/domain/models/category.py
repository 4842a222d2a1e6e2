from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base
from catalog.domain.models.mixins import CatalogEntityMixin


class Category(CatalogEntityMixin, Base):
    __tablename__ = "categories"

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
