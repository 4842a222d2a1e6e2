from __future__ import annotations

from app.core.database.base import Base
from catalog.domain.models.mixins import CatalogEntityMixin


class Genre(CatalogEntityMixin, Base):
    __tablename__ = "genres"
