from __future__ import annotations
from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, Integer, String, Uuid, func, select
from sqlalchemy.orm import Mapped, mapped_column

from app.core.exceptions import EntityValidationError


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


class CatalogEntityMixin:
    """
    Columns shared by every catalog record: id, name, activity flag, creation time.

    id, created_at and seq are fixed at construction; name and is_active change
    through rename()/activate()/deactivate().
    """

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    # insertion order; ties in any sort key fall back to it
    seq: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    def __init__(self, **kwargs):
        kwargs.setdefault("id", uuid4())
        kwargs.setdefault("is_active", True)
        kwargs.setdefault("created_at", utcnow())
        kwargs.setdefault("seq", _next_seq(type(self)))
        if "name" in kwargs:
            kwargs["name"] = _valid_name(kwargs["name"])
        super().__init__(**kwargs)

    def rename(self, name: str) -> None:
        self.name = _valid_name(name)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False


def _next_seq(cls):
    # rendered inline in the INSERT, so rows flushed together still get increasing values
    return select(func.coalesce(func.max(cls.seq), 0) + 1).correlate(None).scalar_subquery()


def _valid_name(name) -> str:
    if name is None or not str(name).strip():
        raise EntityValidationError("name should not be empty")
    return str(name).strip()
