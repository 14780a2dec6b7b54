"""Model ORM — persists the single CRUD resource.

Invariants:
    - id is a UUID primary key, assigned by the service on create
    - name is non-nullable, at most 255 chars
    - created_at never changes after insert; updated_at moves on every update

Design Decisions:
    - Generic Uuid type over the postgresql dialect type: same model runs on
      PostgreSQL (asyncpg) and SQLite (aiosqlite, tests)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from model_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ModelRecord(Base):
    __tablename__ = "models"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<ModelRecord {self.id} name={self.name!r}>"
