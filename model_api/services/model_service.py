"""Model Service — default SQLAlchemy-backed implementation of ModelOperations.

Invariants:
    - Receives only validated, conformed requests (canonical lower-case ids, stripped text)
    - Unknown id -> NotFoundError; storage failure -> InternalError after rollback
    - Every write commits before returning; nothing is cached between requests

Design Decisions:
    - One AsyncSession per request, injected by the route dependency
    - No authorization checks here: UnauthorizedError is left to deployments that need it
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from model_api.core.domain_types import new_model_id, parse_model_id
from model_api.core.errors import InternalError, NotFoundError
from model_api.core.request_types import (
    CreateRequest,
    DeleteAck,
    DeleteRequest,
    GetRequest,
    ListRequest,
    Model,
    UpdateRequest,
)
from model_api.models.model import ModelRecord

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_model(record: ModelRecord) -> Model:
    return Model(
        id=record.id,
        name=record.name,
        description=record.description,
        created_at=_as_utc(record.created_at),
        updated_at=_as_utc(record.updated_at),
    )


class ModelService:
    """CRUD over the models table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create_model(self, request: CreateRequest) -> Model:
        now = datetime.now(timezone.utc)
        record = ModelRecord(
            id=new_model_id(),
            name=request.name,
            description=request.description,
            created_at=now,
            updated_at=now,
        )
        self._db.add(record)
        await self._commit("create")
        logger.info("Model created", extra={"model_id": str(record.id)})
        return to_model(record)

    async def get_model(self, request: GetRequest) -> Model:
        record = await self._get_or_raise(request.id)
        return to_model(record)

    async def list_models(self, request: ListRequest) -> list[Model]:
        result = await self._db.execute(
            select(ModelRecord).order_by(ModelRecord.created_at, ModelRecord.id),
        )
        return [to_model(r) for r in result.scalars().all()]

    async def update_model(self, request: UpdateRequest) -> Model:
        record = await self._get_or_raise(request.id)
        record.name = request.name
        record.description = request.description
        record.updated_at = datetime.now(timezone.utc)
        await self._commit("update")
        logger.info("Model updated", extra={"model_id": str(record.id)})
        return to_model(record)

    async def delete_model(self, request: DeleteRequest) -> DeleteAck:
        record = await self._get_or_raise(request.id)
        await self._db.delete(record)
        await self._commit("delete")
        logger.info("Model deleted", extra={"model_id": str(record.id)})
        return DeleteAck(id=record.id)

    async def _get_or_raise(self, model_id: str) -> ModelRecord:
        record = await self._db.get(ModelRecord, parse_model_id(model_id))
        if record is None:
            raise NotFoundError()
        return record

    async def _commit(self, operation: str) -> None:
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Failed to commit {operation}: {e}",
                extra={"operation": operation},
            )
            raise InternalError("database operation failed")
