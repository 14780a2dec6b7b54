"""Model Schemas — JSON bodies for create/update and the success payloads.

Invariants:
    - Request bodies: every field optional, unknown keys ignored, wrong JSON types rejected
    - Response payloads serialize ids as canonical UUID text and times as ISO 8601
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from model_api.core.request_types import DeleteAck, Model


class CreateModelBody(BaseModel):
    """POST body. An id sent by the client is ignored: the system assigns it."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None


class UpdateModelBody(CreateModelBody):
    """PUT body; carries the id of the model being replaced."""
    id: str | None = None


class ModelResponse(BaseModel):
    id: UUID
    name: str
    description: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, model: Model) -> "ModelResponse":
        return cls(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class DeleteAckResponse(BaseModel):
    id: UUID
    deleted: bool

    @classmethod
    def from_ack(cls, ack: DeleteAck) -> "DeleteAckResponse":
        return cls(id=ack.id, deleted=ack.deleted)
