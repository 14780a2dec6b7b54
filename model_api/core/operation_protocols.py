"""Boundary Protocols — contract between the request pipeline and the business layer.

Invariants:
    - Each method receives a validated, conformed request
    - Classified failures are raised as ClassifiedError (Unauthorized, NotFound, Internal)
    - Any other exception is treated as an internal fault by the transport

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, the pure stages around them never do
"""

from typing import Protocol

from model_api.core.request_types import (
    CreateRequest,
    DeleteAck,
    DeleteRequest,
    GetRequest,
    ListRequest,
    Model,
    UpdateRequest,
)


class ModelOperations(Protocol):
    """One call per CRUD operation, implemented by the shell."""
    async def create_model(self, request: CreateRequest) -> Model: ...
    async def get_model(self, request: GetRequest) -> Model: ...
    async def list_models(self, request: ListRequest) -> list[Model]: ...
    async def update_model(self, request: UpdateRequest) -> Model: ...
    async def delete_model(self, request: DeleteRequest) -> DeleteAck: ...
