"""Model Routes — routing table for the CRUD resource.

Invariants:
    - One pipeline per (method, path): POST/GET/PUT on /api/model/v1,
      GET/DELETE on /api/model/v1/{id}
    - Handlers take the raw Request: decoding (and its error classification)
      happens in api/transport.py, not in FastAPI parameter parsing
    - The business layer is injected via get_model_operations (override in tests)
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request

from model_api.api.transport import (
    JSONUTF8Response,
    decode_create_request,
    decode_delete_request,
    decode_get_request,
    decode_list_request,
    decode_update_request,
    serve,
)
from model_api.core.operation_protocols import ModelOperations
from model_api.infrastructure.database import get_db
from model_api.services.endpoints import Endpoints, make_endpoints
from model_api.services.model_service import ModelService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/model/v1", tags=["models"])


async def get_model_operations(
    db: AsyncSession = Depends(get_db),
) -> ModelOperations:
    return ModelService(db)


def get_endpoints(
    ops: ModelOperations = Depends(get_model_operations),
) -> Endpoints:
    return make_endpoints(ops)


@router.post("", response_class=JSONUTF8Response)
async def create_model(
    request: Request, endpoints: Endpoints = Depends(get_endpoints),
):
    """Create a model; the id is assigned by the system."""
    return await serve(request, decode_create_request, endpoints.create, "create")


@router.get("/{id}", response_class=JSONUTF8Response)
async def get_model(
    request: Request, endpoints: Endpoints = Depends(get_endpoints),
):
    return await serve(request, decode_get_request, endpoints.get, "get")


@router.get("", response_class=JSONUTF8Response)
async def list_models(
    request: Request, endpoints: Endpoints = Depends(get_endpoints),
):
    return await serve(request, decode_list_request, endpoints.list, "list")


@router.put("", response_class=JSONUTF8Response)
async def update_model(
    request: Request, endpoints: Endpoints = Depends(get_endpoints),
):
    """Replace name/description of the model whose id is in the body."""
    return await serve(request, decode_update_request, endpoints.update, "update")


@router.delete("/{id}", response_class=JSONUTF8Response)
async def delete_model(
    request: Request, endpoints: Endpoints = Depends(get_endpoints),
):
    return await serve(request, decode_delete_request, endpoints.delete, "delete")
