"""HTTP Transport — decode wire requests, encode pipeline results, map errors to status.

Invariants:
    - Decoders build request types only; they never run validation
    - Missing/invalid path id -> InvalidIDError; malformed JSON body -> InvalidRequestBodyError
    - status_for() is the single place translating ErrorKey -> HTTP status
    - Errors that are not ClassifiedError encode as 500 with a fixed message;
      their text never reaches the response body
    - Every JSON response carries content-type application/json; charset=utf-8

Design Decisions:
    - serve() mirrors a decode -> endpoint -> encode server: routes stay one line
    - Failures are logged here, once per request, with stage and error key
"""

import logging
from typing import Any, Awaitable, Callable

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.requests import Request

from model_api.core.domain_types import is_canonical_id
from model_api.core.errors import (
    ClassifiedError, ErrorKey, InvalidIDError, InvalidRequestBodyError,
)
from model_api.core.request_types import (
    CreateRequest,
    DeleteAck,
    DeleteRequest,
    GetRequest,
    ListRequest,
    Model,
    UpdateRequest,
)
from model_api.core.result import Failure, Result, Stage
from model_api.schemas.model import (
    CreateModelBody,
    DeleteAckResponse,
    ModelResponse,
    UpdateModelBody,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal error"

_STATUS_BY_KEY: dict[ErrorKey, int] = {
    ErrorKey.INVALID_REQUEST_BODY: status.HTTP_400_BAD_REQUEST,
    ErrorKey.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorKey.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKey.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class JSONUTF8Response(JSONResponse):
    media_type = "application/json; charset=utf-8"


# ─── Decode ──────────────────────────────────────────────────────

def _path_id(request: Request) -> str:
    model_id = request.path_params.get("id")
    if not model_id or not is_canonical_id(model_id):
        raise InvalidIDError()
    return model_id


async def _read_body(request: Request, schema: type[CreateModelBody]) -> Any:
    raw = await request.body()
    try:
        return schema.model_validate_json(raw)
    except ValidationError:
        raise InvalidRequestBodyError()


async def decode_create_request(request: Request) -> CreateRequest:
    body = await _read_body(request, CreateModelBody)
    return CreateRequest(name=body.name, description=body.description)


async def decode_get_request(request: Request) -> GetRequest:
    return GetRequest(id=_path_id(request))


async def decode_list_request(request: Request) -> ListRequest:
    return ListRequest()


async def decode_update_request(request: Request) -> UpdateRequest:
    body = await _read_body(request, UpdateModelBody)
    return UpdateRequest(id=body.id, name=body.name, description=body.description)


async def decode_delete_request(request: Request) -> DeleteRequest:
    return DeleteRequest(id=_path_id(request))


# ─── Encode ──────────────────────────────────────────────────────

def status_for(error: BaseException) -> int:
    """Map an error to its HTTP status. Unclassified errors are internal faults."""
    if isinstance(error, ClassifiedError):
        return _STATUS_BY_KEY.get(error.key, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_message(error: BaseException) -> str:
    if isinstance(error, ClassifiedError):
        return error.message
    return INTERNAL_ERROR_MESSAGE


def encode_error(error: BaseException) -> JSONUTF8Response:
    return JSONUTF8Response(
        status_code=status_for(error),
        content={"error": error_message(error)},
    )


def to_wire(value: Any) -> Any:
    """Serialize a business output to JSON-compatible data."""
    if isinstance(value, Model):
        return ModelResponse.from_model(value).model_dump(mode="json")
    if isinstance(value, DeleteAck):
        return DeleteAckResponse.from_ack(value).model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return jsonable_encoder(value)


def encode_success(value: Any) -> JSONUTF8Response:
    return JSONUTF8Response(status_code=status.HTTP_200_OK, content=to_wire(value))


def encode_result(result: Result) -> JSONUTF8Response:
    if result.failed:
        return encode_error(result.error)
    return encode_success(result.value)


# ─── Server ──────────────────────────────────────────────────────

Decoder = Callable[[Request], Awaitable[Any]]
Endpoint = Callable[[Any], Awaitable[Result]]


async def serve(
    request: Request, decode: Decoder, endpoint: Endpoint, operation: str,
) -> JSONUTF8Response:
    """Run one request through decode -> endpoint -> encode."""
    try:
        decoded = await decode(request)
    except ClassifiedError as exc:
        result: Result = Failure(exc, Stage.DECODE)
    else:
        result = await endpoint(decoded)

    response = encode_result(result)
    if result.failed:
        _log_failure(request, result, operation, response.status_code)
    return response


def _log_failure(
    request: Request, result: Failure, operation: str, status_code: int,
) -> None:
    error = result.error
    key = (
        getattr(error.key, "value", str(error.key))
        if isinstance(error, ClassifiedError) else ErrorKey.INTERNAL.value
    )
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        f"{operation} failed at {result.stage.value}: {error_message(error)}",
        extra={
            "operation": operation,
            "stage": result.stage.value,
            "error_key": key,
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
        },
    )
