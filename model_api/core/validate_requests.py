"""Request Validation — structural well-formedness checks, one per operation.

Invariants:
    - All functions are PURE: no IO, no async, no mutation
    - Each returns its input unchanged or raises ClassifiedError
    - Only InvalidRequestBody and InvalidID are raised here; Unauthorized and
      Internal belong to the business layer
    - Checks never depend on normalization (whitespace is tolerated, not stripped)

Design Decisions:
    - First failing check wins: one error per request, no aggregation
"""

from model_api.core.domain_types import is_canonical_id
from model_api.core.errors import InvalidIDError, InvalidRequestBodyError
from model_api.core.request_types import (
    CreateRequest,
    DeleteRequest,
    GetRequest,
    ListRequest,
    UpdateRequest,
)

NAME_MAX_LENGTH = 255


def check_id(value: str | None) -> None:
    """Identifier present and in canonical form."""
    if value is None:
        raise InvalidIDError("missing id")
    if not is_canonical_id(value):
        raise InvalidIDError()


def check_name(value: str | None) -> None:
    if value is None:
        raise InvalidRequestBodyError("invalid request body: name is required")
    if not isinstance(value, str):
        raise InvalidRequestBodyError("invalid request body: name must be a string")
    if not value.strip():
        raise InvalidRequestBodyError("invalid request body: name must not be empty")
    if len(value.strip()) > NAME_MAX_LENGTH:
        raise InvalidRequestBodyError(
            f"invalid request body: name exceeds {NAME_MAX_LENGTH} characters",
        )


def check_description(value: str | None) -> None:
    if value is not None and not isinstance(value, str):
        raise InvalidRequestBodyError(
            "invalid request body: description must be a string",
        )


# ─── Per-operation validators ────────────────────────────────────

def validate_create(request: CreateRequest) -> CreateRequest:
    check_name(request.name)
    check_description(request.description)
    return request


def validate_get(request: GetRequest) -> GetRequest:
    check_id(request.id)
    return request


def validate_list(request: ListRequest) -> ListRequest:
    return request


def validate_update(request: UpdateRequest) -> UpdateRequest:
    check_id(request.id)
    check_name(request.name)
    check_description(request.description)
    return request


def validate_delete(request: DeleteRequest) -> DeleteRequest:
    check_id(request.id)
    return request
