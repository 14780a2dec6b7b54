"""Request Conformance — idempotent normalization of validated requests.

Invariants:
    - All functions are PURE and IDEMPOTENT: conform(conform(r)) == conform(r)
    - Input must already have passed validation; nothing is re-checked here
    - Identifiers are lower-cased, text fields stripped, absent description -> ""

Design Decisions:
    - dataclasses.replace over mutation: request types are frozen
"""

from dataclasses import replace

from model_api.core.request_types import (
    CreateRequest,
    DeleteRequest,
    GetRequest,
    ListRequest,
    UpdateRequest,
)


def normalize_id(value: str) -> str:
    return value.lower()


def normalize_text(value: str | None) -> str:
    return (value or "").strip()


def conform_create(request: CreateRequest) -> CreateRequest:
    return replace(
        request,
        name=normalize_text(request.name),
        description=normalize_text(request.description),
    )


def conform_get(request: GetRequest) -> GetRequest:
    return replace(request, id=normalize_id(request.id))


def conform_list(request: ListRequest) -> ListRequest:
    return request


def conform_update(request: UpdateRequest) -> UpdateRequest:
    return replace(
        request,
        id=normalize_id(request.id),
        name=normalize_text(request.name),
        description=normalize_text(request.description),
    )


def conform_delete(request: DeleteRequest) -> DeleteRequest:
    return replace(request, id=normalize_id(request.id))
